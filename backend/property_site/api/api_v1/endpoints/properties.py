from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from property_site.crud.property import list_properties
from property_site.db.session import get_db
from property_site.models.property import Property
from property_site.schemas.property import PropertyOut
from property_site.services.uploads import upload_url

router = APIRouter(prefix="/properties", tags=["properties"])

TITLE_LENGTH = 20


def _property_to_out(prop: Property) -> PropertyOut:
    # Area and room counts are not collected by the admin form yet.
    return PropertyOut(
        id=prop.id,
        status=prop.status,
        type=prop.category,
        price=prop.price,
        description=prop.description,
        address=prop.location,
        image=upload_url(prop.image),
        title=prop.description[:TITLE_LENGTH] + "...",
        area=0,
        bedrooms=0,
        bathrooms=0,
    )


@router.get("", response_model=list[PropertyOut])
def read_properties(db: Session = Depends(get_db)) -> list[PropertyOut]:
    return [_property_to_out(p) for p in list_properties(db)]
