from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import PlainTextResponse, RedirectResponse
from sqlalchemy.orm import Session

from property_site.core.config import settings
from property_site.core.errors import NotFoundError, PartialWriteError, StorageError
from property_site.crud.property import create_property, delete_property
from property_site.db.session import get_db
from property_site.models.property import Property
from property_site.schemas.property import PropertyDeleted
from property_site.services.uploads import remove_upload, save_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["listings"])

MISSING_FIELDS_TEXT = "All fields are required and a photo must be uploaded."
SAVE_FAILED_TEXT = "An error occurred while saving the listing."


def _insert_listing(db: Session, *, image: str, **fields: str) -> Property:
    try:
        return create_property(db, image=image, **fields)
    except StorageError as e:
        raise PartialWriteError(str(e), filename=image) from e


@router.post("/add-property")
def add_property(
    db: Session = Depends(get_db),
    status: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
):
    # The file is written before the form fields are checked, so a rejected
    # submission leaves it behind unless CLEANUP_FAILED_UPLOADS is set.
    filename = save_upload(image) if image is not None and image.filename else None

    if not (status and category and price and description and location) or filename is None:
        if filename is not None and settings.CLEANUP_FAILED_UPLOADS:
            remove_upload(filename)
        logger.warning("add_property_rejected upload=%s", filename)
        return PlainTextResponse(MISSING_FIELDS_TEXT, status_code=400)

    try:
        prop = _insert_listing(
            db,
            image=filename,
            status=status,
            category=category,
            price=price,
            description=description,
            location=location,
        )
    except PartialWriteError as e:
        if settings.CLEANUP_FAILED_UPLOADS:
            remove_upload(e.filename)
            logger.error("add_property_failed upload_removed=%s error=%s", e.filename, e.message)
            return PlainTextResponse(SAVE_FAILED_TEXT, status_code=500)
        # Redirect anyway; the image stays on disk without a listing row.
        logger.error("add_property_failed orphaned_upload=%s error=%s", e.filename, e.message)
    else:
        logger.info("property_saved id=%s image=%s", prop.id, prop.image)

    return RedirectResponse(settings.ADMIN_REDIRECT_URL, status_code=302)


@router.delete("/delete-property/{property_id}", response_model=PropertyDeleted)
def remove_property(property_id: int, db: Session = Depends(get_db)) -> PropertyDeleted:
    try:
        ok = delete_property(db, property_id=property_id)
    except StorageError as e:
        raise StorageError("An error occurred while deleting.") from e

    if not ok:
        raise NotFoundError("Listing not found.")

    logger.info("property_deleted id=%s", property_id)
    return PropertyDeleted(message="Listing deleted successfully.")
