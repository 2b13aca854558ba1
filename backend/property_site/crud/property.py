from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from property_site.core.errors import StorageError, driver_message
from property_site.models.property import Property

logger = logging.getLogger(__name__)


def create_property(
    db: Session,
    *,
    status: str,
    category: str,
    price: str,
    description: str,
    location: str,
    image: str,
) -> Property:
    prop = Property(
        status=status,
        category=category,
        price=price,
        description=description,
        location=location,
        image=image,
    )
    try:
        db.add(prop)
        db.commit()
        db.refresh(prop)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("property_insert_failed image=%s", image)
        raise StorageError(driver_message(e)) from e
    return prop


def list_properties(db: Session) -> list[Property]:
    stmt = select(Property).order_by(Property.created_at.desc(), Property.id.desc())
    try:
        return list(db.execute(stmt).scalars().all())
    except SQLAlchemyError as e:
        logger.exception("property_list_failed")
        raise StorageError(driver_message(e)) from e


def delete_property(db: Session, *, property_id: int) -> bool:
    """Delete one listing by id. Returns False when no row matched.

    The image file referenced by the row is left on disk.
    """
    try:
        result = db.execute(delete(Property).where(Property.id == property_id))
        db.commit()
    except OverflowError:
        # Outside the 64-bit INTEGER range, so no row can carry this id.
        db.rollback()
        return False
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("property_delete_failed property_id=%s", property_id)
        raise StorageError(driver_message(e)) from e
    return result.rowcount > 0
