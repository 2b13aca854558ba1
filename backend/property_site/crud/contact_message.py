from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from property_site.core.errors import StorageError, driver_message
from property_site.models.contact_message import ContactMessage

logger = logging.getLogger(__name__)


def create_contact_message(
    db: Session,
    *,
    name: str,
    email: str,
    subject: str,
    message: str,
) -> ContactMessage:
    cm = ContactMessage(name=name, email=email, subject=subject, message=message)
    try:
        db.add(cm)
        db.commit()
        db.refresh(cm)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("contact_message_insert_failed email=%s", email)
        raise StorageError(driver_message(e)) from e
    return cm


def list_contact_messages(db: Session) -> list[ContactMessage]:
    stmt = select(ContactMessage).order_by(
        ContactMessage.created_at.desc(),
        ContactMessage.id.desc(),
    )
    try:
        return list(db.execute(stmt).scalars().all())
    except SQLAlchemyError as e:
        logger.exception("contact_message_list_failed")
        raise StorageError(driver_message(e)) from e
