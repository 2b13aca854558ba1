from __future__ import annotations

import logging

import pydantic
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from property_site.core.errors import StorageError, ValidationError
from property_site.crud.contact_message import create_contact_message, list_contact_messages
from property_site.db.session import get_db
from property_site.schemas.contact import ContactCreate, ContactCreated, ContactOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contact"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_contact_body(request: Request) -> ContactCreate:
    """Accept the contact form either as JSON or as a plain HTML form post."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        data = {k: v for k, v in form.items() if isinstance(v, str)}
    else:
        try:
            data = await request.json()
        except ValueError:
            raise ValidationError("Request body must be JSON or form data.")

    if not isinstance(data, dict):
        raise ValidationError("Request body must be an object.")
    try:
        return ContactCreate.model_validate(data)
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationError(f"{loc}: {first.get('msg')}") from e


@router.post("/contact", response_model=ContactCreated)
def submit_contact(
    message_in: ContactCreate = Depends(read_contact_body),
    db: Session = Depends(get_db),
) -> ContactCreated:
    if not (message_in.name and message_in.email and message_in.subject and message_in.message):
        raise ValidationError("All fields are required.")

    try:
        cm = create_contact_message(
            db,
            name=message_in.name,
            email=message_in.email,
            subject=message_in.subject,
            message=message_in.message,
        )
    except StorageError as e:
        raise StorageError("Database error") from e

    logger.info("contact_message_saved id=%s", cm.id)
    return ContactCreated(message="Message saved successfully", id=cm.id)


@router.get("/messages", response_model=list[ContactOut])
def read_messages(db: Session = Depends(get_db)) -> list[ContactOut]:
    try:
        return list_contact_messages(db)
    except StorageError as e:
        raise StorageError("Database error") from e
