from __future__ import annotations

from property_site.schemas.contact import ContactCreate, ContactCreated, ContactOut
from property_site.schemas.property import PropertyDeleted, PropertyOut

__all__ = [
    "ContactCreate",
    "ContactCreated",
    "ContactOut",
    "PropertyOut",
    "PropertyDeleted",
]
