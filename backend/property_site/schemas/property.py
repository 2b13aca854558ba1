from __future__ import annotations

from pydantic import BaseModel


class PropertyOut(BaseModel):
    """A listing in the shape the front-end cards expect."""

    id: int
    status: str
    type: str
    price: str
    description: str
    address: str
    image: str
    title: str
    area: int = 0
    bedrooms: int = 0
    bathrooms: int = 0


class PropertyDeleted(BaseModel):
    message: str
