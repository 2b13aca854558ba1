from __future__ import annotations

from fastapi import APIRouter

from property_site.api.site import contact, listings

site_router = APIRouter()

site_router.include_router(contact.router)
site_router.include_router(listings.router)
