from __future__ import annotations

from fastapi import APIRouter

from property_site.api.api_v1.endpoints import properties

api_router = APIRouter()

api_router.include_router(properties.router)
