from __future__ import annotations

from property_site.models.contact_message import ContactMessage
from property_site.models.property import Property

__all__ = ["ContactMessage", "Property"]
