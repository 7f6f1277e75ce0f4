"""Dynamic Content management API client for dcsync."""

from .hub import ContentTypeSchemas, DynamicContentClient, Hub, Hubs, Page
from .paginator import paginate

__all__ = [
    "ContentTypeSchemas",
    "DynamicContentClient",
    "Hub",
    "Hubs",
    "Page",
    "paginate",
]
