"""Content type schema models, loading and body resolution."""

from .loader import load_json_from_directory
from .models import ContentTypeSchema, ImportResult, UpdateStatus, ValidationLevel
from .resolver import resolve_schema_body

__all__ = [
    "ContentTypeSchema",
    "ImportResult",
    "UpdateStatus",
    "ValidationLevel",
    "load_json_from_directory",
    "resolve_schema_body",
]
