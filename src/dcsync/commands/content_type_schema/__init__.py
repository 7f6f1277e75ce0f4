"""Content type schema commands."""

from .get import render_schema
from .import_schemas import (
    do_create,
    do_update,
    handler,
    process_schemas,
    stored_schema_mapper,
)

__all__ = [
    "do_create",
    "do_update",
    "handler",
    "process_schemas",
    "render_schema",
    "stored_schema_mapper",
]
