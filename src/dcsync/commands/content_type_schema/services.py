"""Create and update calls for content type schemas."""

from __future__ import annotations

import json
from dataclasses import replace
from typing import Optional

from ...client import DynamicContentClient, Hub
from ...schemas.models import ContentTypeSchema, ValidationLevel


def schema_id_from_body(body: str) -> Optional[str]:
    """Return the ``$id`` declared by a JSON schema body, if any."""
    try:
        data = json.loads(body)
    except ValueError:
        return None
    schema_id = data.get("$id") if isinstance(data, dict) else None
    return schema_id if isinstance(schema_id, str) else None


def create_content_type_schema(
    body: str,
    validation_level: ValidationLevel,
    hub: Hub,
    schema_id: Optional[str] = None,
) -> ContentTypeSchema:
    schema = ContentTypeSchema(
        schema_id=schema_id or schema_id_from_body(body),
        body=body,
        validation_level=validation_level,
    )
    return hub.create_content_type_schema(schema)


def update_content_type_schema(
    client: DynamicContentClient,
    schema: ContentTypeSchema,
    body: str,
    validation_level: ValidationLevel,
) -> ContentTypeSchema:
    updated = replace(schema, body=body, validation_level=validation_level)
    return client.content_type_schemas.update(updated)
