"""Import content type schemas from a directory into a hub.

Local definitions are matched to stored schemas by ``schemaId``. Matches are
updated when they differ from the stored copy; everything else is created.
One table row is printed per schema as soon as it has been processed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from ...client import DynamicContentClient, Hub, paginate
from ...config import Settings
from ...errors import CreationError, ResolutionError, UpdateError
from ...schemas import load_json_from_directory, resolve_schema_body
from ...schemas.models import (
    ContentTypeSchema,
    ImportResult,
    UpdateStatus,
    ValidationLevel,
)
from ...utils import RowSink, TableStream
from .services import create_content_type_schema, update_content_type_schema

logger = logging.getLogger(__name__)

HEADER = ["ID", "Schema ID", "Result"]


def stored_schema_mapper(
    schema: ContentTypeSchema, stored_schemas: Sequence[ContentTypeSchema]
) -> ContentTypeSchema:
    """Give ``schema`` the hub id of the stored schema with the same schemaId."""
    found = next(
        (stored for stored in stored_schemas if stored.schema_id == schema.schema_id),
        None,
    )
    return schema.with_id(found.id) if found else schema


def do_create(hub: Hub, schema: ContentTypeSchema) -> ContentTypeSchema:
    try:
        return create_content_type_schema(
            schema.body or "",
            schema.validation_level or ValidationLevel.CONTENT_TYPE,
            hub,
            schema_id=schema.schema_id,
        )
    except Exception as err:
        raise CreationError(schema.body, err) from err


def equals(a: ContentTypeSchema, b: ContentTypeSchema) -> bool:
    return (
        a.id == b.id
        and a.schema_id == b.schema_id
        and a.body == b.body
        and a.validation_level == b.validation_level
    )


def do_update(
    client: DynamicContentClient, schema: ContentTypeSchema
) -> Tuple[ContentTypeSchema, UpdateStatus]:
    try:
        retrieved = client.content_type_schemas.get(schema.id or "")
        if equals(retrieved, schema):
            return retrieved, UpdateStatus.SKIPPED
        updated = update_content_type_schema(
            client,
            retrieved,
            schema.body or "",
            schema.validation_level or ValidationLevel.CONTENT_TYPE,
        )
        return updated, UpdateStatus.UPDATED
    except Exception as err:
        raise UpdateError(schema.schema_id, err) from err


def process_schemas(
    schemas_to_process: Sequence[ContentTypeSchema],
    client: DynamicContentClient,
    hub: Hub,
    sink: Optional[RowSink] = None,
) -> List[Tuple[ContentTypeSchema, ImportResult]]:
    table_stream = sink if sink is not None else TableStream()
    table_stream.write(HEADER)

    results: List[Tuple[ContentTypeSchema, ImportResult]] = []
    for schema in schemas_to_process:
        status: ImportResult
        if schema.is_saved:
            content_type_schema, update_status = do_update(client, schema)
            status = (
                "UP-TO-DATE" if update_status == UpdateStatus.SKIPPED else "UPDATED"
            )
        else:
            content_type_schema = do_create(hub, schema)
            status = "CREATED"
        logger.info(f"{schema.schema_id}: {status}")
        table_stream.write(
            [content_type_schema.id or "", content_type_schema.schema_id or "", status]
        )
        results.append((content_type_schema, status))
    return results


def handler(
    directory: Union[str, Path],
    settings: Settings,
    client: Optional[DynamicContentClient] = None,
    sink: Optional[RowSink] = None,
) -> List[Tuple[ContentTypeSchema, ImportResult]]:
    """Load, resolve and reconcile every schema in ``directory``."""
    if client is None:
        client = DynamicContentClient(settings.require_hub())
    hub = client.hubs.get(settings.hub_id or "")

    schemas = load_json_from_directory(directory)
    resolved_schemas, resolve_errors = resolve_schema_body(
        schemas, directory, session=client.session, timeout=settings.timeout
    )
    if resolve_errors:
        raise ResolutionError(resolve_errors)

    stored_schemas = paginate(hub.list_content_type_schemas)
    logger.info(f"Found {len(stored_schemas)} stored schemas on hub {hub.id}")
    schemas_to_process = [
        stored_schema_mapper(resolved, stored_schemas)
        for resolved in resolved_schemas.values()
    ]

    return process_schemas(schemas_to_process, client, hub, sink=sink)
