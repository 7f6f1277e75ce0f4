"""Content type schema records as stored on a hub and on disk."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Literal, Optional


class ValidationLevel(str, Enum):
    CONTENT_TYPE = "CONTENT_TYPE"
    SLOT = "SLOT"
    PARTIAL = "PARTIAL"


class UpdateStatus(str, Enum):
    SKIPPED = "SKIPPED"
    UPDATED = "UPDATED"


ImportResult = Literal["CREATED", "UPDATED", "UP-TO-DATE"]


# JSON key -> attribute name for the fields the hub sends alongside the schema
_METADATA_FIELDS = {
    "version": "version",
    "status": "status",
    "createdBy": "created_by",
    "createdDate": "created_date",
    "lastModifiedBy": "last_modified_by",
    "lastModifiedDate": "last_modified_date",
}


@dataclass(frozen=True)
class ContentTypeSchema:
    """A content type schema definition.

    ``id`` is assigned by the hub and is absent until the schema has been
    created remotely. ``schema_id`` is the logical key shared by local files
    and remote records.
    """

    schema_id: Optional[str] = None
    body: Optional[str] = None
    validation_level: Optional[ValidationLevel] = None
    id: Optional[str] = None
    version: Optional[int] = None
    status: Optional[str] = None
    created_by: Optional[str] = None
    created_date: Optional[str] = None
    last_modified_by: Optional[str] = None
    last_modified_date: Optional[str] = None

    @property
    def is_saved(self) -> bool:
        return bool(self.id)

    def with_id(self, id: Optional[str]) -> "ContentTypeSchema":
        return replace(self, id=id)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContentTypeSchema":
        level = data.get("validationLevel")
        body = data.get("body")
        if body is not None and not isinstance(body, str):
            raise ValueError("body must be a string")
        kwargs: Dict[str, Any] = {
            "id": data.get("id") or None,
            "schema_id": data.get("schemaId"),
            "body": body,
            "validation_level": ValidationLevel(level) if level else None,
        }
        for key, attr in _METADATA_FIELDS.items():
            if key in data:
                kwargs[attr] = data[key]
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the hub's camelCase keys, omitting unset fields."""
        out: Dict[str, Any] = {}
        if self.id:
            out["id"] = self.id
        if self.schema_id is not None:
            out["schemaId"] = self.schema_id
        if self.body is not None:
            out["body"] = self.body
        if self.validation_level is not None:
            out["validationLevel"] = self.validation_level.value
        for key, attr in _METADATA_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                out[key] = value
        return out
