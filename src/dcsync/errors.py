"""Exceptions raised by dcsync."""

from __future__ import annotations

from typing import Dict, Optional


class DcsyncError(Exception):
    """Base class for errors reported to the user by the CLI"""


class ConfigurationError(DcsyncError):
    """Raise when required hub configuration is missing or malformed"""


class SchemaLoadError(DcsyncError):
    """Raise when a directory of schema definitions cannot be read"""


class HubApiError(DcsyncError):
    """Raise when the hub API answers with a non-success status"""

    def __init__(self, status_code: int, path: str, detail: str = "") -> None:
        self.status_code = status_code
        self.path = path
        self.detail = detail
        super().__init__(f"Hub API error {status_code} for {path}: {detail}")


class ResolutionError(DcsyncError):
    """Raise when one or more schema bodies could not be resolved"""

    def __init__(self, errors: Dict[str, str]) -> None:
        self.errors = dict(errors)
        lines = "\n".join(
            f"* {filename} -> {error}" for filename, error in self.errors.items()
        )
        super().__init__(
            f"Unable to resolve the body for the following files:\n{lines}"
        )


class CreationError(DcsyncError):
    """Raise when the hub rejects a new content type schema"""

    def __init__(self, body: Optional[str], cause: BaseException) -> None:
        self.body = body
        super().__init__(
            f"Error registering content type schema with body: {body}\n\n{cause}"
        )


class UpdateError(DcsyncError):
    """Raise when an existing content type schema cannot be fetched or updated"""

    def __init__(self, schema_id: Optional[str], cause: BaseException) -> None:
        self.schema_id = schema_id
        super().__init__(
            f"Error updating content type schema {schema_id or '<unknown>'}: {cause}"
        )


class HubResponseError(DcsyncError):
    """Raise when the hub answers with a document dcsync cannot interpret"""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Unexpected hub response for {path}: {detail}")
