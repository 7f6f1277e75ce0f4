"""Resolve schema bodies that point at a file or URL instead of inline JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import requests

from .models import ContentTypeSchema

logger = logging.getLogger(__name__)

FILE_PREFIX = "file://"


def _is_json(text: str) -> bool:
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def _is_url(text: str) -> bool:
    return text.startswith("http://") or text.startswith("https://")


def resolve_body(
    body: str,
    directory: Union[str, Path],
    session: Optional[requests.Session] = None,
    timeout: float = 30,
) -> str:
    """Return the JSON text a body refers to.

    Inline JSON is returned unchanged, URLs are downloaded and anything else is
    read as a path relative to ``directory``.
    """
    if _is_json(body):
        return body

    if _is_url(body):
        getter = session.get if session is not None else requests.get
        resp = getter(body, timeout=timeout)
        if resp.status_code >= 300:
            raise RuntimeError(f"HTTP {resp.status_code} fetching {body}")
        return resp.text

    path_str = body[len(FILE_PREFIX) :] if body.startswith(FILE_PREFIX) else body
    path = Path(path_str)
    if not path.is_absolute():
        path = Path(directory) / path
    with path.open("r", encoding="utf-8") as f:
        return f.read()


def resolve_schema_body(
    schemas: Dict[str, ContentTypeSchema],
    directory: Union[str, Path],
    session: Optional[requests.Session] = None,
    timeout: float = 30,
) -> Tuple[Dict[str, ContentTypeSchema], Dict[str, str]]:
    """Resolve the body of every schema.

    Returns ``(resolved, errors)`` keyed by file name. A schema whose body
    fails to resolve is kept unchanged in ``resolved`` and its error recorded.
    """
    resolved: Dict[str, ContentTypeSchema] = {}
    errors: Dict[str, str] = {}

    for filename, schema in schemas.items():
        if schema.body:
            try:
                body = resolve_body(
                    schema.body, directory, session=session, timeout=timeout
                )
                schema = replace(schema, body=body)
            except (OSError, ValueError, requests.RequestException, RuntimeError) as e:
                logger.debug(f"Failed to resolve body for {filename}: {e}")
                errors[filename] = str(e)
        resolved[filename] = schema

    return resolved, errors
