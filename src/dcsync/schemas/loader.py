"""Read schema definitions from a directory of JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Union

from ..errors import SchemaLoadError
from .models import ContentTypeSchema

logger = logging.getLogger(__name__)


def load_json_from_directory(
    directory: Union[str, Path],
) -> Dict[str, ContentTypeSchema]:
    """Load every ``*.json`` file directly inside ``directory``.

    Returns records keyed by file name, in file name order.
    """
    root = Path(directory)
    if not root.is_dir():
        raise SchemaLoadError(f"Directory not found: {root}")

    loaded: Dict[str, ContentTypeSchema] = {}
    for path in sorted(root.glob("*.json")):
        if not path.is_file():
            continue
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SchemaLoadError(f"Unable to read {path.name}: {e}") from e
        if not isinstance(data, dict):
            raise SchemaLoadError(f"{path.name} does not contain a JSON object")
        try:
            loaded[path.name] = ContentTypeSchema.from_dict(data)
        except ValueError as e:
            raise SchemaLoadError(f"Invalid schema definition in {path.name}: {e}") from e
        logger.debug(f"Loaded {path.name}")

    logger.info(f"Loaded {len(loaded)} schema definitions from {root}")
    return loaded
