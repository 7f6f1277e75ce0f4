"""Show a single content type schema."""

from __future__ import annotations

import json
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...schemas.models import ContentTypeSchema
from ...utils import console as default_console


def render_schema(
    schema: ContentTypeSchema, as_json: bool = False, console: Optional[Console] = None
) -> None:
    """Print ``schema`` as a property table, or as JSON when ``as_json``."""
    out = console or default_console
    data = schema.to_dict()
    if as_json:
        out.print_json(json.dumps(data))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Property")
    table.add_column("Value", width=100, overflow="fold")
    for key, value in data.items():
        table.add_row(key, Text(str(value)))
    out.print(table)
