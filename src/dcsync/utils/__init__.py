"""Utility modules for dcsync."""

from .console import console
from .table import RowSink, TableStream

__all__ = ["console", "RowSink", "TableStream"]
