"""
Writer components for persisting case results.
"""

from translitqa.core.components.writers.base import Writer
from translitqa.core.components.writers.result_sink import (
    RESULTS_HEADER,
    CsvResultSink,
    escape_field,
    format_row,
)

__all__ = [
    "Writer",
    "CsvResultSink",
    "RESULTS_HEADER",
    "escape_field",
    "format_row",
]
