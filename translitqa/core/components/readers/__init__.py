"""Reader components for loading the case table."""

from translitqa.core.components.readers.base import Reader
from translitqa.core.components.readers.tabular import (
    CaseTableReader,
    parse_records,
    split_record,
)

__all__ = [
    "Reader",
    "CaseTableReader",
    "parse_records",
    "split_record",
]
