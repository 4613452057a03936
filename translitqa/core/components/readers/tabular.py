"""
Delimited case-table reader.

The format is a loose CSV: a header line, then one record per line with
``"``-wrapped fields allowed to contain the delimiter. A quote only toggles
quoted mode; doubled quotes are not unescaped.
"""

import logging
import time
from pathlib import Path
from typing import List

from translitqa.core.components.common import ComponentResult
from translitqa.core.components.readers.base import Reader

logger = logging.getLogger(__name__)

DELIMITER = ","
QUOTE = '"'
MIN_FIELDS = 4


def split_record(line: str) -> List[str]:
    """Split one line into trimmed fields.

    An unbalanced quote swallows the rest of the line into the current field.
    """
    fields = []
    current = []
    inside_quotes = False

    for char in line:
        if char == QUOTE:
            inside_quotes = not inside_quotes
        elif char == DELIMITER and not inside_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def parse_records(text: str) -> List[List[str]]:
    """Parse raw table text into records, skipping the header line.

    Records with fewer than four fields are dropped.
    """
    lines = [line for line in text.split("\n") if line.strip()]

    records = []
    for line_no, line in enumerate(lines[1:], start=2):
        fields = split_record(line)
        if len(fields) < MIN_FIELDS:
            logger.debug(
                f"Dropping row {line_no}: {len(fields)} fields < {MIN_FIELDS}"
            )
            continue
        records.append(fields)

    return records


class CaseTableReader(Reader):
    """Reader component for the delimited test-case table."""

    def __init__(self, name: str = "case_table_reader", config: dict = None):
        super().__init__(name, config)

    def validate_input(self, input_data) -> List[str]:
        """Validate that input is an existing file path."""
        errors = []

        if not isinstance(input_data, (str, Path)):
            errors.append("Input must be a file path")
            return errors

        path = Path(input_data)
        if not path.exists():
            errors.append(f"Path does not exist: {path}")
        elif not path.is_file():
            errors.append(f"Path is not a file: {path}")

        return errors

    def read(self, source: str) -> ComponentResult:
        """Read and parse the case table at ``source``."""
        start_time = time.time()

        try:
            text = Path(source).read_text(encoding=self.config.get("encoding", "utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            return ComponentResult(
                data=[],
                errors=[f"Failed to read case table: {e}"],
                execution_time_ms=(time.time() - start_time) * 1000,
            )

        records = parse_records(text)
        data_lines = max(sum(1 for line in text.split("\n") if line.strip()) - 1, 0)

        metadata = {
            "source_path": str(source),
            "lines_read": data_lines,
            "records_parsed": len(records),
            "records_dropped": data_lines - len(records),
        }

        return ComponentResult(
            data=records,
            metadata=metadata,
            execution_time_ms=(time.time() - start_time) * 1000,
        )
