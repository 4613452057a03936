"""
Append-only results table.

One sink instance is shared by every case executor in a process. Rows are
appended with a single ``os.write`` on an ``O_APPEND`` descriptor so lines from
concurrent workers never interleave, and the header is created atomically so
no worker can observe a table without it.
"""

import logging
import os
import tempfile
import threading
import time
from pathlib import Path
from typing import Union

from translitqa.core.components.common import ComponentResult
from translitqa.core.components.writers.base import Writer
from translitqa.types.test_case import ResultRecord

logger = logging.getLogger(__name__)

RESULTS_HEADER = (
    "TC ID,Test Case Name,Input,Expected Output,Actual Output,"
    "Status (PASS/FAIL),Remarks,What is covered by the test\n"
)


def escape_field(value: str) -> str:
    """Wrap in quotes, doubling any embedded quote."""
    return '"' + value.replace('"', '""') + '"'


def format_row(record: ResultRecord) -> str:
    """Serialize a record as one results-table line (newline included)."""
    return ",".join(
        [
            escape_field(record.case_id),
            escape_field(record.description),
            escape_field(record.input),
            escape_field(record.expected_output),
            escape_field(record.actual_output),
            record.status.value,
            escape_field(record.remark),
            '""',
        ]
    ) + "\n"


class CsvResultSink(Writer):
    """
    Writer component for the cumulative results table.

    ``ensure_header`` never touches an existing table, so results accumulate
    across runs until the file is removed externally.
    """

    _lock = threading.Lock()

    def __init__(self, path: Union[str, Path], name: str = "csv_result_sink", config: dict = None):
        super().__init__(name, config)
        self.path = Path(path)
        self._header_ready = False

    def ensure_header(self) -> bool:
        """
        Create the table with its header if it does not exist.

        Returns:
            True if this call created the table, False if it already existed
        """
        with self._lock:
            if self._header_ready:
                return False
            created = self._create_if_absent()
            self._header_ready = True

        if created:
            logger.info(f"Created results table {self.path}")
        return created

    def _create_if_absent(self) -> bool:
        if self.path.exists():
            return False

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(RESULTS_HEADER)
            # link() fails if the target exists, so only one process wins.
            os.link(tmp_name, self.path)
            return True
        except FileExistsError:
            return False
        finally:
            os.unlink(tmp_name)

    def append(self, record: ResultRecord) -> None:
        """Append one record as a single atomic write. OSError propagates."""
        if not self._header_ready:
            self.ensure_header()

        payload = format_row(record).encode("utf-8")
        with self._lock:
            fd = os.open(self.path, os.O_WRONLY | os.O_APPEND)
            try:
                written = os.write(fd, payload)
            finally:
                os.close(fd)

        if written != len(payload):
            raise OSError(
                f"Short write to {self.path}: {written} of {len(payload)} bytes"
            )

    def write(self, data: ResultRecord) -> ComponentResult:
        start_time = time.time()
        self.append(data)
        return ComponentResult(
            data=data,
            metadata={
                "results_path": str(self.path),
                "case_id": data.case_id,
                "status": data.status.value,
            },
            execution_time_ms=(time.time() - start_time) * 1000,
        )
