"""
Sinks for rank records: append-only CSV file, and an in-memory sink.
"""

import csv
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from threading import Lock
from typing import Literal, Sequence

from rank_checker.tracking.schemas import RankRecord, WriteOutcome

logger = logging.getLogger(__name__)

EmptyPolicy = Literal["skip", "header"]

_write_lock = Lock()


def _outcome(header_written: bool, row_count: int) -> WriteOutcome:
    if row_count:
        return WriteOutcome.HEADER_PLUS_ROWS if header_written else WriteOutcome.ROWS_ONLY
    return WriteOutcome.HEADER_ONLY if header_written else WriteOutcome.NO_ROWS


class Sink(ABC):
    """Destination for matched rank records."""

    def __init__(self, empty_policy: EmptyPolicy = "skip"):
        if empty_policy not in ("skip", "header"):
            raise ValueError(f"Unknown empty policy: {empty_policy!r}")
        self.empty_policy = empty_policy

    @abstractmethod
    def write(self, records: Sequence[RankRecord]) -> WriteOutcome:
        """Append records; write the header first if the sink is new."""

    @abstractmethod
    def describe(self) -> str:
        pass


class CsvSink(Sink):
    """
    Append-only CSV file.

    The header is written once, when the file is missing or empty. Rows are never
    deduplicated, so running twice with the same input appends the same rows again.
    Writes from threads of one process are serialized; separate processes are not.
    """

    def __init__(self, path: str | Path = "rank_checker.csv", empty_policy: EmptyPolicy = "skip"):
        super().__init__(empty_policy)
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    def _is_new(self) -> bool:
        return not self.path.exists() or self.path.stat().st_size == 0

    def write(self, records: Sequence[RankRecord]) -> WriteOutcome:
        # New-file check and append must not interleave across threads
        with _write_lock:
            is_new = self._is_new()
            if not records and (self.empty_policy == "skip" or not is_new):
                logger.info("No records to write; %s left untouched", self.path)
                return WriteOutcome.NO_ROWS

            with open(self.path, "a", encoding="utf-8", newline="") as f:
                writer = csv.writer(f)
                if is_new:
                    writer.writerow(RankRecord.columns())
                for record in records:
                    writer.writerow(record.row())

        outcome = _outcome(is_new, len(records))
        logger.info("Wrote %d row(s) to %s (%s)", len(records), self.path, outcome.value)
        return outcome


class MemorySink(Sink):
    """Keeps header and rows in lists. Same header rules as CsvSink."""

    def __init__(self, empty_policy: EmptyPolicy = "skip", name: str = "memory"):
        super().__init__(empty_policy)
        self.name = name
        self.header: list[str] | None = None
        self.rows: list[list[str]] = []

    def describe(self) -> str:
        return self.name

    def write(self, records: Sequence[RankRecord]) -> WriteOutcome:
        is_new = self.header is None
        if not records and (self.empty_policy == "skip" or not is_new):
            return WriteOutcome.NO_ROWS
        if is_new:
            self.header = RankRecord.columns()
        self.rows.extend(record.row() for record in records)
        return _outcome(is_new, len(records))
