"""Append-only log of per-(replicate, time) measurement records.

The simulation driver calls :meth:`SampleLog.append` once per sampled time
step per replicate; reporting code reads the accumulated records back in
insertion order. The log does no locking. For parallel replicates keep one
log per worker and combine them with :meth:`SampleLog.merge` once all
workers are done, or guard a shared log's ``append`` with an external lock.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import replace
from typing import TYPE_CHECKING, Any

import numpy as np

from allele_log.exceptions import SampleIndexError
from allele_log.records.types import MeasurementRecord

if TYPE_CHECKING:
    from allele_log.logging.logger import AppendLogger

logger = logging.getLogger("allele_log")

# Column layout for to_numpy(); order matches MeasurementRecord fields.
RECORD_DTYPE = np.dtype(
    [
        ("replicate", np.int64),
        ("time", np.int64),
        ("frequency", np.float64),
        ("frequency_males", np.float64),
        ("frequency_females", np.float64),
        ("population_size", np.int64),
        ("num_males", np.int64),
        ("num_females", np.int64),
    ]
)


def _checked_position(i: Any, size: int) -> int:
    """Validate a positional index against ``[0, size)``.

    Args:
        i: Requested position. Must be an integer (bools are rejected).
        size: Current number of records.

    Returns:
        The position as a plain ``int``.

    Raises:
        TypeError: If *i* is not an integer.
        SampleIndexError: If *i* is negative or not below *size*.
    """
    if isinstance(i, bool):
        raise TypeError("Sample index must be an integer, not bool")
    position = operator.index(i)
    if position < 0 or position >= size:
        raise SampleIndexError(position, size)
    return position


class SampleLogView(Sequence[MeasurementRecord]):
    """Read-only, ordered view over the records of a :class:`SampleLog`.

    The view shares storage with its log: later appends show up in it, and
    it offers no way to insert, remove or reorder records. Records read
    through the view are the stored instances; use ``dataclasses.replace``
    or :meth:`SampleLog.index` to obtain an independent copy.
    """

    __slots__ = ("_records",)

    def __init__(self, records: list[MeasurementRecord]) -> None:
        self._records = records

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, i: int) -> MeasurementRecord:  # type: ignore[override]
        return self._records[_checked_position(i, len(self._records))]

    def __iter__(self) -> Iterator[MeasurementRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"SampleLogView(size={len(self._records)})"


class SampleLog:
    """Append-only, randomly indexable collection of measurement records.

    Insertion order is preserved and reflects the producer's call order.
    Apart from :meth:`clear`, no operation removes or changes a stored
    record.

    Args:
        append_logger: Optional :class:`AppendLogger` notified after every
            record added by :meth:`append` or :meth:`extend`. Without one,
            adding records does no logging work.
    """

    __slots__ = ("_append_logger", "_records")

    def __init__(self, *, append_logger: AppendLogger | None = None) -> None:
        self._records: list[MeasurementRecord] = []
        self._append_logger = append_logger

    def append(
        self,
        replicate: int,
        time: int,
        frequencies: Iterable[float],
        population_size: int,
        num_males: int,
        num_females: int,
    ) -> MeasurementRecord:
        """Record one sampled time step at the end of the log.

        Args:
            replicate: Replicate id.
            time: Step index within the replicate.
            frequencies: ``(overall, males, females)`` allele frequencies.
            population_size: Total organism count.
            num_males: Number of males.
            num_females: Number of females.

        Returns:
            The stored record.

        Raises:
            FrequencyVectorError: If *frequencies* does not have three entries.
        """
        record = MeasurementRecord.from_triple(
            replicate, time, frequencies, population_size, num_males, num_females
        )
        self._records.append(record)
        if self._append_logger is not None:
            self._append_logger.log_append(record, len(self._records) - 1)
        return record

    def extend(self, records: Iterable[MeasurementRecord]) -> None:
        """Append copies of existing records in iteration order.

        Either every item is appended or, if any item is not a
        MeasurementRecord, none is. The attached logger, if any, is
        notified once per record after the whole batch is stored.

        Args:
            records: Records to append.

        Raises:
            TypeError: If an item is not a MeasurementRecord.
        """
        batch = list(records)
        for item in batch:
            if not isinstance(item, MeasurementRecord):
                raise TypeError(f"Expected MeasurementRecord, got {type(item).__name__}")
        start = len(self._records)
        self._records.extend(replace(item) for item in batch)
        if self._append_logger is not None:
            for position in range(start, len(self._records)):
                self._append_logger.log_append(self._records[position], position)

    @classmethod
    def merge(
        cls,
        logs: Iterable[SampleLog],
        *,
        append_logger: AppendLogger | None = None,
    ) -> SampleLog:
        """Concatenate several logs into a new one, in argument order.

        The inputs are left untouched and their loggers are not carried
        over. The merged log holds its own copies of the records.

        Args:
            logs: Logs to combine, typically one per worker.
            append_logger: Logger for the merged log. It sees every merged
                record as it is added.

        Returns:
            A new SampleLog.
        """
        merged = cls(append_logger=append_logger)
        for log in logs:
            merged.extend(log._records)
        return merged

    def size(self) -> int:
        """Return the number of stored records."""
        return len(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> SampleLogView:
        """Read-only ordered view over all stored records."""
        return SampleLogView(self._records)

    def index(self, i: int) -> MeasurementRecord:
        """Return a copy of the record at position *i*.

        Unlike list indexing, negative positions are an error.

        Args:
            i: Position in insertion order.

        Returns:
            An independent MeasurementRecord equal to the stored one.

        Raises:
            SampleIndexError: If *i* is negative or ``>= size()``.
            TypeError: If *i* is not an integer.
        """
        return replace(self._records[_checked_position(i, len(self._records))])

    def __getitem__(self, i: int) -> MeasurementRecord:
        return self.index(i)

    def __iter__(self) -> Iterator[MeasurementRecord]:
        return iter(self._records)

    def clear(self) -> None:
        """Drop all records."""
        dropped = len(self._records)
        self._records.clear()
        logger.debug("Cleared sample log (%d records dropped)", dropped)

    def to_numpy(self) -> np.ndarray:
        """Copy all records into a structured array.

        Returns:
            Array of dtype :data:`RECORD_DTYPE`, one row per record in
            insertion order. Empty when the log is empty.
        """
        rows = [
            (
                r.replicate,
                r.time,
                r.frequency,
                r.frequency_males,
                r.frequency_females,
                r.population_size,
                r.num_males,
                r.num_females,
            )
            for r in self._records
        ]
        return np.array(rows, dtype=RECORD_DTYPE)

    def __repr__(self) -> str:
        return f"SampleLog(size={len(self._records)})"
