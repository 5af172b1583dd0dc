"""Diagnostic logger for sample log append events.

Uses the standard ``logging`` module with the ``"allele_log"`` logger.
No ``print()`` statements. Records are never rejected here; invariant
checks only produce warnings.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from allele_log.config import AlleleLogConfig
    from allele_log.records.types import MeasurementRecord

logger = logging.getLogger("allele_log")


class AppendLogger:
    """Per-append diagnostic logger.

    Log levels:
        ``"none"``: No per-append output. Invariant warnings are still
        emitted if ``check_invariants=True``.

        ``"summary"``: One line per append with the record's key fields.

        ``"full"``: Full JSON dump of all record fields.

    With ``check_invariants=True`` each record is checked against the
    producer's contract (frequencies in [0, 1], non-negative counts, sex
    counts summing to the population size) and a warning is logged per
    violation.
    """

    def __init__(self, config: AlleleLogConfig) -> None:
        """Initialize the logger from configuration.

        Args:
            config: Configuration providing ``log_level`` and ``check_invariants``.
        """
        self._log_level = config.log_level
        self._check_invariants = config.check_invariants

    def log_append(self, record: MeasurementRecord, position: int) -> None:
        """Log a single append event.

        Args:
            record: The record just stored.
            position: Its index in the log.
        """
        if self._check_invariants:
            for problem in self.invariant_violations(record):
                logger.warning(
                    "replicate=%d t=%d at position %d: %s",
                    record.replicate,
                    record.time,
                    position,
                    problem,
                )

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "sample #%d replicate=%d t=%d freq=%.4f males=%.4f females=%.4f "
                "N=%d (m=%d f=%d)",
                position,
                record.replicate,
                record.time,
                record.frequency,
                record.frequency_males,
                record.frequency_females,
                record.population_size,
                record.num_males,
                record.num_females,
            )
        elif self._log_level == "full":
            logger.info(
                "measurement_record #%d: %s",
                position,
                json.dumps(asdict(record), default=str),
            )

    @staticmethod
    def invariant_violations(record: MeasurementRecord) -> list[str]:
        """Describe every producer invariant *record* breaks.

        Args:
            record: Record to inspect.

        Returns:
            Human-readable problem descriptions, empty if the record is sound.
        """
        problems: list[str] = []
        for name in ("frequency", "frequency_males", "frequency_females"):
            value = getattr(record, name)
            # Negated comparison so NaN is reported too.
            if not 0.0 <= value <= 1.0:
                problems.append(f"{name}={value!r} outside [0, 1]")
        for name in ("time", "population_size", "num_males", "num_females"):
            value = getattr(record, name)
            if value < 0:
                problems.append(f"{name}={value} is negative")
        if record.num_males + record.num_females != record.population_size:
            problems.append(
                f"num_males + num_females = {record.num_males + record.num_females} "
                f"!= population_size {record.population_size}"
            )
        return problems
