"""Data types for the measurement record subsystem."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from allele_log.exceptions import FrequencyVectorError


@dataclass(frozen=True, slots=True)
class MeasurementRecord:
    """Immutable record of one sampled population state.

    No range checks are made here. Frequencies are expected in [0, 1] and
    ``num_males + num_females == population_size``; both are the producer's
    responsibility.

    Attributes:
        replicate: Id of the independent simulation run (shared by many records).
        time: Step index within the replicate.
        frequency: Overall allele frequency.
        frequency_males: Allele frequency among males.
        frequency_females: Allele frequency among females.
        population_size: Total organism count.
        num_males: Number of males.
        num_females: Number of females.
    """

    # Position
    replicate: int
    time: int

    # Allele frequencies
    frequency: float
    frequency_males: float
    frequency_females: float

    # Counts
    population_size: int
    num_males: int
    num_females: int

    @classmethod
    def from_triple(
        cls,
        replicate: int,
        time: int,
        frequencies: Iterable[float],
        population_size: int,
        num_males: int,
        num_females: int,
    ) -> MeasurementRecord:
        """Build a record from an ``(overall, males, females)`` frequency vector.

        Args:
            replicate: Replicate id.
            time: Step index within the replicate.
            frequencies: Exactly three values: overall, male, female. Any iterable
                is accepted; it is consumed once.
            population_size: Total organism count.
            num_males: Number of males.
            num_females: Number of females.

        Returns:
            A new MeasurementRecord. The values are copied out of *frequencies*,
            so later changes to that sequence do not reach the record.

        Raises:
            FrequencyVectorError: If *frequencies* does not have three entries.
        """
        values = tuple(frequencies)
        if len(values) != 3:
            raise FrequencyVectorError(
                f"Expected 3 frequencies (overall, males, females), got {len(values)}"
            )
        overall, males, females = values
        return cls(
            replicate=replicate,
            time=time,
            frequency=overall,
            frequency_males=males,
            frequency_females=females,
            population_size=population_size,
            num_males=num_males,
            num_females=num_females,
        )

    @property
    def frequencies(self) -> tuple[float, float, float]:
        """The ``(overall, males, females)`` frequency triple."""
        return (self.frequency, self.frequency_males, self.frequency_females)
