"""Tests for MeasurementRecord."""

from __future__ import annotations

import copy
from dataclasses import FrozenInstanceError, replace

import pytest

from allele_log.exceptions import AlleleLogError, FrequencyVectorError
from allele_log.records.types import MeasurementRecord


def _make_record(**overrides: object) -> MeasurementRecord:
    """Create a MeasurementRecord with sensible defaults, overridable."""
    defaults: dict[str, object] = {
        "replicate": 3,
        "time": 10,
        "frequency": 0.5,
        "frequency_males": 0.6,
        "frequency_females": 0.4,
        "population_size": 100,
        "num_males": 52,
        "num_females": 48,
    }
    defaults.update(overrides)
    return MeasurementRecord(**defaults)  # type: ignore[arg-type]


class TestMeasurementRecord:
    """Tests for MeasurementRecord immutability and accessors."""

    def test_frozen(self) -> None:
        """MeasurementRecord should reject attribute mutation."""
        record = _make_record()
        with pytest.raises(FrozenInstanceError):
            record.time = 11  # type: ignore[misc]

    def test_slots(self) -> None:
        """MeasurementRecord should use __slots__."""
        record = _make_record()
        assert hasattr(record, "__slots__")
        assert not hasattr(record, "__dict__")

    def test_all_fields_accessible(self) -> None:
        """All 8 fields should be readable."""
        record = _make_record()
        assert record.replicate == 3
        assert record.time == 10
        assert record.frequency == 0.5
        assert record.frequency_males == 0.6
        assert record.frequency_females == 0.4
        assert record.population_size == 100
        assert record.num_males == 52
        assert record.num_females == 48

    def test_frequencies_triple(self) -> None:
        assert _make_record().frequencies == (0.5, 0.6, 0.4)

    def test_no_validation_on_construction(self) -> None:
        """Out-of-range values are the producer's problem, not the record's."""
        record = _make_record(frequency=1.5, num_males=-1)
        assert record.frequency == 1.5
        assert record.num_males == -1


class TestFromTriple:
    """Tests for MeasurementRecord.from_triple()."""

    def test_unpacks_in_order(self) -> None:
        record = MeasurementRecord.from_triple(3, 10, (0.5, 0.6, 0.4), 100, 52, 48)
        assert record == _make_record()

    def test_accepts_list(self) -> None:
        record = MeasurementRecord.from_triple(3, 10, [0.5, 0.6, 0.4], 100, 52, 48)
        assert record.frequencies == (0.5, 0.6, 0.4)

    def test_accepts_generator(self) -> None:
        record = MeasurementRecord.from_triple(3, 10, (f for f in (0.5, 0.6, 0.4)), 100, 52, 48)
        assert record.frequencies == (0.5, 0.6, 0.4)

    def test_short_generator_raises(self) -> None:
        with pytest.raises(FrequencyVectorError, match="got 2"):
            MeasurementRecord.from_triple(0, 0, iter([0.5, 0.6]), 10, 5, 5)

    def test_source_list_mutation_does_not_leak(self) -> None:
        freqs = [0.5, 0.6, 0.4]
        record = MeasurementRecord.from_triple(3, 10, freqs, 100, 52, 48)
        freqs[0] = 0.9
        assert record.frequency == 0.5

    @pytest.mark.parametrize("freqs", [(), (0.5,), (0.5, 0.6), (0.5, 0.6, 0.4, 0.1)])
    def test_wrong_length_raises(self, freqs: tuple[float, ...]) -> None:
        with pytest.raises(FrequencyVectorError, match="Expected 3 frequencies"):
            MeasurementRecord.from_triple(0, 0, freqs, 10, 5, 5)

    def test_frequency_vector_error_hierarchy(self) -> None:
        assert issubclass(FrequencyVectorError, AlleleLogError)
        assert issubclass(FrequencyVectorError, ValueError)


class TestCopySemantics:
    """Copies are independent equal values."""

    def test_copy_equal(self) -> None:
        record = _make_record()
        assert copy.copy(record) == record

    def test_replace_leaves_original(self) -> None:
        record = _make_record()
        changed = replace(record, time=11)
        assert changed.time == 11
        assert record.time == 10

    def test_hashable(self) -> None:
        assert hash(_make_record()) == hash(_make_record())
