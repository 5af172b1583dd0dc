"""Shared pytest fixtures for allele-log tests.

Provides reusable configuration objects and pre-filled sample logs that
are used across multiple test modules.
"""

from __future__ import annotations

import pytest

from allele_log.config import AlleleLogConfig
from allele_log.records.sample_log import SampleLog


@pytest.fixture
def silent_config() -> AlleleLogConfig:
    """Return a config with no logging for noise-free tests."""
    return AlleleLogConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def summary_config() -> AlleleLogConfig:
    """Return a config with one-line summary logging."""
    return AlleleLogConfig(_env_file=None, log_level="summary")  # type: ignore[call-arg]


@pytest.fixture
def checking_config() -> AlleleLogConfig:
    """Return a config that only warns on producer invariant violations."""
    return AlleleLogConfig(
        _env_file=None,
        log_level="none",
        check_invariants=True,  # type: ignore[call-arg]
    )


@pytest.fixture
def empty_log() -> SampleLog:
    """Return a SampleLog with no records and no logger."""
    return SampleLog()


@pytest.fixture
def two_replicate_log() -> SampleLog:
    """Return a log holding (0,0), (0,1), (1,0) in that order.

    Field values differ per record so position mix-ups are visible.
    """
    log = SampleLog()
    log.append(0, 0, (0.5, 0.5, 0.5), 100, 50, 50)
    log.append(0, 1, (0.45, 0.4, 0.5), 98, 49, 49)
    log.append(1, 0, (0.5, 0.52, 0.48), 100, 51, 49)
    return log
