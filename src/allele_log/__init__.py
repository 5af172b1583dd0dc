"""allele-log: ordered results buffer for population-genetics simulations.

Collects per-(replicate, time) allele-frequency measurements, overall and
per sex, along with population size and sex counts, into a single
append-only record set for later reporting or export.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("allele-log")
except PackageNotFoundError:
    __version__ = "0.0.0"

from allele_log.config import AlleleLogConfig, resolve_config
from allele_log.exceptions import (
    AlleleLogError,
    ConfigValidationError,
    FrequencyVectorError,
    SampleIndexError,
)
from allele_log.logging.logger import AppendLogger
from allele_log.records.sample_log import SampleLog, SampleLogView
from allele_log.records.types import MeasurementRecord

__all__ = [
    "AlleleLogConfig",
    "AlleleLogError",
    "AppendLogger",
    "ConfigValidationError",
    "FrequencyVectorError",
    "MeasurementRecord",
    "SampleIndexError",
    "SampleLog",
    "SampleLogView",
    "__version__",
    "resolve_config",
]
