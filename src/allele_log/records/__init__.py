"""Measurement record subsystem for allele-log.

Provides the immutable per-sample record and the append-only log that
a simulation driver fills once per sampled time step.
"""

from allele_log.records.sample_log import RECORD_DTYPE, SampleLog, SampleLogView
from allele_log.records.types import MeasurementRecord

__all__ = [
    "RECORD_DTYPE",
    "MeasurementRecord",
    "SampleLog",
    "SampleLogView",
]
