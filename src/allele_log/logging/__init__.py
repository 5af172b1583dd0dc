"""Diagnostic logging subsystem for allele-log.

Provides a configurable append logger that supports none/summary/full
verbosity and optional producer-invariant warnings.
"""

from allele_log.logging.logger import AppendLogger

__all__ = [
    "AppendLogger",
]
