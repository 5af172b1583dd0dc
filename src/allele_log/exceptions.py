"""Exception hierarchy for allele-log.

All exceptions derive from AlleleLogError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
Allocation failures (``MemoryError``) are never wrapped.
"""

from __future__ import annotations


class AlleleLogError(Exception):
    """Base exception for all allele-log errors."""


class SampleIndexError(AlleleLogError, IndexError):
    """A positional read fell outside ``[0, size)``.

    Raised by ``SampleLog.index()`` and by indexing a ``SampleLogView``.
    Negative positions are rejected rather than wrapped around.

    Attributes:
        index: The requested position.
        size: Number of records in the log at the time of the read.
    """

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Sample index {index} out of range for log of size {size}")


class FrequencyVectorError(AlleleLogError, ValueError):
    """The frequency vector passed to append does not have three entries.

    The vector is ``(overall, males, females)``; any other length is a
    malformed call from the producer.
    """


class ConfigValidationError(AlleleLogError):
    """Configuration override validation failed.

    Raised when ``resolve_config()`` receives a key that names no
    configuration field.
    """
