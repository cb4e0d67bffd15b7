"""Infrastructure layer — external library adapters."""

from value_formatter.infrastructure.date_time.arrow_backend import ArrowDateTimeBackend

__all__ = [
    "ArrowDateTimeBackend",
]
