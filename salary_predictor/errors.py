"""Typed failures raised by the dataset loader, the engine and the service.

DataLoadError         startup is fatal, surfaced with a retry affordance
  ParseError          source is not well-formed / does not match the schema
  NotFoundError       source file or endpoint does not exist
  TransportError      any other retrieval failure
  DatasetIntegrityError  strict coverage check found missing combinations
MissingDataError      a single prediction cannot be computed
InputValidationError  caller-side, incomplete form; never reaches the engine
ServiceUnavailableError  prediction requested before a successful load
"""

from __future__ import annotations


class SalaryPredictorError(Exception):
    """Base class for every error raised by this package."""


# ---------------------------------------------------------------------------
# Dataset loading
# ---------------------------------------------------------------------------


class DataLoadError(SalaryPredictorError):
    """The reference dataset could not be loaded from its source."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class ParseError(DataLoadError):
    """Source content is not valid JSON or does not match the document shape."""


class NotFoundError(DataLoadError):
    """Source file or endpoint does not exist."""


class TransportError(DataLoadError):
    """Retrieval failed for a reason other than a missing source."""


class DatasetIntegrityError(DataLoadError):
    """Enumerated salary combinations are absent under strict coverage."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        gaps: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message, source=source)
        self.gaps = gaps


# ---------------------------------------------------------------------------
# Prediction
# ---------------------------------------------------------------------------


class MissingDataError(SalaryPredictorError, LookupError):
    """A lookup key required by a prediction is absent from the dataset."""

    def __init__(self, table: str, key: tuple[str, ...]) -> None:
        self.table = table
        self.key = key
        super().__init__(f"No {table} entry for {'/'.join(key)}")


class InputValidationError(SalaryPredictorError, ValueError):
    """Prediction form is incomplete."""

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = list(missing_fields)
        super().__init__(
            "All fields are required; missing: " + ", ".join(self.missing_fields)
        )


class ServiceUnavailableError(SalaryPredictorError):
    """Predictions are gated until the dataset has loaded successfully."""

    def __init__(self, message: str, *, cause: DataLoadError | None = None) -> None:
        super().__init__(message)
        self.cause = cause
