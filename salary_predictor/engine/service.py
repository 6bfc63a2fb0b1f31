"""Prediction service and load gate.

PredictionService wraps an already-loaded ReferenceDataset and exposes
predict() and reload(). There is no module-level instance; callers own it.

ServiceGate holds either a ready service or the last load failure, so
predictions are refused until a load has succeeded. start() and retry()
run the same load-then-ready sequence; nothing retries automatically.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import httpx

from salary_predictor.data.loader import DEFAULT_TIMEOUT, load
from salary_predictor.data.reference_dataset import ReferenceDataset
from salary_predictor.engine.predictor import predict
from salary_predictor.errors import (
    DataLoadError,
    InputValidationError,
    ServiceUnavailableError,
)
from salary_predictor.models.prediction import PredictionInput, PredictionResult

logger = logging.getLogger(__name__)

# (field name, camelCase form alias)
_REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("education", "education"),
    ("experience", "experience"),
    ("job_category", "jobCategory"),
    ("industry", "industry"),
)


def validate_input(form: Mapping[str, object]) -> PredictionInput:
    """Check that all four selections are present and non-blank.

    Accepts snake_case or camelCase keys. Values are not checked against
    the enumerations; unknown keys surface later as MissingDataError.

    Raises:
        InputValidationError: Listing every missing field (camelCase names).
    """
    values: dict[str, str] = {}
    missing: list[str] = []
    for name, alias in _REQUIRED_FIELDS:
        raw = form.get(alias, form.get(name))
        if raw is None or not str(raw).strip():
            missing.append(alias)
        else:
            values[name] = str(raw).strip()
    if missing:
        raise InputValidationError(missing)
    return PredictionInput(**values)


class PredictionService:
    """Stateless predictions over one immutable dataset.

    ``reload()`` swaps the dataset reference only after a successful load;
    a failed reload leaves the current dataset in place and re-raises.
    """

    def __init__(
        self,
        dataset: ReferenceDataset,
        *,
        source: str | Path | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        strict: bool = False,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._dataset = dataset
        self._source = source if source is not None else dataset.source
        self._timeout = timeout
        self._strict = strict
        self._client = client

    @classmethod
    async def create(
        cls,
        source: str | Path,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        strict: bool = False,
        client: httpx.AsyncClient | None = None,
    ) -> PredictionService:
        """Load the dataset and construct a ready service.

        Raises:
            DataLoadError: Any load failure; no service is created.
        """
        dataset = await load(source, client=client, timeout=timeout, strict=strict)
        return cls(dataset, source=source, timeout=timeout, strict=strict, client=client)

    @property
    def dataset(self) -> ReferenceDataset:
        return self._dataset

    @property
    def source(self) -> str | Path:
        return self._source

    def predict(self, prediction_input: PredictionInput) -> PredictionResult:
        """Run the engine against the current dataset.

        Raises:
            MissingDataError: If a required lookup key is absent.
        """
        return predict(self._dataset, prediction_input)

    async def reload(self) -> ReferenceDataset:
        """Re-run the load contract on the original source.

        Raises:
            DataLoadError: The previous dataset stays active.
        """
        if not self._source:
            msg = "Service has no dataset source to reload from"
            raise DataLoadError(msg)
        dataset = await load(
            self._source,
            client=self._client,
            timeout=self._timeout,
            strict=self._strict,
        )
        self._dataset = dataset
        logger.info("Salary dataset reloaded from %s", self._source)
        return dataset


class ServiceGate:
    """Readiness gate in front of a PredictionService."""

    def __init__(
        self,
        source: str | Path,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        strict: bool = False,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._source = source
        self._timeout = timeout
        self._strict = strict
        self._client = client
        self._service: PredictionService | None = None
        self._last_error: DataLoadError | None = None

    @property
    def source(self) -> str | Path:
        return self._source

    @property
    def is_ready(self) -> bool:
        return self._service is not None

    @property
    def last_error(self) -> DataLoadError | None:
        return self._last_error

    async def start(self) -> bool:
        """Load the dataset; record the failure instead of raising.

        Returns True when the gate is open afterwards.
        """
        try:
            self._service = await PredictionService.create(
                self._source,
                timeout=self._timeout,
                strict=self._strict,
                client=self._client,
            )
        except DataLoadError as exc:
            self._service = None
            self._last_error = exc
            logger.error("Salary dataset load failed: %s", exc)
            return False
        self._last_error = None
        return True

    async def retry(self) -> bool:
        """User-initiated retry: same sequence as start()."""
        if self._service is None:
            return await self.start()
        try:
            await self._service.reload()
        except DataLoadError as exc:
            self._last_error = exc
            logger.error("Salary dataset reload failed, keeping previous data: %s", exc)
            return False
        self._last_error = None
        return True

    def require(self) -> PredictionService:
        """Return the ready service.

        Raises:
            ServiceUnavailableError: While no load has succeeded.
        """
        if self._service is None:
            reason = str(self._last_error) if self._last_error else "not loaded yet"
            msg = f"Salary dataset is not available: {reason}"
            raise ServiceUnavailableError(msg, cause=self._last_error)
        return self._service
