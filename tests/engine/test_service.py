"""Tests for PredictionService, ServiceGate and caller-side input validation.

Covers: form completeness checks, service construction from a source,
reload success/failure semantics, gating predictions on a successful load,
and user-initiated retry.
"""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from salary_predictor.data.reference_dataset import ReferenceDataset, base_salary_of
from salary_predictor.engine.service import (
    PredictionService,
    ServiceGate,
    validate_input,
)
from salary_predictor.errors import (
    DataLoadError,
    InputValidationError,
    MissingDataError,
    NotFoundError,
    ParseError,
    ServiceUnavailableError,
    TransportError,
)
from salary_predictor.models.prediction import PredictionInput

FORM = {
    "education": "bachelor",
    "experience": "3-5",
    "jobCategory": "software-engineer",
    "industry": "technology",
}


# ===================================================================
# validate_input
# ===================================================================


class TestValidateInput:

    def test_complete_camel_case_form(self) -> None:
        result = validate_input(FORM)
        assert result == PredictionInput(
            education="bachelor",
            experience="3-5",
            job_category="software-engineer",
            industry="technology",
        )

    def test_snake_case_keys(self) -> None:
        form = {**FORM}
        form["job_category"] = form.pop("jobCategory")
        assert validate_input(form).job_category == "software-engineer"

    def test_strips_whitespace(self) -> None:
        assert validate_input({**FORM, "industry": "  retail "}).industry == "retail"

    def test_lists_every_missing_field(self) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            validate_input({"education": "bachelor", "industry": ""})
        assert exc_info.value.missing_fields == ["experience", "jobCategory", "industry"]

    def test_none_and_blank_are_missing(self) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            validate_input({**FORM, "education": None, "experience": "   "})
        assert exc_info.value.missing_fields == ["education", "experience"]

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_input({})

    def test_unknown_values_pass_through(self) -> None:
        assert validate_input({**FORM, "industry": "space"}).industry == "space"


# ===================================================================
# PredictionService
# ===================================================================


class TestPredictionService:

    def test_predict_delegates_to_engine(self, dataset: ReferenceDataset) -> None:
        service = PredictionService(dataset)
        result = service.predict(validate_input(FORM))
        assert result.japan.gross_salary == 5_500_000
        assert service.source == "fixture"

    def test_missing_data_propagates(self, dataset: ReferenceDataset) -> None:
        service = PredictionService(dataset)
        with pytest.raises(MissingDataError):
            service.predict(validate_input({**FORM, "education": "phd"}))

    @pytest.mark.anyio
    async def test_create_from_path(self, document_path: Path) -> None:
        service = await PredictionService.create(document_path)
        assert service.dataset.usd_to_jpy == 150
        assert service.source == document_path

    @pytest.mark.anyio
    async def test_create_failure_raises(self, tmp_path: Path) -> None:
        with pytest.raises(NotFoundError):
            await PredictionService.create(tmp_path / "missing.json")

    @pytest.mark.anyio
    async def test_reload_picks_up_new_data(
        self, document_path: Path, salary_document: dict,
    ) -> None:
        service = await PredictionService.create(document_path)
        salary_document["salaryData"]["japan"]["software-engineer"]["bachelor"]["3-5"] = 5200000
        document_path.write_text(json.dumps(salary_document), encoding="utf-8")

        new_dataset = await service.reload()

        assert service.dataset is new_dataset
        assert service.predict(validate_input(FORM)).japan.gross_salary == 5_720_000

    @pytest.mark.anyio
    async def test_failed_reload_keeps_previous_dataset(self, document_path: Path) -> None:
        service = await PredictionService.create(document_path)
        previous = service.dataset
        document_path.write_text("{ broken", encoding="utf-8")

        with pytest.raises(ParseError):
            await service.reload()

        assert service.dataset is previous
        assert base_salary_of(previous, "usa", "software-engineer", "bachelor", "3-5") == 90000

    @pytest.mark.anyio
    async def test_reload_without_source(self, salary_document: dict) -> None:
        from salary_predictor.data.loader import load_from_document

        service = PredictionService(load_from_document(salary_document))
        with pytest.raises(DataLoadError):
            await service.reload()

    @pytest.mark.anyio
    async def test_reload_over_http(self, salary_document: dict) -> None:
        calls = {"n": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            calls["n"] += 1
            if calls["n"] == 1:
                return httpx.Response(200, json=salary_document)
            return httpx.Response(503)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            service = await PredictionService.create(
                "https://data.example.com/salary-data.json", client=client,
            )
            with pytest.raises(DataLoadError):
                await service.reload()
        assert calls["n"] == 2
        assert service.predict(validate_input(FORM)).usa.gross_salary == 108_000


# ===================================================================
# ServiceGate
# ===================================================================


class TestServiceGate:

    def test_closed_before_start(self, document_path: Path) -> None:
        gate = ServiceGate(document_path)
        assert not gate.is_ready
        with pytest.raises(ServiceUnavailableError, match="not loaded yet"):
            gate.require()

    @pytest.mark.anyio
    async def test_start_opens_gate(self, document_path: Path) -> None:
        gate = ServiceGate(document_path)
        assert await gate.start() is True
        assert gate.is_ready
        assert gate.last_error is None
        assert gate.require().predict(validate_input(FORM)).usa.gross_salary == 108_000

    @pytest.mark.anyio
    async def test_failed_start_records_error(self, tmp_path: Path) -> None:
        gate = ServiceGate(tmp_path / "salary-data.json")
        assert await gate.start() is False
        assert isinstance(gate.last_error, NotFoundError)
        with pytest.raises(ServiceUnavailableError) as exc_info:
            gate.require()
        assert exc_info.value.cause is gate.last_error

    @pytest.mark.anyio
    @pytest.mark.parametrize("source", ["http://[::1/x", "http://exa\x00mple.com/x"])
    async def test_malformed_url_keeps_gate_closed(self, source: str) -> None:
        gate = ServiceGate(source)
        assert await gate.start() is False
        assert isinstance(gate.last_error, TransportError)
        with pytest.raises(ServiceUnavailableError):
            gate.require()

    @pytest.mark.anyio
    async def test_retry_after_fixing_source(
        self, tmp_path: Path, salary_document: dict,
    ) -> None:
        path = tmp_path / "salary-data.json"
        gate = ServiceGate(path)
        assert await gate.start() is False

        path.write_text(json.dumps(salary_document), encoding="utf-8")
        assert await gate.retry() is True
        assert gate.is_ready
        assert gate.last_error is None

    @pytest.mark.anyio
    async def test_failed_retry_keeps_serving(self, document_path: Path) -> None:
        gate = ServiceGate(document_path)
        await gate.start()
        document_path.unlink()

        assert await gate.retry() is False
        assert isinstance(gate.last_error, NotFoundError)
        assert gate.is_ready
        assert gate.require().predict(validate_input(FORM)).japan.gross_salary == 5_500_000

    @pytest.mark.anyio
    async def test_strict_gate_rejects_incomplete_dataset(self, document_path: Path) -> None:
        gate = ServiceGate(document_path, strict=True)
        assert await gate.start() is False
        assert gate.last_error is not None
        assert gate.last_error.gaps  # type: ignore[union-attr]
