"""Reference dataset loader: reads the salary JSON document from disk or HTTP.

Provides:
  load(source, *, client=None, timeout=10.0, strict=False) -> ReferenceDataset
  load_from_json(path, *, strict=False) -> ReferenceDataset
  load_from_document(data, *, source="", strict=False) -> ReferenceDataset

Every failure is raised as a DataLoadError subtype:
  ParseError      malformed JSON or a document that fails schema validation
  NotFoundError   missing file / HTTP 404
  TransportError  anything else on the retrieval path
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from urllib.parse import urlparse

import httpx
from pydantic import ValidationError

from salary_predictor.data.reference_dataset import ReferenceDataset, from_document
from salary_predictor.errors import (
    DatasetIntegrityError,
    NotFoundError,
    ParseError,
    TransportError,
)
from salary_predictor.models.dataset import SalaryDocument

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
_HTTP_SCHEMES = frozenset({"http", "https"})


def is_remote(source: str | Path) -> bool:
    """True when the source is an http(s) URL."""
    return urlparse(str(source)).scheme in _HTTP_SCHEMES


def _as_path(source: str | Path) -> Path:
    text = str(source)
    if text.startswith("file://"):
        return Path(urlparse(text).path)
    return Path(text)


# ---------------------------------------------------------------------------
# Public loaders
# ---------------------------------------------------------------------------


async def load(
    source: str | Path,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    strict: bool = False,
) -> ReferenceDataset:
    """Load the reference dataset from a path, ``file://`` URL or http(s) URL.

    This is the only suspending operation in the package. A caller-supplied
    ``client`` is used as-is and left open.

    Raises:
        ParseError, NotFoundError, TransportError, DatasetIntegrityError.
    """
    logger.info("Loading salary dataset from %s", source)
    try:
        remote = is_remote(source)
    except ValueError as exc:
        logger.warning("Salary dataset source %s is not a valid URL: %s", source, exc)
        msg = f"Salary dataset source is not a valid URL: {exc}"
        raise TransportError(msg, source=str(source)) from exc
    if remote:
        text = await _fetch_text(str(source), client=client, timeout=timeout)
    else:
        text = _read_text(_as_path(source))
    return _build(text, source=str(source), strict=strict)


def load_from_json(path: str | Path, *, strict: bool = False) -> ReferenceDataset:
    """Synchronous file loader.

    Raises:
        ParseError, NotFoundError, TransportError, DatasetIntegrityError.
    """
    path = _as_path(path)
    return _build(_read_text(path), source=str(path), strict=strict)


def load_from_document(
    data: object,
    *,
    source: str = "",
    strict: bool = False,
) -> ReferenceDataset:
    """Build a dataset from an already-deserialized document.

    Raises:
        ParseError: If the document does not match the expected shape.
        DatasetIntegrityError: If ``strict`` and enumerated keys are missing.
    """
    try:
        document = SalaryDocument.model_validate(data)
    except ValidationError as exc:
        logger.warning("Salary document from %s failed validation: %s", source, exc)
        msg = f"Salary document does not match the expected shape: {exc}"
        raise ParseError(msg, source=source) from exc

    dataset = from_document(document, source=source)
    if dataset.coverage_gaps:
        logger.warning(
            "Salary dataset %s is missing %d enumerated entries (first: %s)",
            source, len(dataset.coverage_gaps), dataset.coverage_gaps[0],
        )
        if strict:
            msg = (
                f"Salary dataset is incomplete: {len(dataset.coverage_gaps)} "
                "enumerated entries are missing"
            )
            raise DatasetIntegrityError(msg, source=source, gaps=dataset.coverage_gaps)

    logger.info(
        "Loaded salary dataset from %s (%d base salaries, %d multipliers)",
        source, len(dataset.base_salaries), len(dataset.industry_multipliers),
    )
    return dataset


# ---------------------------------------------------------------------------
# Retrieval helpers
# ---------------------------------------------------------------------------


def _build(text: str, *, source: str, strict: bool) -> ReferenceDataset:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("Salary document from %s is not valid JSON: %s", source, exc)
        msg = f"Salary document is not valid JSON (line {exc.lineno}, column {exc.colno})"
        raise ParseError(msg, source=source) from exc
    return load_from_document(data, source=source, strict=strict)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        logger.warning("Salary dataset file not found: %s", path)
        msg = f"Salary dataset file not found: {path}"
        raise NotFoundError(msg, source=str(path)) from exc
    except UnicodeDecodeError as exc:
        logger.warning("Salary dataset file %s is not UTF-8 text", path)
        msg = f"Salary dataset file is not UTF-8 text: {path}"
        raise ParseError(msg, source=str(path)) from exc
    except ValueError as exc:
        logger.warning("Salary dataset path %r is invalid: %s", str(path), exc)
        msg = f"Salary dataset path is invalid: {exc}"
        raise TransportError(msg, source=str(path)) from exc
    except OSError as exc:
        logger.warning("Could not read salary dataset file %s: %s", path, exc)
        msg = f"Could not read salary dataset file {path}: {exc}"
        raise TransportError(msg, source=str(path)) from exc


async def _fetch_text(
    url: str,
    *,
    client: httpx.AsyncClient | None,
    timeout: float,
) -> str:
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as owned:
                resp = await owned.get(url)
        else:
            resp = await client.get(url, timeout=timeout)
    except httpx.InvalidURL as exc:
        logger.warning("Salary dataset URL %r is invalid: %s", url, exc)
        msg = f"Salary dataset URL is invalid: {exc}"
        raise TransportError(msg, source=url) from exc
    except httpx.HTTPError as exc:
        logger.warning("Network error fetching salary dataset %s: %s", url, exc)
        msg = f"Network error fetching salary dataset: {exc}"
        raise TransportError(msg, source=url) from exc

    logger.debug("Fetched %s -> HTTP %d (%d bytes)", url, resp.status_code, len(resp.content))
    if resp.status_code == httpx.codes.NOT_FOUND:
        logger.warning("Salary dataset not found at %s", url)
        msg = f"Salary dataset not found: {url} (HTTP 404)"
        raise NotFoundError(msg, source=url)
    if resp.is_error:
        logger.warning("Salary dataset fetch failed: %s HTTP %d", url, resp.status_code)
        msg = f"Salary dataset fetch failed: HTTP {resp.status_code} {resp.reason_phrase}"
        raise TransportError(msg, source=url)
    return resp.text
