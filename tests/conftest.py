"""Shared pytest fixtures for the salary predictor test suite.

Provides:
- salary_document: small hand-checked reference document (dict)
- dataset: ReferenceDataset built from salary_document
- document_path: salary_document written to a tmp JSON file
- bundled_data_path: the shipped data/salary-data.json
"""

import json
from pathlib import Path

import pytest

from salary_predictor.data.loader import load_from_document
from salary_predictor.data.reference_dataset import ReferenceDataset

BUNDLED_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "salary-data.json"


def _make_document() -> dict:
    """Two-country document covering software-engineer only.

    Japan has an extra bachelor/6-10 cell that the USA table lacks, so a
    6-10 prediction fails on the second country.
    """
    return {
        "salaryData": {
            "japan": {
                "software-engineer": {
                    "bachelor": {"0-2": 4000000, "3-5": 5000000, "6-10": 6500000},
                    "master": {"3-5": 5600000},
                },
            },
            "usa": {
                "software-engineer": {
                    "bachelor": {"0-2": 75000, "3-5": 90000},
                    "master": {"3-5": 100000},
                },
            },
        },
        "industryMultipliers": {
            "japan": {"technology": 1.1, "retail": 0.9},
            "usa": {"technology": 1.2, "retail": 0.85},
        },
        "industryAverages": {
            "japan": {"software-engineer": 6000000},
            "usa": {"software-engineer": 100000},
        },
        "industryDescriptions": {"technology": "IT業界は需要が高い。"},
        "taxRates": {
            "japan": {"incomeTax": 0.15, "socialInsurance": 0.15},
            "usa": {"federalTax": 0.22, "stateTax": 0.05, "socialSecurity": 0.0765},
        },
        "currencyRates": {"usdToJpy": 150},
    }


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def salary_document() -> dict:
    return _make_document()


@pytest.fixture
def dataset(salary_document: dict) -> ReferenceDataset:
    return load_from_document(salary_document, source="fixture")


@pytest.fixture
def document_path(tmp_path: Path, salary_document: dict) -> Path:
    path = tmp_path / "salary-data.json"
    path.write_text(json.dumps(salary_document, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def bundled_data_path() -> Path:
    return BUNDLED_DATA_PATH
