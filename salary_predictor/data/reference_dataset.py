"""Immutable reference dataset and its lookup accessors.

Provides:
  ReferenceDataset                      flat, composite-key tables (read-only)
  from_document(doc) -> ReferenceDataset
  base_salary_of(ds, country, job, education, experience) -> float
  multiplier_of(ds, country, industry) -> float        (1.0 when absent)
  industry_average_of(ds, country, job) -> float
  description_of(ds, industry) -> str                  ("" when absent)
  total_tax_rate(ds, country) -> float
  find_coverage_gaps(ds) -> tuple[str, ...]
"""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from salary_predictor.errors import MissingDataError
from salary_predictor.models.common import Country, Education, Experience, JobCategory
from salary_predictor.models.dataset import SalaryDocument

# An industry with no multiplier entry is not adjusted.
NEUTRAL_MULTIPLIER = 1.0

SalaryKey = tuple[str, str, str, str]  # (country, job, education, experience)
AverageKey = tuple[str, str]  # (country, job)
MultiplierKey = tuple[str, str]  # (country, industry)


@dataclass(frozen=True)
class ReferenceDataset:
    """Loaded salary tables. Never mutated after construction."""

    base_salaries: Mapping[SalaryKey, float]
    industry_multipliers: Mapping[MultiplierKey, float]
    industry_averages: Mapping[AverageKey, float]
    industry_descriptions: Mapping[str, str]
    tax_rates: Mapping[str, float]
    usd_to_jpy: float
    source: str = ""
    coverage_gaps: tuple[str, ...] = field(default=())

    @property
    def countries(self) -> list[str]:
        return sorted({key[0] for key in self.base_salaries})

    @property
    def is_complete(self) -> bool:
        return not self.coverage_gaps


def from_document(document: SalaryDocument, *, source: str = "") -> ReferenceDataset:
    """Flatten a validated document into composite-key tables.

    Coverage gaps against the enumerated keys are computed once here and
    attached to the dataset; whether they are fatal is the loader's call.
    """
    salaries: dict[SalaryKey, float] = {}
    for country, jobs in document.salary_data.items():
        for job, educations in jobs.items():
            for education, experiences in educations.items():
                for experience, salary in experiences.items():
                    salaries[(country, job, education, experience)] = salary

    multipliers: dict[MultiplierKey, float] = {
        (country, industry): factor
        for country, table in document.industry_multipliers.items()
        for industry, factor in table.items()
    }
    averages: dict[AverageKey, float] = {
        (country, job): average
        for country, table in document.industry_averages.items()
        for job, average in table.items()
    }
    tax_rates = {
        Country.JAPAN.value: document.tax_rates.japan.total,
        Country.USA.value: document.tax_rates.usa.total,
    }

    dataset = ReferenceDataset(
        base_salaries=MappingProxyType(salaries),
        industry_multipliers=MappingProxyType(multipliers),
        industry_averages=MappingProxyType(averages),
        industry_descriptions=MappingProxyType(dict(document.industry_descriptions)),
        tax_rates=MappingProxyType(tax_rates),
        usd_to_jpy=document.currency_rates.usd_to_jpy,
        source=source,
    )
    gaps = find_coverage_gaps(dataset)
    if gaps:
        dataset = replace(dataset, coverage_gaps=gaps)
    return dataset


def find_coverage_gaps(dataset: ReferenceDataset) -> tuple[str, ...]:
    """List enumerated salary/average keys absent from the dataset.

    Each gap is rendered as ``table:country/job[/education/experience]``.
    """
    gaps: list[str] = []
    for country, job in itertools.product(Country, JobCategory):
        if (country.value, job.value) not in dataset.industry_averages:
            gaps.append(f"industryAverages:{country.value}/{job.value}")
        for education, experience in itertools.product(Education, Experience):
            key = (country.value, job.value, education.value, experience.value)
            if key not in dataset.base_salaries:
                gaps.append("salaryData:" + "/".join(key))
    return tuple(gaps)


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------


def base_salary_of(
    dataset: ReferenceDataset,
    country: str,
    job_category: str,
    education: str,
    experience: str,
) -> float:
    """Return the stored base salary exactly as loaded.

    Raises:
        MissingDataError: If the combination is absent. There is no fallback.
    """
    key = (country, job_category, education, experience)
    try:
        return dataset.base_salaries[key]
    except KeyError:
        raise MissingDataError("salaryData", key) from None


def multiplier_of(dataset: ReferenceDataset, country: str, industry: str) -> float:
    """Return the industry multiplier, or 1.0 when the industry has no entry."""
    return dataset.industry_multipliers.get((country, industry), NEUTRAL_MULTIPLIER)


def industry_average_of(
    dataset: ReferenceDataset,
    country: str,
    job_category: str,
) -> float:
    """Return the reference average gross salary for a job category.

    Raises:
        MissingDataError: If no average is recorded.
    """
    key = (country, job_category)
    try:
        return dataset.industry_averages[key]
    except KeyError:
        raise MissingDataError("industryAverages", key) from None


def description_of(dataset: ReferenceDataset, industry: str) -> str:
    return dataset.industry_descriptions.get(industry, "")


def total_tax_rate(dataset: ReferenceDataset, country: str) -> float:
    """Flat summed deduction rate for a country (not a bracket schedule).

    Raises:
        MissingDataError: If the country has no tax rates.
    """
    try:
        return dataset.tax_rates[country]
    except KeyError:
        raise MissingDataError("taxRates", (country,)) from None
