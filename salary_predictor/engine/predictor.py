"""Prediction engine: lookup, industry adjustment, flat tax, comparison.

Per country:
  gross      = round(base * multiplier)
  net        = round(gross * (1 - total_tax_rate))
  monthly    = round(net / 12)
  comparison = round((gross - average) / average * 100)

The tax model is a single flat deduction (summed components), not a
progressive bracket schedule; the dataset's averages are calibrated to it.
industry_average > 0 is guaranteed by the document schema and is not
re-checked here.

Pure deterministic functions: no I/O, no logging, no shared state.
"""

from __future__ import annotations

import math

from salary_predictor.data.reference_dataset import (
    ReferenceDataset,
    base_salary_of,
    description_of,
    industry_average_of,
    multiplier_of,
    total_tax_rate,
)
from salary_predictor.models.common import Country
from salary_predictor.models.prediction import (
    CountryPrediction,
    PredictionInput,
    PredictionResult,
)

MONTHS_PER_YEAR = 12


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (-2.5 -> -2)."""
    return math.floor(value + 0.5)


def net_salary(gross_salary: int, tax_rate: float) -> int:
    return round_half_up(gross_salary * (1 - tax_rate))


def monthly_net(net: int) -> int:
    return round_half_up(net / MONTHS_PER_YEAR)


def comparison_percentage(gross_salary: float, industry_average: float) -> int:
    """Signed deviation from the industry average; positive means above it."""
    return round_half_up((gross_salary - industry_average) / industry_average * 100)


def predict_country(
    dataset: ReferenceDataset,
    country: str,
    prediction_input: PredictionInput,
) -> CountryPrediction:
    """Compute one country's figures.

    Raises:
        MissingDataError: If the base salary, average or tax rate is absent.
    """
    base = base_salary_of(
        dataset,
        country,
        prediction_input.job_category,
        prediction_input.education,
        prediction_input.experience,
    )
    multiplier = multiplier_of(dataset, country, prediction_input.industry)
    average = industry_average_of(dataset, country, prediction_input.job_category)
    tax_rate = total_tax_rate(dataset, country)

    # Multiply first, round once.
    gross = round_half_up(base * multiplier)
    net = net_salary(gross, tax_rate)

    return CountryPrediction(
        gross_salary=gross,
        net_salary=net,
        monthly_net=monthly_net(net),
        industry_average=average,
        comparison_percentage=comparison_percentage(gross, average),
        industry_multiplier=multiplier,
    )


def predict(dataset: ReferenceDataset, prediction_input: PredictionInput) -> PredictionResult:
    """Predict compensation in Japan and the USA.

    Fail-fast: if either country cannot be computed the MissingDataError
    propagates and no result is built.
    """
    japan = predict_country(dataset, Country.JAPAN.value, prediction_input)
    usa = predict_country(dataset, Country.USA.value, prediction_input)
    return PredictionResult(
        japan=japan,
        usa=usa,
        industry=prediction_input.industry,
        industry_description=description_of(dataset, prediction_input.industry),
    )
