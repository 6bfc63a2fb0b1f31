"""Prediction input and result models.

PredictionResult is created fresh per call and frozen. JPY equivalents of
USA figures are NOT stored here; they are derived at render time.
"""

from pydantic import Field

from salary_predictor.models.common import SalaryPredictorBase


class PredictionInput(SalaryPredictorBase, frozen=True):
    """The four form selections. Keys are trusted, not checked against enums."""

    education: str
    experience: str
    job_category: str
    industry: str


class CountryPrediction(SalaryPredictorBase, frozen=True):
    """Compensation figures for one country, in that country's currency."""

    gross_salary: int
    net_salary: int
    monthly_net: int
    industry_average: float
    comparison_percentage: int = Field(
        ..., description="Signed % deviation of gross salary from the industry average.",
    )
    industry_multiplier: float


class PredictionResult(SalaryPredictorBase, frozen=True):
    """Two-country prediction plus shared industry information."""

    japan: CountryPrediction
    usa: CountryPrediction
    industry: str
    industry_description: str = ""
