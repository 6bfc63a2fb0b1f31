"""Pydantic schema for the salary reference document.

Describes the JSON shape served as ``salary-data.json``:

  salaryData            country -> job -> education -> experience -> salary
  industryMultipliers   country -> industry -> factor
  industryAverages      country -> job -> average gross salary
  industryDescriptions  industry -> text
  taxRates              country -> flat-rate components
  currencyRates         usdToJpy

Range checks live here so the engine can rely on them: salaries,
averages, multipliers and the exchange rate are positive and finite, every
tax component and each country's summed rate lies in [0, 1).
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, model_validator

from salary_predictor.models.common import SalaryPredictorBase

# json.loads accepts Infinity/NaN tokens; they are rejected here.
PositiveAmount = Annotated[float, Field(gt=0, allow_inf_nan=False)]
TaxRate = Annotated[float, Field(ge=0.0, lt=1.0, allow_inf_nan=False)]


class JapanTaxRates(SalaryPredictorBase, frozen=True):
    """Japanese deductions, summed into one flat rate (no brackets)."""

    income_tax: TaxRate
    social_insurance: TaxRate

    @property
    def total(self) -> float:
        return self.income_tax + self.social_insurance

    @model_validator(mode="after")
    def _total_below_one(self) -> JapanTaxRates:
        if self.total >= 1.0:
            msg = f"Japan total tax rate {self.total} must be below 1"
            raise ValueError(msg)
        return self


class USATaxRates(SalaryPredictorBase, frozen=True):
    """US deductions, summed into one flat rate (no brackets)."""

    federal_tax: TaxRate
    state_tax: TaxRate
    social_security: TaxRate

    @property
    def total(self) -> float:
        return self.federal_tax + self.state_tax + self.social_security

    @model_validator(mode="after")
    def _total_below_one(self) -> USATaxRates:
        if self.total >= 1.0:
            msg = f"USA total tax rate {self.total} must be below 1"
            raise ValueError(msg)
        return self


class TaxRateTable(SalaryPredictorBase, frozen=True):
    """Per-country tax components; both countries are required."""

    japan: JapanTaxRates
    usa: USATaxRates


class CurrencyRates(SalaryPredictorBase, frozen=True):
    """Exchange rate used to show USD amounts in JPY."""

    usd_to_jpy: PositiveAmount


SalaryTree = dict[str, dict[str, dict[str, PositiveAmount]]]


class SalaryDocument(SalaryPredictorBase, frozen=True):
    """Top-level reference document, already deserialized from JSON."""

    salary_data: dict[str, SalaryTree]
    industry_multipliers: dict[str, dict[str, PositiveAmount]] = Field(
        default_factory=dict,
    )
    industry_averages: dict[str, dict[str, PositiveAmount]]
    industry_descriptions: dict[str, str] = Field(default_factory=dict)
    tax_rates: TaxRateTable
    currency_rates: CurrencyRates
