"""Display formatting for prediction results.

Everything here is derived from a PredictionResult at render time: currency
strings, signed percentages, multiplier adjustment labels, the USA/Japan
ratio and the insight paragraph. Nothing is written back to the result.
"""

from __future__ import annotations

from salary_predictor.engine.currency import usd_to_jpy
from salary_predictor.engine.predictor import round_half_up
from salary_predictor.models.common import Country, SalaryPredictorBase
from salary_predictor.models.prediction import (
    CountryPrediction,
    PredictionInput,
    PredictionResult,
)
from salary_predictor.presentation.labels import ChoiceKind, label_for

DISCLAIMER = (
    "※生活費や税制の違いにより実際の生活水準は異なります。"
    "企業規模、地域、個人のスキルレベルにより実際の年収は大きく変動する可能性があります。"
)


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


def format_jpy(amount: float) -> str:
    return f"¥{round_half_up(amount):,}"


def format_usd(amount: float) -> str:
    return f"${round_half_up(amount):,}"


def format_country_amount(amount: float, country: str, rate: float) -> str:
    """Japan: ``¥5,500,000``. USA: ``$90,000 (¥13,500,000)``."""
    if country == Country.USA:
        return f"{format_usd(amount)} ({format_jpy(usd_to_jpy(amount, rate))})"
    return format_jpy(amount)


def format_percentage(percentage: int) -> str:
    """Signed percentage; zero is shown as ``+0%``."""
    sign = "+" if percentage >= 0 else ""
    return f"{sign}{percentage}%"


def percentage_trend(percentage: int) -> str:
    return "positive" if percentage >= 0 else "negative"


def multiplier_adjustment(multiplier: float) -> int:
    """Multiplier as a signed whole percent: 1.15 -> 15, 0.9 -> -10."""
    return round_half_up((multiplier - 1) * 100)


def multiplier_trend(multiplier: float) -> str:
    if multiplier > 1:
        return "positive"
    if multiplier < 1:
        return "negative"
    return "neutral"


def format_multiplier(multiplier: float) -> str:
    return format_percentage(multiplier_adjustment(multiplier))


def usa_to_japan_ratio(result: PredictionResult, rate: float) -> float | None:
    """USA gross (as JPY equivalent) over Japan gross, one decimal place.

    None when the Japan gross rounds to zero.
    """
    if result.japan.gross_salary == 0:
        return None
    usa_jpy = usd_to_jpy(result.usa.gross_salary, rate)
    return round(usa_jpy / result.japan.gross_salary, 1)


# ---------------------------------------------------------------------------
# Rendered view
# ---------------------------------------------------------------------------


class RenderedCountry(SalaryPredictorBase, frozen=True):
    gross_salary: str
    monthly_net: str
    net_salary: str
    comparison: str
    comparison_trend: str
    industry_adjustment: str
    industry_adjustment_trend: str


class RenderedPrediction(SalaryPredictorBase, frozen=True):
    japan: RenderedCountry
    usa: RenderedCountry
    industry_label: str
    industry_description: str
    usa_to_japan_ratio: float | None
    insight: str


def _render_country(data: CountryPrediction, country: str, rate: float) -> RenderedCountry:
    return RenderedCountry(
        gross_salary=format_country_amount(data.gross_salary, country, rate),
        monthly_net=format_country_amount(data.monthly_net, country, rate),
        net_salary=format_country_amount(data.net_salary, country, rate),
        comparison=format_percentage(data.comparison_percentage),
        comparison_trend=percentage_trend(data.comparison_percentage),
        industry_adjustment=format_multiplier(data.industry_multiplier),
        industry_adjustment_trend=multiplier_trend(data.industry_multiplier),
    )


def build_insight(
    result: PredictionResult,
    prediction_input: PredictionInput,
    rate: float,
) -> str:
    """Summary paragraph shown under the two country cards."""
    industry = label_for(ChoiceKind.INDUSTRY, prediction_input.industry)
    education = label_for(ChoiceKind.EDUCATION, prediction_input.education)
    job = label_for(ChoiceKind.JOB_CATEGORY, prediction_input.job_category)
    experience = label_for(ChoiceKind.EXPERIENCE, prediction_input.experience)
    ratio = usa_to_japan_ratio(result, rate)

    lead = f"{industry}における{education}の{job}で{experience}の場合"
    if ratio is None:
        lead += "の予測結果です。"
    else:
        lead += f"、アメリカの年収は日本の約{ratio:.1f}倍となっています。"
    lines = [
        lead,
        f"業界補正: 日本 {format_multiplier(result.japan.industry_multiplier)}、"
        f"アメリカ {format_multiplier(result.usa.industry_multiplier)}",
    ]
    if result.industry_description:
        lines.append(result.industry_description)
    lines.append(DISCLAIMER)
    return "\n\n".join(lines)


def render(
    result: PredictionResult,
    prediction_input: PredictionInput,
    rate: float,
) -> RenderedPrediction:
    """Build every display string for one prediction."""
    return RenderedPrediction(
        japan=_render_country(result.japan, Country.JAPAN.value, rate),
        usa=_render_country(result.usa, Country.USA.value, rate),
        industry_label=label_for(ChoiceKind.INDUSTRY, result.industry),
        industry_description=result.industry_description,
        usa_to_japan_ratio=usa_to_japan_ratio(result, rate),
        insight=build_insight(result, prediction_input, rate),
    )
