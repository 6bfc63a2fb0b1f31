"""USD/JPY conversion for display.

Derived at render time from ``dataset.usd_to_jpy``; never stored in a
PredictionResult.
"""

from salary_predictor.engine.predictor import round_half_up


def usd_to_jpy(usd_amount: float, rate: float) -> int:
    """JPY equivalent of a USD amount, e.g. 90,000 USD at 150 -> 13,500,000."""
    return round_half_up(usd_amount * rate)

