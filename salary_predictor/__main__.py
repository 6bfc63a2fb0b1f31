"""Run one salary prediction from the command line.

Usage:
    python -m salary_predictor --education bachelor --experience 3-5 \
        --job-category software-engineer --industry technology
    python -m salary_predictor ... --source https://example.com/salary-data.json --json

Exit codes: 0 success, 1 load or missing-data error, 2 incomplete input.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from salary_predictor.config.settings import get_settings
from salary_predictor.engine.service import PredictionService, validate_input
from salary_predictor.errors import DataLoadError, InputValidationError, MissingDataError
from salary_predictor.models.common import Education, Experience, Industry, JobCategory
from salary_predictor.presentation.formatting import render


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="salary_predictor",
        description="Estimate annual salary in Japan and the USA.",
    )
    parser.add_argument("--education", choices=[e.value for e in Education])
    parser.add_argument("--experience", choices=[e.value for e in Experience])
    parser.add_argument("--job-category", choices=[j.value for j in JobCategory])
    parser.add_argument("--industry", choices=[i.value for i in Industry])
    parser.add_argument("--source", help="Dataset path or URL (default: DATASET_SOURCE)")
    parser.add_argument("--json", action="store_true", help="Print raw JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _print_text(service: PredictionService, args: argparse.Namespace) -> None:
    prediction_input = validate_input(vars(args))
    result = service.predict(prediction_input)
    view = render(result, prediction_input, service.dataset.usd_to_jpy)
    for name, country in (("Japan", view.japan), ("USA", view.usa)):
        print(f"{name}")
        print(f"  Annual gross:   {country.gross_salary}")
        print(f"  Annual net:     {country.net_salary}")
        print(f"  Monthly net:    {country.monthly_net}")
        print(f"  Vs. average:    {country.comparison}")
        print(f"  Industry adj.:  {country.industry_adjustment}")
    print()
    print(view.insight)


def _print_json(service: PredictionService, args: argparse.Namespace) -> None:
    prediction_input = validate_input(vars(args))
    result = service.predict(prediction_input)
    payload = {
        "input": prediction_input.model_dump(by_alias=True),
        "prediction": result.model_dump(by_alias=True),
        "usdToJpy": service.dataset.usd_to_jpy,
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))


async def _run(args: argparse.Namespace) -> int:
    settings = get_settings()
    source = args.source or settings.DATASET_SOURCE

    # Validate before touching the dataset.
    try:
        validate_input(vars(args))
    except InputValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        service = await PredictionService.create(
            source,
            timeout=settings.DATASET_TIMEOUT,
            strict=settings.STRICT_COVERAGE,
        )
    except DataLoadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        if args.json:
            _print_json(service, args)
        else:
            _print_text(service, args)
    except MissingDataError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(_run(args))


if __name__ == "__main__":
    sys.exit(main())
