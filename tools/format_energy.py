from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config.container import Container  # noqa: E402
from domain.exceptions import EnergyFormatterError, InvalidEnergyUnitError  # noqa: E402
from domain.models import EnergyUnit, UnitStyle  # noqa: E402
from domain.services.energy_units import parse_energy_unit  # noqa: E402


def _parse_style(value: str) -> UnitStyle:
    style = value.strip().upper()
    if style not in UnitStyle.__members__:
        raise argparse.ArgumentTypeError("style must be 'short', 'medium' or 'long'")
    return UnitStyle[style]


def _parse_unit(value: str) -> EnergyUnit:
    try:
        return parse_energy_unit(value)
    except InvalidEnergyUnitError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_digits(value: str) -> int:
    try:
        digits = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("digits must be an integer") from exc
    if digits < 0:
        raise argparse.ArgumentTypeError("digits cannot be negative")
    return digits


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Format an energy value as localized text.",
    )
    parser.add_argument("value", type=float, help="Energy value (joules unless --unit is given).")
    parser.add_argument(
        "--unit",
        type=_parse_unit,
        default=None,
        help="Unit the value is already in (J, kJ, cal, kcal). "
        "Without it the value is read as joules and scaled for the locale.",
    )
    parser.add_argument(
        "--style",
        type=_parse_style,
        default=None,
        help="Unit style: short, medium or long (defaults to ENERGY_FORMATTER_UNIT_STYLE).",
    )
    parser.add_argument(
        "--food",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Food energy mode: kilocalories render as C/Cal/Calories "
        "(defaults to ENERGY_FORMATTER_FOOD_ENERGY).",
    )
    parser.add_argument(
        "--locale",
        default=None,
        help="Locale identifier, e.g. en_US (defaults to ENERGY_FORMATTER_LOCALE, LC_ALL, LANG).",
    )
    parser.add_argument(
        "--digits",
        type=_parse_digits,
        default=None,
        help="Fixed number of fraction digits (defaults to ENERGY_FORMATTER_DIGITS).",
    )
    parser.add_argument(
        "--label-only",
        action="store_true",
        help="Print only the unit label.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print the chosen unit and enable debug logging.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        container = Container(
            locale_identifier=args.locale,
            unit_style=args.style,
            is_for_food_energy_use=args.food,
            digits=args.digits,
        )
        if args.label_only:
            text, unit = container.describe_unit.execute(args.value, args.unit)
        elif args.unit is not None:
            text, unit = container.format_energy.execute(args.value, args.unit), args.unit
        else:
            text, unit = container.format_joules.execute(args.value)
    except EnergyFormatterError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(text)
    if args.verbose:
        print(f"unit: {unit.name.lower()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
