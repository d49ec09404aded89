"""Command-line interface for the BMI calculator."""

import argparse
import sys

from bmi_app.bmi_calculator import InvalidInputError, compute_bmi, format_report
from bmi_app.config import configure_logging
from bmi_app.models import UnitSystem
from bmi_app.preferences import PreferenceStore

UNIT_CHOICES = [u.value for u in UnitSystem]


# --- Command handlers ---

def cmd_calc(args, store: PreferenceStore):
    unit = UnitSystem(args.unit) if args.unit else store.load()
    try:
        result = compute_bmi(args.weight, args.height, unit)
    except InvalidInputError as e:
        print(e.message)
        sys.exit(1)
    print(format_report(result, unit))


def cmd_unit(args, store: PreferenceStore):
    if args.unit is None:
        print(store.load().value)
        return
    unit = UnitSystem(args.unit)
    if not store.save(unit):
        print(f"Could not save unit system to {store.db_path}")
        sys.exit(1)
    print(f"Unit system set to {unit.value} ({unit.labels.toggle})")


# --- Argument parser ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmi-calculator",
        description="Body Mass Index calculator",
    )
    parser.add_argument("--db", help="Preference database path (default: ~/.bmi_calculator/preferences.db)")
    subparsers = parser.add_subparsers(dest="command")

    calc_p = subparsers.add_parser("calc", help="Calculate BMI")
    calc_p.add_argument("--weight", required=True, help="Weight in kg (metric) or lbs (imperial)")
    calc_p.add_argument("--height", required=True, help="Height in cm (metric) or in (imperial)")
    calc_p.add_argument("--unit", choices=UNIT_CHOICES,
                        help="Unit system (default: last saved, else metric)")
    calc_p.set_defaults(func=cmd_calc)

    unit_p = subparsers.add_parser("unit", help="Show or set the saved unit system")
    unit_p.add_argument("unit", nargs="?", choices=UNIT_CHOICES, help="Unit system to save")
    unit_p.set_defaults(func=cmd_unit)

    return parser


def main(argv=None):
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    store = PreferenceStore(args.db)
    store.init()
    args.func(args, store)


if __name__ == "__main__":
    main()
