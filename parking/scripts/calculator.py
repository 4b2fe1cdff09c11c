"""
Parking Service Calculator
==========================

Runs one batch of vehicles through pricing, assignment and commission and
prints a receipt per vehicle plus a summary per employee.

Usage:
    python -m parking.scripts.calculator --vehicles queue.csv
    python -m parking.scripts.calculator --vehicles queue.json --employees pool.csv
    python -m parking.scripts.calculator --vehicles queue.csv --output receipts.csv
    python -m parking.scripts.calculator --vehicles queue.csv --fuel-price 1.90 --decimal-places 2
"""

import argparse
import logging
import sys
from pathlib import Path

import polars as pl

from parking.calculate_receipts import calculate
from parking.config import load_config
from parking.errors import ParkingError
from parking.loaders import load_vehicles, load_employee_pool
from parking.pipeline import present, receipts_to_frame, summarize_by_employee
from parking.version import VERSION


logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Price, assign and bill a batch of vehicles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--vehicles",
        type=Path,
        required=True,
        help="Vehicle queue (.csv or .json)",
    )
    parser.add_argument(
        "--employees",
        type=Path,
        default=None,
        help="Employee pool (.csv or .json, default: reference employees.csv)",
    )
    parser.add_argument(
        "--fuel-price",
        default=None,
        help="Fuel price per unit (default: reference fuel price)",
    )
    parser.add_argument(
        "--decimal-places",
        type=int,
        default=None,
        help="Decimal places on receipt values (default: 5)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write receipts to this CSV file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log pipeline details",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logging.captureWarnings(True)


def print_results(receipts: pl.DataFrame, summary: pl.DataFrame) -> None:
    """Print receipts and per-employee totals."""
    print("\n" + "=" * 60)
    print(f"RECEIPTS (calculator {VERSION})")
    print("=" * 60)
    with pl.Config(tbl_rows=-1, tbl_hide_dataframe_shape=True):
        print(receipts.drop("calculator_version"))

        print("\n--- By Employee ---")
        print(summary)

    print(f"\nVehicles:    {len(receipts)}")
    print(f"Total price: ${receipts['price'].sum():,.2f}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(
            fuel_price_per_unit=args.fuel_price,
            decimal_places=args.decimal_places,
        )
        vehicles = load_vehicles(args.vehicles)
        employees = load_employee_pool(args.employees) if args.employees else None

        payable = calculate(vehicles, employees, config)
    except ParkingError as e:
        logger.error("Batch aborted: %s", e)
        return 1

    receipts = receipts_to_frame(present(payable, config))
    summary = summarize_by_employee(payable, config)
    print_results(receipts, summary)

    if args.output:
        receipts.write_csv(args.output)
        print(f"\nReceipts saved to: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
