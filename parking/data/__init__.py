"""
Parking Data

Reference data and loaders for parking rates, the employee pool and pricing
configuration.

Structure:
    - reference/: Static reference data (rates, employees, fuel, precision)
"""

from decimal import Decimal, InvalidOperation
from pathlib import Path

import polars as pl

from ..errors import ConfigError
from ..models import Employee
from .reference.fuel import PRICE_PER_UNIT, REFUEL_THRESHOLD_PCT, REFUEL_FLOOR_PCT
from .reference.precision import DECIMAL_PLACES, ROUNDING, PRECISION


REFERENCE_DIR = Path(__file__).parent / "reference"


def _read_table(path: Path, columns: list[str]) -> pl.DataFrame:
    """
    Read a reference CSV with every column as a string.

    Keeping numbers as strings means "12.5" becomes Decimal("12.5") exactly
    instead of passing through a float.
    """
    if not Path(path).exists():
        raise ConfigError(f"Reference file not found: {path}")

    try:
        df = pl.read_csv(path, infer_schema=False)
    except pl.exceptions.NoDataError:
        raise ConfigError(f"Reference file is empty: {path}")
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ConfigError(f"{Path(path).name} is missing column(s): {', '.join(missing)}")

    return df.select(columns).with_columns(pl.col(columns).str.strip_chars())


def _parse_decimal(value: str | None, field: str, key: str) -> Decimal:
    try:
        parsed = Decimal(value)
    except (InvalidOperation, TypeError):
        raise ConfigError(f"Invalid {field} for '{key}': {value!r}")
    if not parsed.is_finite():
        raise ConfigError(f"Invalid {field} for '{key}': {value!r}")
    return parsed


def _check_unique(df: pl.DataFrame, column: str, source: str) -> None:
    blank = df.filter(pl.col(column).is_null() | (pl.col(column) == ""))
    if len(blank):
        raise ConfigError(f"Missing {column} in {source} ({len(blank)} row(s))")
    duplicates = df.filter(pl.col(column).is_duplicated())[column].unique().sort().to_list()
    if duplicates:
        raise ConfigError(f"Duplicate {column} in {source}: {', '.join(duplicates)}")


def load_parking_rates(path: Path | None = None) -> dict[str, Decimal]:
    """
    Load the flat parking fee per vehicle size.

    Returns:
        Mapping of size -> fee, e.g. {"small": Decimal("25"), "large": Decimal("35")}
    """
    path = path or REFERENCE_DIR / "parking_rates.csv"
    df = _read_table(path, ["size", "rate"])
    _check_unique(df, "size", Path(path).name)

    return {
        row["size"]: _parse_decimal(row["rate"], "rate", row["size"])
        for row in df.iter_rows(named=True)
    }


def load_employees(path: Path | None = None) -> list[Employee]:
    """
    Load the employee pool in file order.

    Returns:
        List of Employee(name, commission_pct)
    """
    path = path or REFERENCE_DIR / "employees.csv"
    df = _read_table(path, ["name", "commission_pct"])
    _check_unique(df, "name", Path(path).name)

    return [
        Employee(
            name=row["name"],
            commission_pct=_parse_decimal(row["commission_pct"], "commission_pct", row["name"]),
        )
        for row in df.iter_rows(named=True)
    ]


__all__ = [
    # Reference data loaders
    "load_parking_rates",
    "load_employees",
    "REFERENCE_DIR",
    # Fuel config
    "PRICE_PER_UNIT",
    "REFUEL_THRESHOLD_PCT",
    "REFUEL_FLOOR_PCT",
    # Precision config
    "DECIMAL_PLACES",
    "ROUNDING",
    "PRECISION",
]
