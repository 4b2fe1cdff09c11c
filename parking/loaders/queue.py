"""
Batch Input Loaders

Builds the vehicle queue and employee pool from files.

SUPPORTED FORMATS
-----------------
    CSV   - vehicles: licence_plate, size, fuel_capacity, fuel_level
            employees: name, commission_pct
    JSON  - vehicles: [{"licencePlate": "A", "size": "large",
                        "fuel": {"capacity": 10, "level": 0.1}}, ...]
            employees: [{"name": "Alan Grant", "commissionPct": 15}, ...]

CSV values are read as strings and JSON numbers as Decimal, so nothing passes
through binary floating point on the way in.
"""

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

import polars as pl

from ..arithmetic import to_decimal
from ..errors import ConfigError
from ..models import Employee, Fuel, Vehicle


VEHICLE_COLUMNS = ["licence_plate", "size", "fuel_capacity", "fuel_level"]
EMPLOYEE_COLUMNS = ["name", "commission_pct"]

# JSON keys -> column names
_JSON_VEHICLE_KEYS = {
    "licencePlate": "licence_plate",
    "size": "size",
}
_JSON_EMPLOYEE_KEYS = {
    "name": "name",
    "commissionPct": "commission_pct",
}


# =============================================================================
# HELPERS
# =============================================================================

def _number(value, field: str, key: str) -> Decimal:
    try:
        parsed = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ConfigError(f"Invalid {field} for '{key}': {value!r}")
    if not parsed.is_finite():
        raise ConfigError(f"Invalid {field} for '{key}': {value!r}")
    return parsed


def _text(value) -> str | None:
    """JSON value as exact text; Decimal("0.1") -> "0.1"."""
    return None if value is None else str(value)


def _require_columns(df: pl.DataFrame, columns: list[str], source: str) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ConfigError(f"{source} is missing column(s): {', '.join(missing)}")


def _read_csv(path: Path) -> pl.DataFrame:
    try:
        df = pl.read_csv(path, infer_schema=False)
    except pl.exceptions.NoDataError:
        raise ConfigError(f"{path.name} is empty")
    return df.with_columns(pl.col(pl.Utf8).str.strip_chars())


def _read_json(path: Path) -> list:
    with open(path, "r", encoding="utf-8") as f:
        try:
            records = json.load(f, parse_float=Decimal, parse_int=Decimal)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path.name} is not valid JSON: {e}")
    if not isinstance(records, list):
        raise ConfigError(f"{path.name} must contain a JSON list")
    return records


def _require_object(record, kind: str, i: int) -> dict:
    if not isinstance(record, dict):
        raise ConfigError(f"{kind} #{i} must be a JSON object, got {record!r}")
    return record


def _check_file(path) -> Path:
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Input file not found: {path}")
    if path.suffix.lower() not in (".csv", ".json"):
        raise ConfigError(f"Unsupported input format '{path.suffix}' (use .csv or .json)")
    return path


# =============================================================================
# VEHICLES
# =============================================================================

def vehicles_from_frame(df: pl.DataFrame) -> list[Vehicle]:
    """
    Convert a DataFrame with VEHICLE_COLUMNS into vehicles, in row order.

    Raises:
        ConfigError: If a column, plate or size is missing, a fuel value is not
            a number, or a plate repeats
    """
    _require_columns(df, VEHICLE_COLUMNS, "Vehicle data")

    vehicles = []
    for i, row in enumerate(df.select(VEHICLE_COLUMNS).iter_rows(named=True)):
        plate = row["licence_plate"]
        if not plate:
            raise ConfigError(f"Vehicle #{i} has no licence_plate")
        if not row["size"]:
            raise ConfigError(f"Missing size for '{plate}'")
        capacity = _number(row["fuel_capacity"], "fuel_capacity", plate)
        if capacity <= 0:
            raise ConfigError(f"fuel_capacity must be positive for '{plate}': {capacity}")
        vehicles.append(Vehicle(
            licence_plate=plate,
            size=row["size"],
            fuel=Fuel(
                capacity=capacity,
                level=_number(row["fuel_level"], "fuel_level", plate),
            ),
        ))

    plates = [v.licence_plate for v in vehicles]
    duplicates = sorted({p for p in plates if plates.count(p) > 1})
    if duplicates:
        raise ConfigError(f"Duplicate licence_plate in batch: {', '.join(duplicates)}")

    return vehicles


def vehicles_from_records(records: list[dict]) -> list[Vehicle]:
    """Convert fixture-style records ({"licencePlate", "size", "fuel"}) into vehicles."""
    rows = []
    for i, record in enumerate(records):
        record = _require_object(record, "Vehicle", i)
        fuel = record.get("fuel") or {}
        if not isinstance(fuel, dict):
            raise ConfigError(f"Vehicle #{i} has an invalid 'fuel' entry: {fuel!r}")
        row = {column: _text(record.get(key)) for key, column in _JSON_VEHICLE_KEYS.items()}
        row["fuel_capacity"] = _text(fuel.get("capacity"))
        row["fuel_level"] = _text(fuel.get("level"))
        rows.append(row)

    df = pl.DataFrame(rows, schema={c: pl.Utf8 for c in VEHICLE_COLUMNS})
    return vehicles_from_frame(df)


def load_vehicles(path) -> list[Vehicle]:
    """
    Load a vehicle queue from CSV or JSON.

    Args:
        path: Path to a .csv or .json file (see module docstring)

    Returns:
        List of Vehicle in file order
    """
    path = _check_file(path)
    if path.suffix.lower() == ".json":
        return vehicles_from_records(_read_json(path))
    return vehicles_from_frame(_read_csv(path))


# =============================================================================
# EMPLOYEES
# =============================================================================

def employees_from_frame(df: pl.DataFrame) -> list[Employee]:
    """Convert a DataFrame with EMPLOYEE_COLUMNS into employees, in row order."""
    _require_columns(df, EMPLOYEE_COLUMNS, "Employee data")

    employees = []
    for i, row in enumerate(df.select(EMPLOYEE_COLUMNS).iter_rows(named=True)):
        name = row["name"]
        if not name:
            raise ConfigError(f"Employee #{i} has no name")
        employees.append(Employee(
            name=name,
            commission_pct=_number(row["commission_pct"], "commission_pct", name),
        ))

    names = [e.name for e in employees]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise ConfigError(f"Duplicate employee name: {', '.join(duplicates)}")

    return employees


def load_employee_pool(path) -> list[Employee]:
    """Load an employee pool from CSV or JSON."""
    path = _check_file(path)
    if path.suffix.lower() == ".json":
        rows = []
        for i, record in enumerate(_read_json(path)):
            record = _require_object(record, "Employee", i)
            rows.append({column: _text(record.get(key)) for key, column in _JSON_EMPLOYEE_KEYS.items()})
        df = pl.DataFrame(rows, schema={c: pl.Utf8 for c in EMPLOYEE_COLUMNS})
        return employees_from_frame(df)
    return employees_from_frame(_read_csv(path))
