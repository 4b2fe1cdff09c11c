"""
Service Configuration

Everything a batch needs besides the vehicle queue: parking rates, fuel price,
arithmetic precision and the default employee pool. Built once per batch and
passed explicitly to each stage.

USAGE
-----
    from parking.config import load_config
    config = load_config()                          # reference data
    config = load_config(fuel_price_per_unit="2")   # override fuel price
"""

from decimal import Decimal, InvalidOperation
from typing import NamedTuple

from .arithmetic import ArithmeticContext, to_decimal
from .data import (
    load_parking_rates,
    load_employees,
    PRICE_PER_UNIT,
    DECIMAL_PLACES,
    ROUNDING,
)
from .errors import ConfigError
from .models import Employee


class ServiceConfig(NamedTuple):
    parking_rates: dict[str, Decimal]
    fuel_price_per_unit: Decimal
    employees: tuple[Employee, ...]
    arithmetic: ArithmeticContext = ArithmeticContext()


def load_config(
    fuel_price_per_unit=None,
    decimal_places: int | None = None,
    parking_rates: dict | None = None,
    employees: list[Employee] | None = None,
) -> ServiceConfig:
    """
    Build a ServiceConfig from reference data, applying any overrides.

    Args:
        fuel_price_per_unit: Price per fuel unit (defaults to reference PRICE_PER_UNIT)
        decimal_places: Places kept on receipt values (defaults to 5)
        parking_rates: Mapping of size -> fee (defaults to parking_rates.csv)
        employees: Default employee pool (defaults to employees.csv)

    Raises:
        ConfigError: If a price is not a number or negative, or decimal_places < 0
    """
    try:
        rates = load_parking_rates() if parking_rates is None else {
            size: to_decimal(rate) for size, rate in parking_rates.items()
        }
        fuel_price = to_decimal(PRICE_PER_UNIT if fuel_price_per_unit is None else fuel_price_per_unit)
    except (InvalidOperation, TypeError) as e:
        raise ConfigError(f"Invalid pricing configuration: {e}")
    places = DECIMAL_PLACES if decimal_places is None else decimal_places
    pool = load_employees() if employees is None else employees

    if fuel_price < 0:
        raise ConfigError(f"Fuel price per unit must not be negative, got {fuel_price}")
    negative = sorted(size for size, rate in rates.items() if rate < 0)
    if negative:
        raise ConfigError(f"Parking rates must not be negative: {', '.join(negative)}")
    if places < 0:
        raise ConfigError(f"decimal_places must not be negative, got {places}")

    return ServiceConfig(
        parking_rates=dict(rates),
        fuel_price_per_unit=fuel_price,
        employees=tuple(pool),
        arithmetic=ArithmeticContext(decimal_places=places, rounding=ROUNDING),
    )
