"""
Parking Service Billing

Prices a queue of vehicles, shares the work between commissioned employees and
produces a receipt per vehicle.
"""

from .calculate_receipts import run, calculate
from .config import ServiceConfig, load_config
from .errors import (
    ParkingError,
    ConfigError,
    AssignmentInvariantViolation,
    InvalidCommissionWarning,
)
from .models import Fuel, Vehicle, Employee, Receipt
from .version import VERSION

__all__ = [
    "run",
    "calculate",
    "ServiceConfig",
    "load_config",
    "ParkingError",
    "ConfigError",
    "AssignmentInvariantViolation",
    "InvalidCommissionWarning",
    "Fuel",
    "Vehicle",
    "Employee",
    "Receipt",
    "VERSION",
]
