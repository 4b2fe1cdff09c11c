"""
Reference Data

Static reference data for rates, fuel pricing and arithmetic precision.
"""

from .fuel import PRICE_PER_UNIT, REFUEL_THRESHOLD_PCT, REFUEL_FLOOR_PCT
from .precision import DECIMAL_PLACES, ROUNDING, PRECISION

__all__ = [
    "PRICE_PER_UNIT",
    "REFUEL_THRESHOLD_PCT",
    "REFUEL_FLOOR_PCT",
    "DECIMAL_PLACES",
    "ROUNDING",
    "PRECISION",
]
