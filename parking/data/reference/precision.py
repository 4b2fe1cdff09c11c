"""
Arithmetic Precision

Receipts report money and fuel units to 5 decimal places, rounded half-up.
PRECISION is the number of significant digits carried by intermediate results.
"""

from decimal import ROUND_HALF_UP

DECIMAL_PLACES = 5            # Places kept on values leaving the pipeline
ROUNDING = ROUND_HALF_UP      # 0.000005 -> 0.00001
PRECISION = 28                # Significant digits for intermediate math
