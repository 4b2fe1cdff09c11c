"""
Decimal Arithmetic

All money and fuel math runs in exact base-10 arithmetic through an explicit
ArithmeticContext. Nothing here touches the process-wide decimal context, so
batches configured with different precisions can run side by side.

ROUNDING
--------
Intermediate values are never rounded. Rounding to DECIMAL_PLACES (half-up by
default) only happens in to_number(), which the presenter calls when values
leave the pipeline.
"""

from decimal import Context, Decimal
from typing import NamedTuple

from .data.reference.precision import DECIMAL_PLACES, PRECISION, ROUNDING


ZERO = Decimal(0)
HUNDRED = Decimal(100)


def to_decimal(value) -> Decimal:
    """
    Convert a number-like value to Decimal.

    Floats go through their shortest repr so that 0.1 becomes Decimal("0.1")
    rather than the binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Cannot convert bool to Decimal: {value!r}")
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        return Decimal(value.strip())
    return Decimal(value)


class ArithmeticContext(NamedTuple):
    """Precision settings for one batch."""

    decimal_places: int = DECIMAL_PLACES
    rounding: str = ROUNDING
    precision: int = PRECISION

    @property
    def context(self) -> Context:
        return Context(prec=self.precision, rounding=self.rounding)

    @property
    def quantum(self) -> Decimal:
        return Decimal(1).scaleb(-self.decimal_places)

    def add(self, a, b) -> Decimal:
        return self.context.add(to_decimal(a), to_decimal(b))

    def subtract(self, a, b) -> Decimal:
        return self.context.subtract(to_decimal(a), to_decimal(b))

    def multiply(self, a, b) -> Decimal:
        return self.context.multiply(to_decimal(a), to_decimal(b))

    def divide(self, a, b) -> Decimal:
        return self.context.divide(to_decimal(a), to_decimal(b))

    def round(self, value) -> Decimal:
        """Round to decimal_places using this context's rounding mode."""
        return to_decimal(value).quantize(
            self.quantum, rounding=self.rounding, context=self.context
        )

    def to_number(self, value) -> float:
        """Round and convert to a plain number for external consumers."""
        return float(self.round(value))


DEFAULT_CONTEXT = ArithmeticContext()

__all__ = [
    "ArithmeticContext",
    "DEFAULT_CONTEXT",
    "HUNDRED",
    "ZERO",
    "to_decimal",
]
