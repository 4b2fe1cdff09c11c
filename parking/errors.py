"""
Errors and Warnings

FATAL
-----
    ConfigError                  - Reference data or batch input cannot be priced/assigned
    AssignmentInvariantViolation - Distribution left jobs unassigned (logic defect)

NON-FATAL
---------
    InvalidCommissionWarning     - Negative commission clamped to zero, job still billed
"""


class ParkingError(Exception):
    """Base class for errors that abort a batch."""


class ConfigError(ParkingError, ValueError):
    """Raised when configuration or input cannot support the batch."""


class AssignmentInvariantViolation(ParkingError, RuntimeError):
    """Raised when jobs remain unassigned after distribution."""

    def __init__(self, unassigned: int, total: int):
        self.unassigned = unassigned
        self.total = total
        super().__init__(
            f"{unassigned} of {total} job(s) still unassigned after distribution"
        )


class InvalidCommissionWarning(UserWarning):
    """Logged when an employee's commission percentage is below zero."""

    def __init__(self, employee: str, commission_pct):
        self.employee = employee
        self.commission_pct = commission_pct
        super().__init__(
            f"Commission percentage {commission_pct} out of range for {employee}. "
            f"Will skip commission payment."
        )
