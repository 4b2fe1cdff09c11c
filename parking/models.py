"""
Batch Records

Immutable records passed between pipeline stages. Each stage wraps the record
it receives instead of merging fields, so employee and job data never collide.

    Vehicle      -> price_queue()       -> PricedJob
    PricedJob    -> assign_job_loads()  -> AssignedJob  (+ Employee)
    AssignedJob  -> apply_commission()  -> PayableJob
    PayableJob   -> present()           -> Receipt
"""

from decimal import Decimal
from typing import NamedTuple


# =============================================================================
# INPUTS
# =============================================================================

class Fuel(NamedTuple):
    """Tank state. level is a fraction of capacity and may be out of range."""
    capacity: Decimal
    level: Decimal


class Vehicle(NamedTuple):
    licence_plate: str
    size: str
    fuel: Fuel


class Employee(NamedTuple):
    """Commissioned employee. commission_pct above 100 is valid, below 0 is not."""
    name: str
    commission_pct: Decimal


# =============================================================================
# PIPELINE STAGES
# =============================================================================

class FuelQuote(NamedTuple):
    units: Decimal
    price: Decimal


class PricedJob(NamedTuple):
    vehicle: Vehicle
    fuel_added: Decimal
    parking_fee: Decimal
    fuel_fee: Decimal
    net_total: Decimal

    @property
    def licence_plate(self) -> str:
        return self.vehicle.licence_plate


class JobLoad(NamedTuple):
    """Number of jobs planned for one employee."""
    employee: Employee
    num_jobs: int


class AssignedJob(NamedTuple):
    employee: Employee
    job: PricedJob
    num_jobs: int


class PayableJob(NamedTuple):
    assignment: AssignedJob
    commission: Decimal
    total_to_pay: Decimal

    @property
    def employee(self) -> Employee:
        return self.assignment.employee

    @property
    def job(self) -> PricedJob:
        return self.assignment.job


# =============================================================================
# OUTPUT
# =============================================================================

class Receipt(NamedTuple):
    licence_plate: str
    employee: str
    fuel_added: float
    price: float
