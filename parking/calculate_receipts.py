"""
Parking Service Calculator

Vehicles in, receipts out. The service parks every vehicle in the queue and
refuels the ones running low; employees work on commission and the batch is
split between them in a way that favours profit.

    - Small vehicles pay a flat $25 for parking, large vehicles $35
    - Vehicles at 10% fuel or less are refuelled to capacity at $1.75/unit
    - Employees may be paid different commission rates
    - Work is shared (mostly) equally, best jobs to the best-paid employees

REQUIRED INPUT
--------------
    vehicles    - list of Vehicle(licence_plate, size, Fuel(capacity, level))
    employees   - list of Employee(name, commission_pct); defaults to the
                  reference pool in data/reference/employees.csv

PIPELINE
--------
    price_queue()       -> PricedJob    (parking + fuel fees, net_total)
    assign_job_loads()  -> AssignedJob  (employee attached, num_jobs)
    apply_commission()  -> PayableJob   (commission, total_to_pay)
    present()           -> Receipt      (licence_plate, employee, fuel_added, price)

Any ConfigError or AssignmentInvariantViolation aborts the whole batch; no
partial receipts are returned.

USAGE
-----
    from parking.calculate_receipts import run
    receipts = run(vehicles)
"""

import logging

from .config import ServiceConfig, load_config
from .models import Employee, Receipt, Vehicle
from .pipeline import (
    price_queue,
    assign_job_loads,
    apply_commission,
    present,
)


logger = logging.getLogger(__name__)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def run(
    vehicles: list[Vehicle],
    employees: list[Employee] | None = None,
    config: ServiceConfig | None = None,
) -> list[Receipt]:
    """
    Price, assign and bill a batch of vehicles.

    Args:
        vehicles: Vehicle queue
        employees: Employee pool (config.employees if not provided)
        config: Service configuration (load_config() if not provided)

    Returns:
        Receipts ordered by employee rank, then job value
    """
    if config is None:
        config = load_config()
    return present(calculate(vehicles, employees, config), config)


def calculate(
    vehicles: list[Vehicle],
    employees: list[Employee] | None = None,
    config: ServiceConfig | None = None,
):
    """
    Run every stage except presentation.

    Returns:
        List of PayableJob with exact decimal values
    """
    if config is None:
        config = load_config()
    if employees is None:
        employees = list(config.employees)

    priced = price_queue(vehicles, config)
    assigned = assign_job_loads(employees, priced)
    payable = apply_commission(assigned, config)

    logger.info(
        "Batch complete: %d vehicle(s) across %d employee(s)",
        len(payable), len({job.employee.name for job in payable}),
    )
    return payable
