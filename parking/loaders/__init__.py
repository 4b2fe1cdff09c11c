"""
Input Loaders

Loaders for the vehicle queue and employee pool of a batch.
"""

from .queue import (
    load_vehicles,
    load_employee_pool,
    vehicles_from_frame,
    vehicles_from_records,
    employees_from_frame,
    VEHICLE_COLUMNS,
    EMPLOYEE_COLUMNS,
)

__all__ = [
    "load_vehicles",
    "load_employee_pool",
    "vehicles_from_frame",
    "vehicles_from_records",
    "employees_from_frame",
    "VEHICLE_COLUMNS",
    "EMPLOYEE_COLUMNS",
]
