"""
Pipeline Package

Batch stages, in the order they run:
- fees: Price each vehicle (parking + fuel)
- assign: Distribute priced jobs across employees
- commission: Add employee commission to each job
- present: Round and project into receipts
"""

from .fees import price_queue, calculate_units_to_fuel, calculate_parking_fee
from .assign import assign_job_loads, plan_job_loads
from .commission import apply_commission, calculate_commission
from .present import present, receipts_to_frame, summarize_by_employee
