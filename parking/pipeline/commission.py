"""
Employee Commission

Adds each employee's commission to the bill for the jobs they were assigned.

    commission   = net_total * commission_pct / 100   (commission_pct >= 0)
    commission   = 0                                  (commission_pct < 0)
    total_to_pay = net_total + commission

Commission above 100% is valid ("superstar" employees) and is not capped.
A negative percentage never blocks payment: the job is billed without
commission and an InvalidCommissionWarning is logged for every such job.
"""

import logging

from ..arithmetic import HUNDRED, ZERO
from ..config import ServiceConfig
from ..errors import InvalidCommissionWarning
from ..models import AssignedJob, PayableJob


logger = logging.getLogger(__name__)


def apply_commission(jobs: list[AssignedJob], config: ServiceConfig) -> list[PayableJob]:
    """
    Calculate commission and total to pay for every assigned job.

    Returns:
        New list of PayableJob, same order and length as the input
    """
    payable = [_payable(job, config) for job in jobs]
    logger.debug("Applied commission to %d job(s)", len(payable))
    return payable


def calculate_commission(job: AssignedJob, config: ServiceConfig):
    """Commission owed to the job's employee, zero if the percentage is invalid."""
    pct = job.employee.commission_pct
    if pct < 0:
        event = InvalidCommissionWarning(job.employee.name, pct)
        logger.warning(
            "%s", event,
            extra={"employee": event.employee, "commission_pct": event.commission_pct},
        )
        return ZERO

    math = config.arithmetic
    return math.divide(math.multiply(job.job.net_total, pct), HUNDRED)


def _payable(job: AssignedJob, config: ServiceConfig) -> PayableJob:
    commission = calculate_commission(job, config)
    return PayableJob(
        assignment=job,
        commission=commission,
        total_to_pay=config.arithmetic.add(job.job.net_total, commission),
    )
