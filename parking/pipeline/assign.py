"""
Job Load Assignment

Distributes priced jobs (mostly) evenly across employees in a way that
favours profit: the most valuable jobs go to the highest-commission employees.

ALGORITHM
---------
    1. Sort employees by commission_pct, highest first (stable)
    2. Sort jobs by net_total, highest first (stable)
    3. chunk_size = max(1, total_jobs // total_employees)
    4. Every employee is planned chunk_size jobs
    5. Leftover jobs (total_jobs - chunk_size * total_employees) all go to the
       first employee
    6. Walk employees in order, each taking the next num_jobs jobs from the
       sorted sequence
    7. Stop once the sequence is exhausted
    8. Any job left over is an AssignmentInvariantViolation

LEFTOVER SKEW
-------------
Putting every leftover job on the top earner is not a perfectly even split:
10 jobs across 4 employees plans 4-2-2-2 rather than 3-3-2-2. It still
maximises commission-weighted revenue and is kept as is.

When there are fewer jobs than employees, chunk_size is pegged to 1 and the
lowest-commission employees receive nothing.
"""

import logging

from ..errors import AssignmentInvariantViolation, ConfigError
from ..models import AssignedJob, Employee, JobLoad, PricedJob


logger = logging.getLogger(__name__)


def sort_employees(employees: list[Employee]) -> list[Employee]:
    """Highest commission first; ties keep their original order."""
    return sorted(employees, key=lambda e: e.commission_pct, reverse=True)


def sort_jobs(jobs: list[PricedJob]) -> list[PricedJob]:
    """Highest net_total first; ties keep their original order."""
    return sorted(jobs, key=lambda j: j.net_total, reverse=True)


def plan_job_loads(employees: list[Employee], total_jobs: int) -> list[JobLoad]:
    """
    Decide how many jobs each employee gets, before any job is handed out.

    Args:
        employees: Employee pool (any order)
        total_jobs: Number of jobs in the batch

    Returns:
        JobLoad per employee, highest commission first

    Raises:
        ConfigError: If the employee pool is empty
    """
    if not employees:
        raise ConfigError("Cannot assign jobs: the employee pool is empty")

    ranked = sort_employees(employees)
    total_employees = len(ranked)

    chunk_size = max(1, total_jobs // total_employees)
    leftover = total_jobs - chunk_size * total_employees

    loads = [JobLoad(employee=e, num_jobs=chunk_size) for e in ranked]
    if leftover > 0:
        top = loads[0]
        loads[0] = top._replace(num_jobs=top.num_jobs + leftover)

    logger.debug(
        "Planned %d job(s) across %d employee(s): chunk=%d leftover=%d",
        total_jobs, total_employees, chunk_size, max(leftover, 0),
    )
    return loads


def assign_job_loads(employees: list[Employee], jobs: list[PricedJob]) -> list[AssignedJob]:
    """
    Assign every priced job to exactly one employee.

    Neither input list is modified; the output is ordered by employee rank,
    then by job value.

    Args:
        employees: Employee pool
        jobs: Priced jobs from price_queue()

    Returns:
        List of AssignedJob, one per input job

    Raises:
        ConfigError: If the employee pool is empty
        AssignmentInvariantViolation: If any job is left unassigned
    """
    loads = plan_job_loads(employees, len(jobs))
    queue = tuple(sort_jobs(jobs))

    assigned = []
    cursor = 0
    for load in loads:
        if cursor >= len(queue):
            break
        chunk = queue[cursor:cursor + load.num_jobs]
        cursor += len(chunk)
        assigned.extend(
            AssignedJob(employee=load.employee, job=job, num_jobs=load.num_jobs)
            for job in chunk
        )

    # Every job must have an owner by now
    unassigned = len(queue) - cursor
    if unassigned > 0:
        raise AssignmentInvariantViolation(unassigned=unassigned, total=len(queue))

    return assigned
