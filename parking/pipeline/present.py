"""
Presentation

Projects payable jobs into receipts and tables for whoever consumes the batch.
This is the only place values are rounded: exact decimals are converted to
plain numbers at config.arithmetic.decimal_places, half-up.
"""

import polars as pl

from ..config import ServiceConfig
from ..models import PayableJob, Receipt
from ..version import VERSION
from .columns import RECEIPT_COLUMNS, SUMMARY_COLUMNS


def present(jobs: list[PayableJob], config: ServiceConfig) -> list[Receipt]:
    """Convert payable jobs to receipts, preserving order."""
    math = config.arithmetic
    return [
        Receipt(
            licence_plate=job.job.licence_plate,
            employee=job.employee.name,
            fuel_added=math.to_number(job.job.fuel_added),
            price=math.to_number(job.total_to_pay),
        )
        for job in jobs
    ]


def receipts_to_frame(receipts: list[Receipt]) -> pl.DataFrame:
    """
    Render receipts as a DataFrame stamped with the calculator version.

    Returns:
        DataFrame with RECEIPT_COLUMNS + calculator_version
    """
    df = pl.DataFrame(
        [r._asdict() for r in receipts],
        schema={
            "licence_plate": pl.Utf8,
            "employee": pl.Utf8,
            "fuel_added": pl.Float64,
            "price": pl.Float64,
        },
    )
    return df.select(RECEIPT_COLUMNS).with_columns(
        pl.lit(VERSION).alias("calculator_version")
    )


def summarize_by_employee(jobs: list[PayableJob], config: ServiceConfig) -> pl.DataFrame:
    """
    Total each employee's jobs, fees and commission.

    Sums are taken on exact decimals before rounding, so the summary agrees
    with the per-job values to within one rounding step.

    Returns:
        DataFrame with SUMMARY_COLUMNS, one row per employee that received work,
        in assignment order
    """
    math = config.arithmetic
    totals: dict[str, dict] = {}

    for job in jobs:
        row = totals.setdefault(job.employee.name, {
            "employee": job.employee.name,
            "commission_pct": job.employee.commission_pct,
            "num_jobs": 0,
            "net_total": 0,
            "commission": 0,
            "total_to_pay": 0,
        })
        row["num_jobs"] += 1
        row["net_total"] = math.add(row["net_total"], job.job.net_total)
        row["commission"] = math.add(row["commission"], job.commission)
        row["total_to_pay"] = math.add(row["total_to_pay"], job.total_to_pay)

    rows = [
        {
            **row,
            "commission_pct": math.to_number(row["commission_pct"]),
            "net_total": math.to_number(row["net_total"]),
            "commission": math.to_number(row["commission"]),
            "total_to_pay": math.to_number(row["total_to_pay"]),
        }
        for row in totals.values()
    ]

    return pl.DataFrame(
        rows,
        schema={
            "employee": pl.Utf8,
            "commission_pct": pl.Float64,
            "num_jobs": pl.Int64,
            "net_total": pl.Float64,
            "commission": pl.Float64,
            "total_to_pay": pl.Float64,
        },
    ).select(SUMMARY_COLUMNS)
