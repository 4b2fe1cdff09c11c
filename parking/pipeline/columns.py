"""
Column Schema Definitions

Documents the columns of the tables produced from a batch.
"""


# =============================================================================
# RECEIPT COLUMNS (receipts_to_frame)
# =============================================================================

RECEIPT_COLUMNS = [
    "licence_plate",        # Vehicle licence plate
    "employee",             # Name of the employee who serviced the vehicle
    "fuel_added",           # Fuel units added (0 if not refuelled)
    "price",                # Total to pay: net total + commission
]

METADATA_COLS = [
    "calculator_version",   # Version stamp from parking/version.py
]


# =============================================================================
# SUMMARY COLUMNS (summarize_by_employee)
# =============================================================================

SUMMARY_COLUMNS = [
    "employee",             # Employee name
    "commission_pct",       # Commission percentage
    "num_jobs",             # Jobs actually assigned in this batch
    "net_total",            # Sum of parking + fuel fees
    "commission",           # Sum of commission earned
    "total_to_pay",         # Sum of net_total + commission
]


# =============================================================================
# COLUMN SETS
# =============================================================================

AFTER_PRESENT = RECEIPT_COLUMNS + METADATA_COLS
