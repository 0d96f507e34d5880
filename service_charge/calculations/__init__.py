"""Bill apportionment package."""

from service_charge.calculations.summary import (
    calculate_bill_summary,
    calculate_category_share,
    calculate_combined_total,
    calculate_garage_collection,
    summarize_bill,
)

__all__ = [
    "calculate_bill_summary",
    "calculate_category_share",
    "calculate_combined_total",
    "calculate_garage_collection",
    "summarize_bill",
]
