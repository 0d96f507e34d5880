"""
Data Models Package

This package contains all Pydantic models used by the service charge calculator.
All data flowing between the form, the engine and the formatters conforms to these schemas.
"""

from service_charge.models.bill import (
    BillData,
    BillSummary,
    BillType,
    GarageCollection,
    GarageSpace,
    ServiceCategory,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    # Bill input
    "BillData",
    "BillType",
    "GarageSpace",
    "ServiceCategory",
    # Derived
    "BillSummary",
    "GarageCollection",
    # Validation
    "ValidationIssue",
    "ValidationResult",
]
