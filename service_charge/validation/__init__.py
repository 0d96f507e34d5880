"""Bill validation package."""

from service_charge.validation.validator import BillValidator

__all__ = ["BillValidator"]
