"""
Core Data Models for Service Charge

These models define the schemas for everything flowing between the form UI,
the apportionment engine and the formatters.
They are designed to:
1. Accept the form's camelCase payload as-is (billType, numberOfFlats, ...)
2. Tolerate transiently incomplete input (blank fields read as zero)
3. Reject structurally malformed values (non-numeric amounts) at the boundary
4. Be serializable for export

DESIGN DECISION: Amounts are Decimal, never float. Ceiling rounding must be
exact, and 0.1 + 0.2 style float artefacts would push shares up a unit.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)
from pydantic.alias_generators import to_camel


def _blank_to_zero(value: Any) -> Any:
    """Form fields that were cleared arrive as "" or None; both mean zero."""
    if value is None:
        return 0
    if isinstance(value, str) and not value.strip():
        return 0
    return value


def _new_category_id() -> str:
    return uuid4().hex


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class BillType(str, Enum):
    """
    How a category amount is apportioned.

    SINGLE_FLAT: the amount is already the charge for one flat.
    ALL_BUILDING: the amount is the building total, divided across all flats.
    """
    SINGLE_FLAT = "single-flat"
    ALL_BUILDING = "all-building"


# =============================================================================
# BILL INPUT MODELS
# =============================================================================

class _FormModel(BaseModel):
    """Shared config: snake_case in Python, camelCase from the form."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class ServiceCategory(_FormModel):
    """
    One shared expense line item.

    The amount means different things depending on bill_type:
    - single-flat: the per-flat charge, used unchanged
    - all-building: the building total, divided by the number of flats

    Negative amounts are NOT rejected here. Validation is a separate layer
    (see service_charge.validation) that runs before export.
    """

    id: str = Field(
        default_factory=_new_category_id,
        min_length=1,
        description="Stable identifier, assigned at creation and never reused"
    )
    name: str = Field(
        default="",
        description="Category label (may be empty until validated)"
    )
    duration: str = Field(
        default="",
        description="Billing period description (informational)"
    )
    info: str = Field(
        default="",
        description="Supplementary note (informational)"
    )
    bill_type: BillType = Field(
        default=BillType.ALL_BUILDING,
        description="Apportionment rule"
    )
    amount: Decimal = Field(
        default=Decimal("0"),
        description="Per-flat charge or building total, see bill_type"
    )

    @field_validator('amount', mode='before')
    @classmethod
    def blank_amount_is_zero(cls, v: Any) -> Any:
        return _blank_to_zero(v)

    @property
    def is_shared(self) -> bool:
        """True when the amount is divided across all flats."""
        return self.bill_type == BillType.ALL_BUILDING


class GarageSpace(_FormModel):
    """
    Building-wide parking allocation.

    Space fees are flat per-space charges. They are added on top of a
    flat's share, never divided by the number of flats.
    """

    motorcycle_spaces: int = Field(
        default=0,
        description="Number of motorcycle spaces allocated"
    )
    motorcycle_space_amount: Decimal = Field(
        default=Decimal("0"),
        description="Fee per motorcycle space"
    )
    motorcycle_space_notes: str = ""
    car_spaces: int = Field(
        default=0,
        description="Number of car spaces allocated"
    )
    car_space_amount: Decimal = Field(
        default=Decimal("0"),
        description="Fee per car space"
    )
    car_space_notes: str = ""

    @field_validator(
        'motorcycle_spaces',
        'motorcycle_space_amount',
        'car_spaces',
        'car_space_amount',
        mode='before',
    )
    @classmethod
    def blank_is_zero(cls, v: Any) -> Any:
        return _blank_to_zero(v)

    @property
    def has_spaces(self) -> bool:
        """True when any motorcycle or car space is allocated."""
        return self.motorcycle_spaces > 0 or self.car_spaces > 0


class BillData(_FormModel):
    """
    Aggregate root for one bill, as filled in by the user.

    The calculation core only reads this; it never mutates it.
    Saved data from before garage support has no "garage" key and
    gets an all-zero garage.
    """

    title: str = ""
    number_of_flats: int = Field(
        default=0,
        description="Number of flats sharing the bill (0 = not set yet)"
    )
    garage: GarageSpace = Field(default_factory=GarageSpace)
    payment_info: str = ""
    notes: str = ""
    categories: list[ServiceCategory] = Field(default_factory=list)

    @field_validator('number_of_flats', mode='before')
    @classmethod
    def blank_flats_is_zero(cls, v: Any) -> Any:
        return _blank_to_zero(v)

    @field_validator('garage', mode='before')
    @classmethod
    def missing_garage_is_empty(cls, v: Any) -> Any:
        return GarageSpace() if v is None else v


# =============================================================================
# DERIVED MODELS
# =============================================================================

class BillSummary(_FormModel):
    """
    Result of apportioning a bill across flats.

    Always fully derivable from (categories, number_of_flats, garage).
    It is never stored or edited on its own.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    per_flat_total: int = Field(
        default=0,
        description="Sum of all category shares, rounded up"
    )
    grand_total: int = Field(
        default=0,
        description="per_flat_total * number_of_flats, rounded up"
    )
    total_with_motorcycle: int = Field(
        default=0,
        description="per_flat_total plus one motorcycle space fee, rounded up"
    )
    total_with_car: int = Field(
        default=0,
        description="per_flat_total plus one car space fee, rounded up"
    )
    total_with_both: int = Field(
        default=0,
        description="per_flat_total plus both space fees, rounded up"
    )
    # Insertion order follows the category input order
    category_totals: dict[str, Decimal] = Field(
        default_factory=dict,
        description="Category id -> per-flat share"
    )


class GarageCollection(_FormModel):
    """What the building collects for parking, on top of the flat bills."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    motorcycle_total: Decimal = Decimal("0")
    car_total: Decimal = Decimal("0")
    total: Decimal = Decimal("0")


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single validation issue found."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'below_minimum', 'duplicate')"
    )
    message: str = Field(
        ...,
        description="Localized, human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
    category_id: Optional[str] = Field(
        default=None,
        description="Category the issue belongs to, if any"
    )


class ValidationResult(BaseModel):
    """
    Result of the two-stage bill validation.

    Stage 1: Required fields (title, flats, category names and amounts)
    Stage 2: Semantic checks (duplicates, garage consistency, odd amounts)
    """

    language: str = Field(
        ...,
        description="Language the messages are in"
    )
    required_valid: bool = Field(
        ...,
        description="Did the required-field stage pass?"
    )
    semantic_valid: bool = Field(
        ...,
        description="Did the semantic stage pass?"
    )
    is_valid: bool = Field(
        ...,
        description="Overall validation result"
    )
    can_export: bool = Field(
        ...,
        description="Can the bill go on to preview/export?"
    )
    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="All validation issues found"
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Non-blocking warnings"
    )

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")

    def issues_for_category(self, category_id: str) -> list[ValidationIssue]:
        """Issues attached to one category, for inline form errors."""
        return [issue for issue in self.issues if issue.category_id == category_id]
