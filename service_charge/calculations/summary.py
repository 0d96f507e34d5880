"""
Apportionment Engine

Turns a list of expense categories plus building parameters into a
BillSummary.

ROUNDING RULE: every division is rounded UP (ceiling), never to nearest.
The building must never under-collect against its real costs, so each
all-building category may over-collect by at most (flats - 1) units.
Previously computed bills depend on this exact rule.

The engine never raises for incomplete form input:
- zero flats: all-building shares are 0, nothing is divided
- no categories: every total is 0
- no garage: garage variants equal the per-flat total

Garage variants are whole amounts too: a fractional space fee is rounded
up along with the per-flat total it is added to.
"""

from decimal import ROUND_CEILING, Decimal
from typing import Iterable, Optional

from service_charge.models.bill import (
    BillData,
    BillSummary,
    BillType,
    GarageCollection,
    GarageSpace,
    ServiceCategory,
)
from service_charge.observability import get_logger

logger = get_logger(__name__)


def _ceil(value: Decimal) -> Decimal:
    return value.to_integral_value(rounding=ROUND_CEILING)


def calculate_category_share(
    category: ServiceCategory,
    number_of_flats: int,
) -> Decimal:
    """
    Per-flat share of a single category.

    single-flat amounts are used unchanged. all-building amounts are
    divided by the number of flats and rounded up; with no flats set
    the share is 0.
    """
    if category.bill_type == BillType.SINGLE_FLAT:
        return category.amount

    if number_of_flats > 0:
        return _ceil(category.amount / Decimal(number_of_flats))

    return Decimal("0")


def calculate_bill_summary(
    categories: Iterable[ServiceCategory],
    number_of_flats: int,
    garage: Optional[GarageSpace] = None,
) -> BillSummary:
    """
    Apportion all categories across the flats of the building.

    Args:
        categories: Expense categories, in display order
        number_of_flats: Flats sharing the bill (0 means not set yet)
        garage: Garage allocation; None is the same as no garage

    Returns:
        BillSummary with category_totals in the same order as categories
    """
    garage = garage or GarageSpace()

    running_total = Decimal("0")
    category_totals: dict[str, Decimal] = {}

    for category in categories:
        share = calculate_category_share(category, number_of_flats)
        running_total += share
        category_totals[category.id] = share

    # Always applied, even though all-building shares are already whole
    per_flat_total = int(_ceil(running_total))
    grand_total = int(_ceil(Decimal(per_flat_total) * number_of_flats))

    motorcycle_fee = garage.motorcycle_space_amount
    car_fee = garage.car_space_amount

    summary = BillSummary(
        per_flat_total=per_flat_total,
        grand_total=grand_total,
        total_with_motorcycle=int(_ceil(per_flat_total + motorcycle_fee)),
        total_with_car=int(_ceil(per_flat_total + car_fee)),
        total_with_both=int(_ceil(per_flat_total + motorcycle_fee + car_fee)),
        category_totals=category_totals,
    )

    logger.debug(
        "bill_summary_calculated",
        category_count=len(category_totals),
        number_of_flats=number_of_flats,
        per_flat_total=per_flat_total,
        grand_total=grand_total,
    )

    return summary


def summarize_bill(bill: BillData) -> BillSummary:
    """Calculate the summary for a whole bill as entered in the form."""
    return calculate_bill_summary(
        bill.categories,
        bill.number_of_flats,
        bill.garage,
    )


def calculate_garage_collection(garage: GarageSpace) -> GarageCollection:
    """Total parking income: spaces times the per-space fee, per vehicle type."""
    motorcycle_total = garage.motorcycle_spaces * garage.motorcycle_space_amount
    car_total = garage.car_spaces * garage.car_space_amount

    return GarageCollection(
        motorcycle_total=motorcycle_total,
        car_total=car_total,
        total=motorcycle_total + car_total,
    )


def calculate_combined_total(
    summary: BillSummary,
    garage: GarageSpace,
) -> Decimal:
    """Everything the building collects: all flats plus all garage spaces."""
    return summary.grand_total + calculate_garage_collection(garage).total
