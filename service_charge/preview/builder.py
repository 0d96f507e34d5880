"""
Bill Preview Builder

Prepares everything the preview/export step shows, already formatted for
the chosen language: one row per category, the per-flat and building
totals with their amounts in words, and the garage figures.

The exporter only lays these strings out. It never formats numbers or
does arithmetic of its own, so the PDF/image and the on-screen summary
always agree.

A blank preview is a printable template: the categories are listed but
every amount, share and total is an empty string for the reader to fill
in by hand, and the garage block is always present.
"""

from typing import Optional

from pydantic import BaseModel, Field

from service_charge.calculations import (
    calculate_category_share,
    calculate_combined_total,
    calculate_garage_collection,
    summarize_bill,
)
from service_charge.config import FormattingSettings, get_settings
from service_charge.formatting import format_currency, format_number, number_to_words
from service_charge.locales import resolve_language
from service_charge.models.bill import BillData, BillType


class PreviewRow(BaseModel):
    """One category line of the bill table."""

    category_id: str
    name: str
    duration: str
    info: str
    bill_type: BillType
    amount: str = Field(..., description="Category amount as entered")
    calculation: Optional[str] = Field(
        default=None,
        description="'<amount> ÷ <flats>' for all-building categories"
    )
    per_flat: str = Field(..., description="Share charged to each flat")


class GarageLine(BaseModel):
    """Collection for one kind of garage space."""

    kind: str = Field(..., pattern="^(motorcycle|car)$")
    spaces: str
    fee: str
    total: str
    notes: str = ""

    @property
    def text(self) -> str:
        """'<spaces> × <fee> = <total>' as shown on the bill, empty when blank."""
        if not self.total:
            return ""
        return f"{self.spaces} × {self.fee} = {self.total}"


class BillPreview(BaseModel):
    """A fully formatted bill, ready to lay out."""

    language: str
    currency: str
    blank: bool = Field(default=False, description="Printable template without figures")
    title: str
    number_of_flats: str
    rows: list[PreviewRow] = Field(default_factory=list)

    per_flat_total: str
    per_flat_total_words: str
    per_flat_total_currency: str = Field(
        ..., description="Per-flat total in the currency format, as on the payment slip"
    )
    grand_total: str
    grand_total_words: str

    # Only present when the matching garage spaces exist
    total_with_motorcycle: Optional[str] = None
    total_with_car: Optional[str] = None
    total_with_both: Optional[str] = None

    garage_lines: list[GarageLine] = Field(default_factory=list)
    garage_total: Optional[str] = None
    combined_total: Optional[str] = None
    combined_total_words: Optional[str] = None

    payment_info: str = ""
    notes: str = ""


def build_bill_preview(
    bill: BillData,
    language: Optional[str] = None,
    settings: Optional[FormattingSettings] = None,
    blank: bool = False,
) -> BillPreview:
    """
    Build the formatted preview of a bill.

    Args:
        bill: The bill as entered in the form
        language: Language for digits and words. If None, the configured
            default language.
        settings: Display settings. If None, loaded from the environment.
        blank: Build the printable template with all figures left empty

    Returns:
        BillPreview with every number already rendered
    """
    settings = settings or get_settings().formatting
    language = resolve_language(language or settings.default_language).code

    if blank:
        return _build_blank_preview(bill, language, settings)

    def number(value) -> str:
        return format_number(
            value,
            language,
            fraction_digits=settings.amount_fraction_digits,
        )

    summary = summarize_bill(bill)
    flats = number(bill.number_of_flats)

    rows = []
    for category in bill.categories:
        amount = number(category.amount)
        rows.append(PreviewRow(
            category_id=category.id,
            name=category.name,
            duration=category.duration,
            info=category.info,
            bill_type=category.bill_type,
            amount=amount,
            calculation=f"{amount} ÷ {flats}" if category.is_shared else None,
            per_flat=number(calculate_category_share(category, bill.number_of_flats)),
        ))

    garage = bill.garage
    preview = BillPreview(
        language=language,
        currency=settings.currency_code,
        title=bill.title,
        number_of_flats=flats,
        rows=rows,
        per_flat_total=number(summary.per_flat_total),
        per_flat_total_words=number_to_words(summary.per_flat_total, language),
        per_flat_total_currency=format_currency(
            summary.per_flat_total,
            language,
            currency=settings.currency_code,
            fraction_digits=settings.currency_fraction_digits,
        ),
        grand_total=number(summary.grand_total),
        grand_total_words=number_to_words(summary.grand_total, language),
        payment_info=bill.payment_info,
        notes=bill.notes,
    )

    if not garage.has_spaces:
        return preview

    collection = calculate_garage_collection(garage)
    combined = calculate_combined_total(summary, garage)

    if garage.motorcycle_spaces > 0:
        preview.total_with_motorcycle = number(summary.total_with_motorcycle)
        preview.garage_lines.append(GarageLine(
            kind="motorcycle",
            spaces=number(garage.motorcycle_spaces),
            fee=number(garage.motorcycle_space_amount),
            total=number(collection.motorcycle_total),
            notes=garage.motorcycle_space_notes,
        ))

    if garage.car_spaces > 0:
        preview.total_with_car = number(summary.total_with_car)
        preview.garage_lines.append(GarageLine(
            kind="car",
            spaces=number(garage.car_spaces),
            fee=number(garage.car_space_amount),
            total=number(collection.car_total),
            notes=garage.car_space_notes,
        ))

    if garage.motorcycle_spaces > 0 and garage.car_spaces > 0:
        preview.total_with_both = number(summary.total_with_both)

    preview.garage_total = number(collection.total)
    preview.combined_total = number(combined)
    preview.combined_total_words = number_to_words(combined, language)

    return preview


def _build_blank_preview(
    bill: BillData,
    language: str,
    settings: FormattingSettings,
) -> BillPreview:
    rows = [
        PreviewRow(
            category_id=category.id,
            name=category.name,
            duration=category.duration,
            info=category.info,
            bill_type=category.bill_type,
            amount="",
            per_flat="",
        )
        for category in bill.categories
    ]

    garage = bill.garage
    has_motorcycle = garage.motorcycle_spaces > 0
    has_car = garage.car_spaces > 0

    return BillPreview(
        language=language,
        currency=settings.currency_code,
        blank=True,
        title=bill.title,
        number_of_flats="",
        rows=rows,
        per_flat_total="",
        per_flat_total_words="",
        per_flat_total_currency="",
        grand_total="",
        grand_total_words="",
        # Variant lines are only printed for the space kinds in use
        total_with_motorcycle="" if has_motorcycle else None,
        total_with_car="" if has_car else None,
        total_with_both="" if has_motorcycle and has_car else None,
        garage_lines=[
            GarageLine(kind="motorcycle", spaces="", fee="", total=""),
            GarageLine(kind="car", spaces="", fee="", total=""),
        ],
        garage_total="",
        combined_total="",
        combined_total_words="",
        payment_info=bill.payment_info,
        notes=bill.notes,
    )
