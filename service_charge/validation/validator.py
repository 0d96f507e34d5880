"""
Two-Stage Bill Validation

The calculator itself accepts anything the form holds (blank fields, zero
flats, negative numbers) so the live summary never breaks while the user is
typing. Before the bill can be previewed or exported, it goes through this
validator.

STAGE 1 - REQUIRED FIELDS:
- Bill title present
- At least one category
- At least the minimum number of flats
- Every category has a name and a minimum amount

STAGE 2 - SEMANTIC VALIDATION:
- Category ids are unique (summary totals are keyed by id)
- Garage counts and fees are not negative
- Garage fees are not set without any spaces
- Unusually large amounts

Stage 2 only runs when stage 1 passes.

BLANK FORMS: a blank form is a printable template filled in by hand, so
only the title and the list of categories are checked. Amounts, flats and
the garage are left for the reader to write in.

IMPORTANT: Validation NEVER fixes the bill. It reports issues, in the
user's language, for the form to show next to the offending fields.
"""

from collections import Counter
from decimal import Decimal
from typing import Optional

from service_charge.config import ValidationSettings, get_settings
from service_charge.formatting import format_number
from service_charge.locales import DEFAULT_LANGUAGE, FALLBACK_LANGUAGE, get_language_config
from service_charge.models.bill import (
    BillData,
    ValidationIssue,
    ValidationResult,
)
from service_charge.observability import get_logger

logger = get_logger(__name__)


_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "bill_title_required": "Bill title is required",
        "number_of_flats_min": "Number of flats must be at least {minimum}",
        "category_name_required": "Category name is required",
        "amount_min": "Amount must be at least {minimum}",
        "no_categories": "Add at least one expense category",
        "duplicate_category_id": "Category ID is used more than once",
        "garage_negative": "Garage values cannot be negative",
        "garage_fee_without_spaces": "Garage fee is set but no spaces are allocated",
        "amount_unusually_high": "Amount ({amount}) seems unusually high",
        "all_passed": "All checks passed.",
        "fix_required": "Please fill in the following:",
        "please_verify": "Please verify the following:",
        "can_export": "You can continue to the preview.",
        "cannot_export": "Please fix the issues above before continuing.",
    },
    "bn": {
        "bill_title_required": "বিলের শিরোনাম প্রয়োজন",
        "number_of_flats_min": "ফ্ল্যাটের সংখ্যা কমপক্ষে {minimum} হতে হবে",
        "category_name_required": "বিভাগের নাম প্রয়োজন",
        "amount_min": "পরিমাণ কমপক্ষে {minimum} হতে হবে",
        "no_categories": "অন্তত একটি খরচের বিভাগ যোগ করুন",
        "duplicate_category_id": "বিভাগের আইডি একাধিকবার ব্যবহৃত হয়েছে",
        "garage_negative": "গ্যারেজের মান ঋণাত্মক হতে পারে না",
        "garage_fee_without_spaces": "গ্যারেজ ফি নির্ধারিত কিন্তু কোনো স্থান বরাদ্দ নেই",
        "amount_unusually_high": "পরিমাণ ({amount}) অস্বাভাবিক বেশি মনে হচ্ছে",
        "all_passed": "সব যাচাই সফল হয়েছে।",
        "fix_required": "অনুগ্রহ করে নিচের তথ্যগুলো পূরণ করুন:",
        "please_verify": "অনুগ্রহ করে নিচের বিষয়গুলো যাচাই করুন:",
        "can_export": "আপনি প্রিভিউতে যেতে পারেন।",
        "cannot_export": "এগিয়ে যাওয়ার আগে উপরের সমস্যাগুলো ঠিক করুন।",
    },
}


class BillValidator:
    """
    Validates bill data through a two-stage pipeline.

    Messages are produced in the validator's language; languages without
    a message table fall back to English.
    """

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        settings: Optional[ValidationSettings] = None,
    ):
        """
        Initialize validator.

        Args:
            language: Language for issue messages
            settings: Thresholds. If None, loaded from the environment.
        """
        config = get_language_config(language)
        code = config.code if config else FALLBACK_LANGUAGE
        self._language = code if code in _MESSAGES else FALLBACK_LANGUAGE
        self._messages = _MESSAGES[self._language]
        self._settings = settings or get_settings().validation

    @property
    def language(self) -> str:
        return self._language

    def _message(self, key: str, **values) -> str:
        return self._messages[key].format(**values)

    def _number(self, value) -> str:
        return format_number(value, self._language)

    def _validate_required(
        self,
        bill: BillData,
        blank: bool = False,
    ) -> tuple[bool, list[ValidationIssue]]:
        """
        Stage 1: Required fields.

        For a blank form only the title and the category list are required.

        Returns: (is_valid, list_of_issues)
        """
        issues = []

        if not bill.title.strip():
            issues.append(ValidationIssue(
                field="title",
                issue_type="missing",
                message=self._message("bill_title_required"),
                severity="error",
            ))

        # Nothing to preview or export without categories
        if not bill.categories:
            issues.append(ValidationIssue(
                field="categories",
                issue_type="empty",
                message=self._message("no_categories"),
                severity="error",
            ))

        if blank:
            return not issues, issues

        min_flats = self._settings.min_flats
        if bill.number_of_flats < min_flats:
            issues.append(ValidationIssue(
                field="number_of_flats",
                issue_type="below_minimum",
                message=self._message(
                    "number_of_flats_min",
                    minimum=self._number(min_flats),
                ),
                severity="error",
            ))

        min_amount = Decimal(str(self._settings.min_category_amount))
        for category in bill.categories:
            if not category.name.strip():
                issues.append(ValidationIssue(
                    field="name",
                    issue_type="missing",
                    message=self._message("category_name_required"),
                    severity="error",
                    category_id=category.id,
                ))

            if category.amount < min_amount:
                issues.append(ValidationIssue(
                    field="amount",
                    issue_type="below_minimum",
                    message=self._message(
                        "amount_min",
                        minimum=self._number(min_amount),
                    ),
                    severity="error",
                    category_id=category.id,
                ))

        is_valid = not any(issue.severity == "error" for issue in issues)

        return is_valid, issues

    def _validate_semantic(
        self,
        bill: BillData,
    ) -> tuple[bool, list[ValidationIssue]]:
        """
        Stage 2: Semantic validation.

        Returns: (is_valid, list_of_issues)
        """
        issues = []

        # Totals are keyed by id, a repeated id would hide a category
        id_counts = Counter(category.id for category in bill.categories)
        for category_id, count in id_counts.items():
            if count > 1:
                issues.append(ValidationIssue(
                    field="id",
                    issue_type="duplicate",
                    message=self._message("duplicate_category_id"),
                    severity="error",
                    category_id=category_id,
                ))

        garage = bill.garage
        garage_values = {
            "motorcycle_spaces": garage.motorcycle_spaces,
            "motorcycle_space_amount": garage.motorcycle_space_amount,
            "car_spaces": garage.car_spaces,
            "car_space_amount": garage.car_space_amount,
        }
        for field, value in garage_values.items():
            if value < 0:
                issues.append(ValidationIssue(
                    field=f"garage.{field}",
                    issue_type="negative",
                    message=self._message("garage_negative"),
                    severity="error",
                ))

        fee_without_spaces = {
            "motorcycle_space_amount": (garage.motorcycle_space_amount, garage.motorcycle_spaces),
            "car_space_amount": (garage.car_space_amount, garage.car_spaces),
        }
        for field, (fee, spaces) in fee_without_spaces.items():
            if fee > 0 and spaces == 0:
                issues.append(ValidationIssue(
                    field=f"garage.{field}",
                    issue_type="inconsistent",
                    message=self._message("garage_fee_without_spaces"),
                    severity="warning",
                ))

        max_amount = Decimal(str(self._settings.max_category_amount))
        for category in bill.categories:
            if category.amount > max_amount:
                issues.append(ValidationIssue(
                    field="amount",
                    issue_type="suspicious_value",
                    message=self._message(
                        "amount_unusually_high",
                        amount=self._number(category.amount),
                    ),
                    severity="warning",
                    category_id=category.id,
                ))

        is_valid = not any(issue.severity == "error" for issue in issues)

        return is_valid, issues

    def validate(self, bill: BillData, blank: bool = False) -> ValidationResult:
        """
        Run full two-stage validation pipeline.

        Args:
            bill: The bill as currently entered in the form
            blank: Validate as a blank printable form. Stage 2 does not
                   apply, since there are no amounts to check.

        Returns:
            ValidationResult with all issues found
        """
        all_issues = []

        # Stage 1: Required fields
        required_valid, required_issues = self._validate_required(bill, blank)
        all_issues.extend(required_issues)

        # Only run stage 2 if stage 1 passes
        semantic_valid = blank and required_valid
        if required_valid and not blank:
            semantic_valid, semantic_issues = self._validate_semantic(bill)
            all_issues.extend(semantic_issues)

        warnings = [
            issue.message for issue in all_issues if issue.severity == "warning"
        ]
        is_valid = required_valid and semantic_valid

        result = ValidationResult(
            language=self._language,
            required_valid=required_valid,
            semantic_valid=semantic_valid,
            is_valid=is_valid,
            can_export=is_valid,
            issues=all_issues,
            warnings=warnings,
        )

        logger.info(
            "bill_validated",
            is_valid=result.is_valid,
            blank=blank,
            error_count=result.error_count,
            warning_count=len(result.warnings),
            category_count=len(bill.categories),
        )

        return result

    def get_user_friendly_summary(
        self,
        result: ValidationResult,
    ) -> str:
        """
        Generate a short, user-friendly summary of validation results.

        This is what the form shows above the export button.
        """
        if result.is_valid and not result.warnings:
            return f"✅ {self._message('all_passed')}"

        lines = []

        if result.has_errors:
            lines.append(f"❌ {self._message('fix_required')}")
            for issue in result.issues:
                if issue.severity == "error":
                    lines.append(f"   • {issue.message}")

        if result.warnings:
            if lines:
                lines.append("")
            lines.append(f"⚠️ {self._message('please_verify')}")
            for warning in result.warnings:
                lines.append(f"   • {warning}")

        lines.append("")
        if result.can_export:
            lines.append(self._message("can_export"))
        else:
            lines.append(self._message("cannot_export"))

        return "\n".join(lines)
