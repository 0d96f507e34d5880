"""
Tests for the two-stage bill validator.
"""

import pytest

from service_charge.config import ValidationSettings
from service_charge.models.bill import BillData, GarageSpace, ServiceCategory
from service_charge.sample_data import get_example_data
from service_charge.validation import BillValidator


@pytest.fixture
def settings():
    """Default thresholds, independent of the environment."""
    return ValidationSettings(min_flats=1, min_category_amount=1.0, max_category_amount=10000000.0)


@pytest.fixture
def validator(settings):
    return BillValidator(language="en", settings=settings)


def valid_bill(**overrides) -> BillData:
    data = {
        "title": "March",
        "number_of_flats": 4,
        "categories": [ServiceCategory(id="1", name="Water", amount=400)],
    }
    data.update(overrides)
    return BillData(**data)


class TestRequiredFields:
    """Stage 1."""

    def test_example_bill_passes(self, validator):
        """Test that the bundled example is exportable."""
        result = validator.validate(get_example_data("en"))

        assert result.is_valid is True
        assert result.can_export is True
        assert result.issues == []

    def test_missing_title(self, validator):
        """Test that a blank title blocks export."""
        result = validator.validate(valid_bill(title="   "))

        assert result.required_valid is False
        assert result.can_export is False
        assert result.issues[0].field == "title"
        assert result.issues[0].message == "Bill title is required"

    def test_zero_flats(self, validator):
        """Test the minimum flat count."""
        result = validator.validate(valid_bill(number_of_flats=0))

        issue = result.issues[0]
        assert issue.field == "number_of_flats"
        assert issue.issue_type == "below_minimum"
        assert issue.message == "Number of flats must be at least 1"

    def test_category_issues_carry_category_id(self, validator):
        """Test that category issues point at their category."""
        bill = valid_bill(categories=[
            ServiceCategory(id="ok", name="Water", amount=400),
            ServiceCategory(id="bad", name="", amount=0),
        ])
        result = validator.validate(bill)

        assert result.error_count == 2
        assert result.issues_for_category("ok") == []
        fields = {issue.field for issue in result.issues_for_category("bad")}
        assert fields == {"name", "amount"}

    def test_stage_two_skipped_on_stage_one_failure(self, validator):
        """Test that semantic checks wait for required fields."""
        bill = valid_bill(title="", garage=GarageSpace(car_spaces=-1))
        result = validator.validate(bill)

        assert result.semantic_valid is False
        assert all(issue.field == "title" for issue in result.issues)

    def test_no_categories_blocks_export(self, validator):
        """Test that a bill without categories cannot be exported."""
        result = validator.validate(valid_bill(categories=[]))

        assert result.required_valid is False
        assert result.can_export is False
        assert result.warnings == []
        issue = result.issues[0]
        assert issue.field == "categories"
        assert issue.severity == "error"
        assert issue.message == "Add at least one expense category"


class TestSemanticChecks:
    """Stage 2."""

    def test_duplicate_ids(self, validator):
        """Test that repeated ids block export."""
        bill = valid_bill(categories=[
            ServiceCategory(id="1", name="Water", amount=400),
            ServiceCategory(id="1", name="Gas", amount=200),
        ])
        result = validator.validate(bill)

        assert result.is_valid is False
        assert result.issues[0].issue_type == "duplicate"
        assert result.issues[0].category_id == "1"

    def test_negative_garage_values(self, validator):
        """Test that negative garage values are errors."""
        garage = GarageSpace(motorcycle_spaces=-2, car_space_amount=-50)
        result = validator.validate(valid_bill(garage=garage))

        fields = {issue.field for issue in result.issues if issue.severity == "error"}
        assert fields == {"garage.motorcycle_spaces", "garage.car_space_amount"}

    def test_fee_without_spaces(self, validator):
        """Test a fee on a vehicle type with no spaces."""
        garage = GarageSpace(motorcycle_space_amount=100)
        result = validator.validate(valid_bill(garage=garage))

        assert result.is_valid is True
        assert result.issues[0].issue_type == "inconsistent"
        assert result.issues[0].field == "garage.motorcycle_space_amount"

    def test_unusually_high_amount(self, settings):
        """Test the high amount warning and its formatted number."""
        settings.max_category_amount = 1000.0
        validator = BillValidator(language="en", settings=settings)
        bill = valid_bill(categories=[ServiceCategory(id="1", name="Roof", amount=250000)])
        result = validator.validate(bill)

        assert result.is_valid is True
        assert result.warnings == ["Amount (250,000) seems unusually high"]


class TestBlankForm:
    """A blank printable form only needs a title and categories."""

    def test_unfilled_amounts_and_flats_pass(self, validator):
        """Test that nothing numeric is checked on a blank form."""
        bill = valid_bill(
            number_of_flats=0,
            categories=[ServiceCategory(id="1", name="", amount=0)],
            garage=GarageSpace(car_spaces=-1, motorcycle_space_amount=100),
        )
        result = validator.validate(bill, blank=True)

        assert result.is_valid is True
        assert result.can_export is True
        assert result.issues == []

    def test_same_bill_fails_when_calculated(self, validator):
        """Test that the calculated form still checks the numbers."""
        bill = valid_bill(number_of_flats=0)
        assert validator.validate(bill, blank=True).can_export is True
        assert validator.validate(bill).can_export is False

    def test_title_required(self, validator):
        result = validator.validate(valid_bill(title=""), blank=True)

        assert result.can_export is False
        assert [issue.field for issue in result.issues] == ["title"]

    def test_categories_required(self, validator):
        """Test that a blank form without categories cannot be printed."""
        result = validator.validate(valid_bill(categories=[]), blank=True)

        assert result.can_export is False
        assert [issue.field for issue in result.issues] == ["categories"]


class TestLanguages:
    """Messages follow the validator's language."""

    def test_bengali_messages(self, settings):
        """Test Bengali messages with Bengali digits."""
        validator = BillValidator(language="bn", settings=settings)
        result = validator.validate(valid_bill(title="", number_of_flats=0))

        messages = [issue.message for issue in result.issues]
        assert messages == [
            "বিলের শিরোনাম প্রয়োজন",
            "ফ্ল্যাটের সংখ্যা কমপক্ষে ১ হতে হবে",
        ]
        assert result.language == "bn"

    @pytest.mark.parametrize("code", ["fr", "", "xx-YY"])
    def test_unknown_language_uses_english(self, settings, code):
        """Test the fallback message language."""
        validator = BillValidator(language=code, settings=settings)
        assert validator.language == "en"

    def test_region_code(self, settings):
        """Test a regional code."""
        assert BillValidator(language="bn-BD", settings=settings).language == "bn"


class TestUserFriendlySummary:
    """Tests for the summary shown above the export button."""

    def test_all_passed(self, validator):
        result = validator.validate(valid_bill())
        assert validator.get_user_friendly_summary(result) == "✅ All checks passed."

    def test_errors(self, validator):
        """Test the error listing."""
        result = validator.validate(valid_bill(title=""))
        summary = validator.get_user_friendly_summary(result)

        assert summary.startswith("❌ Please fill in the following:")
        assert "   • Bill title is required" in summary
        assert summary.endswith("Please fix the issues above before continuing.")

    def test_warnings_only(self, validator):
        """Test that warnings still allow export."""
        result = validator.validate(valid_bill(garage=GarageSpace(car_space_amount=250)))
        summary = validator.get_user_friendly_summary(result)

        assert "⚠️ Please verify the following:" in summary
        assert summary.endswith("You can continue to the preview.")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
