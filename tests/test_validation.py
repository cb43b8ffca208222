"""Unit tests for the project validation engine and its state wrapper."""

from __future__ import annotations

import math
from datetime import date, datetime
from decimal import Decimal
from typing import Any

import pytest

from app.models.project import ProjectDraft
from app.services.validation import (
    PROJECT_RULES,
    ProjectValidationState,
    ValidationRule,
    as_number,
    parse_calendar_date,
    validate_project,
)

REQUIRED_KEYS = {
    "title",
    "description",
    "category",
    "start_date",
    "end_date",
    "team_size",
    "payment_model",
    "deliverables",
}


def _valid_draft(**overrides: Any) -> dict[str, Any]:
    draft: dict[str, Any] = {
        "title": "Campus events app",
        "description": "Build a mobile app listing campus events.",
        "category": "mobile_development",
        "required_skills": ["React Native"],
        "start_date": "2024-03-01",
        "end_date": "2024-06-30",
        "team_size": 3,
        "payment_model": "stipend",
        "stipend_amount": 500,
        "deliverables": ["iOS app", "Android app"],
    }
    draft.update(overrides)
    return draft


# ---------------------------------------------------------------------------
# Whole-record properties
# ---------------------------------------------------------------------------


class TestValidationResult:
    def test_field_errors_mirror_error_map(self) -> None:
        from app.models.validation import FieldError

        result = validate_project(_valid_draft(title="", deliverables=[]))
        assert result.field_errors == [
            FieldError(field="title", message="Title is required"),
            FieldError(field="deliverables", message="At least one deliverable is required"),
        ]

    def test_valid_result_has_no_field_errors(self) -> None:
        assert validate_project(_valid_draft()).field_errors == []


class TestValidateProjectRecord:
    """Results for complete, empty and repeated drafts."""

    def test_valid_draft_has_no_errors(self) -> None:
        result = validate_project(_valid_draft())
        assert result.is_valid is True
        assert result.errors == {}

    def test_empty_draft_reports_every_required_field(self) -> None:
        result = validate_project({})
        assert result.is_valid is False
        assert set(result.errors) == REQUIRED_KEYS
        assert result.errors == {
            "title": "Title is required",
            "description": "Description is required",
            "category": "Category is required",
            "start_date": "Start date is required",
            "end_date": "End date is required",
            "team_size": "Team size must be a positive number",
            "payment_model": "Payment model is required",
            "deliverables": "At least one deliverable is required",
        }

    @pytest.mark.parametrize("candidate", [None, [], "not a record", 42])
    def test_non_mapping_input_is_treated_as_empty(self, candidate: Any) -> None:
        result = validate_project(candidate)
        assert set(result.errors) == REQUIRED_KEYS

    def test_validation_is_idempotent(self) -> None:
        draft = _valid_draft(title="  ", team_size=0)
        first = validate_project(draft)
        second = validate_project(draft)
        assert first == second
        assert first.errors is not second.errors

    def test_unknown_fields_are_ignored(self) -> None:
        result = validate_project(_valid_draft(equity_percentage=None, colour="blue"))
        assert result.is_valid is True

    def test_error_keys_are_form_fields(self) -> None:
        from app.core.constants import PROJECT_FORM_FIELDS

        result = validate_project({"unexpected": True, "payment_model": "stipend"})
        assert set(result.errors) <= set(PROJECT_FORM_FIELDS)

    def test_draft_is_not_mutated(self) -> None:
        draft = _valid_draft(end_date="2024-01-01")
        snapshot = dict(draft)
        validate_project(draft)
        assert draft == snapshot

    def test_accepts_pydantic_draft(self) -> None:
        draft = ProjectDraft(**_valid_draft(start_date=date(2024, 3, 1)))
        assert validate_project(draft).is_valid is True

    def test_pydantic_draft_missing_fields(self) -> None:
        result = validate_project(ProjectDraft(title="Only a title"))
        assert set(result.errors) == REQUIRED_KEYS - {"title"}

    @pytest.mark.parametrize(
        ("field", "bad", "good"),
        [
            ("title", "", "Landing page"),
            ("description", None, "Build it"),
            ("category", "", "devops"),
            ("start_date", None, "2024-03-01"),
            ("team_size", 0, 2),
            ("payment_model", None, "unpaid"),
            ("deliverables", [], ["Report"]),
        ],
    )
    def test_repairing_one_field_removes_only_its_error(
        self, field: str, bad: Any, good: Any
    ) -> None:
        broken = _valid_draft(payment_model="unpaid", title="", team_size=-4)
        broken[field] = bad
        before = validate_project(broken)
        assert field in before.errors

        broken[field] = good
        after = validate_project(broken)
        assert field not in after.errors
        assert {k: v for k, v in before.errors.items() if k != field} == after.errors


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------


class TestTextRules:
    @pytest.mark.parametrize("value", [None, "", "   ", "\n\t"])
    def test_blank_title_rejected(self, value: Any) -> None:
        result = validate_project(_valid_draft(title=value))
        assert result.errors == {"title": "Title is required"}

    def test_non_string_description_rejected(self) -> None:
        result = validate_project(_valid_draft(description=123))
        assert result.errors == {"description": "Description is required"}

    def test_category_membership_not_checked(self) -> None:
        assert validate_project(_valid_draft(category="underwater_basket_weaving")).is_valid


class TestDateRules:
    def test_equal_dates_accepted(self) -> None:
        result = validate_project(_valid_draft(start_date="2024-01-01", end_date="2024-01-01"))
        assert "end_date" not in result.errors

    def test_end_before_start_rejected(self) -> None:
        result = validate_project(_valid_draft(start_date="2024-01-02", end_date="2024-01-01"))
        assert result.errors == {"end_date": "End date must be after start date"}

    def test_missing_end_date_uses_required_message(self) -> None:
        result = validate_project(_valid_draft(end_date=None))
        assert result.errors == {"end_date": "End date is required"}

    def test_order_not_checked_when_start_missing(self) -> None:
        result = validate_project(_valid_draft(start_date="", end_date="1999-01-01"))
        assert result.errors == {"start_date": "Start date is required"}

    def test_unparseable_date_counts_as_missing(self) -> None:
        result = validate_project(_valid_draft(start_date="next tuesday"))
        assert result.errors == {"start_date": "Start date is required"}

    def test_date_objects_and_timestamps_are_compared_by_day(self) -> None:
        result = validate_project(
            _valid_draft(
                start_date=datetime(2024, 5, 1, 18, 30),
                end_date="2024-05-01T09:00:00Z",
            )
        )
        assert result.is_valid is True


class TestNumericRules:
    @pytest.mark.parametrize("value", [0, -1, None, "", "three", True, float("nan")])
    def test_team_size_rejected(self, value: Any) -> None:
        result = validate_project(_valid_draft(team_size=value))
        assert result.errors == {"team_size": "Team size must be a positive number"}

    @pytest.mark.parametrize("value", [1, 12, "4"])
    def test_team_size_accepted(self, value: Any) -> None:
        assert "team_size" not in validate_project(_valid_draft(team_size=value)).errors

    def test_stipend_zero_ignored_for_other_models(self) -> None:
        result = validate_project(_valid_draft(payment_model="equity", stipend_amount=0))
        assert "stipend_amount" not in result.errors

    def test_stipend_zero_rejected_for_stipend_model(self) -> None:
        result = validate_project(_valid_draft(payment_model="stipend", stipend_amount=0))
        assert result.errors == {
            "stipend_amount": "Stipend amount must be a positive number"
        }

    def test_stipend_rule_skipped_without_payment_model(self) -> None:
        result = validate_project(_valid_draft(payment_model=None, stipend_amount=None))
        assert result.errors == {"payment_model": "Payment model is required"}

    def test_huge_team_size_accepted(self) -> None:
        assert validate_project(_valid_draft(team_size=10**400)).is_valid

    def test_huge_negative_team_size_rejected(self) -> None:
        result = validate_project(_valid_draft(team_size=-(10**400)))
        assert result.errors == {"team_size": "Team size must be a positive number"}

    def test_huge_stipend_accepted(self) -> None:
        assert validate_project(_valid_draft(stipend_amount=10**400)).is_valid

    @pytest.mark.parametrize("value", [Decimal("250"), Decimal("0.01")])
    def test_decimal_stipend_accepted(self, value: Decimal) -> None:
        assert validate_project(_valid_draft(stipend_amount=value)).is_valid

    @pytest.mark.parametrize("value", [Decimal("0"), Decimal("-5"), Decimal("NaN"), Decimal("sNaN")])
    def test_decimal_stipend_rejected(self, value: Decimal) -> None:
        result = validate_project(_valid_draft(stipend_amount=value))
        assert result.errors == {
            "stipend_amount": "Stipend amount must be a positive number"
        }

    @pytest.mark.parametrize("value", [None, -10, "abc"])
    def test_stipend_invalid_amounts(self, value: Any) -> None:
        result = validate_project(_valid_draft(stipend_amount=value))
        assert "stipend_amount" in result.errors


class TestDeliverablesRule:
    def test_empty_list_rejected(self) -> None:
        result = validate_project(_valid_draft(deliverables=[]))
        assert result.errors == {"deliverables": "At least one deliverable is required"}

    def test_single_deliverable_accepted(self) -> None:
        assert validate_project(_valid_draft(deliverables=["prototype"])).is_valid

    def test_bare_string_rejected(self) -> None:
        result = validate_project(_valid_draft(deliverables="prototype"))
        assert "deliverables" in result.errors

    def test_required_skills_exempt(self) -> None:
        assert validate_project(_valid_draft(required_skills=[])).is_valid
        assert validate_project(_valid_draft(required_skills=None)).is_valid


class TestCustomRules:
    def test_extra_conditional_rule(self) -> None:
        equity_rule = ValidationRule(
            "equity_percentage",
            "Equity percentage is required",
            lambda r: r.get("payment_model") == "equity" and not r.get("equity_percentage"),
        )
        rules = (*PROJECT_RULES, equity_rule)
        result = validate_project(_valid_draft(payment_model="equity"), rules)
        assert result.errors == {"equity_percentage": "Equity percentage is required"}

    def test_raising_predicate_counts_as_violation(self) -> None:
        def explode(record: Any) -> bool:
            raise TypeError("boom")

        result = validate_project(_valid_draft(), (ValidationRule("title", "bad", explode),))
        assert result.errors == {"title": "bad"}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestHelpers:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("2024-02-29", date(2024, 2, 29)),
            (" 2024-02-29 ", date(2024, 2, 29)),
            ("2024-02-29T23:59:59+00:00", date(2024, 2, 29)),
            (date(2024, 1, 1), date(2024, 1, 1)),
            ("2024-02-30", None),
            ("", None),
            (20240101, None),
        ],
    )
    def test_parse_calendar_date(self, raw: Any, expected: date | None) -> None:
        assert parse_calendar_date(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (3, 3.0),
            (2.5, 2.5),
            ("7", 7.0),
            (Decimal("12.5"), 12.5),
            (10**400, math.inf),
            (-(10**400), -math.inf),
            (False, None),
            ("x", None),
            (None, None),
        ],
    )
    def test_as_number(self, raw: Any, expected: float | None) -> None:
        assert as_number(raw) == expected


# ---------------------------------------------------------------------------
# ProjectValidationState
# ---------------------------------------------------------------------------


class TestProjectValidationState:
    def test_starts_empty(self) -> None:
        assert ProjectValidationState().errors == {}

    def test_caches_last_errors(self) -> None:
        state = ProjectValidationState()
        result = state.validate({})
        assert state.errors == result.errors

        state.validate(_valid_draft())
        assert state.errors == {}

    def test_clear_resets_cache(self) -> None:
        state = ProjectValidationState()
        state.validate({"title": "x"})
        assert state.clear() is None
        assert state.errors == {}

    def test_errors_property_is_a_copy(self) -> None:
        state = ProjectValidationState()
        state.validate({})
        state.errors.clear()
        assert set(state.errors) == REQUIRED_KEYS

    def test_returned_result_unaffected_by_clear(self) -> None:
        state = ProjectValidationState()
        result = state.validate({})
        state.clear()
        assert set(result.errors) == REQUIRED_KEYS
