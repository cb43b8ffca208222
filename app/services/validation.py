"""Project submission validation engine.

Decides whether a project draft is well-formed before it is persisted.
Every rule in ``PROJECT_RULES`` is evaluated on every call so the caller can
show all problems from one submission at once.  A rule is a predicate over
the whole record paired with the field its message is attached to, which
lets a rule depend on a sibling field (the stipend rule reads
``payment_model``).

The engine is pure and total: it keeps no state, does no I/O and never
raises, whatever the shape of its input.  Missing fields are an expected
condition reported as field errors.

``ProjectValidationState`` is a thin wrapper for callers that want to keep
the last error map around for display, with an explicit ``clear()``.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from numbers import Real
from typing import Any

from pydantic import BaseModel

from app.core.constants import (
    MSG_CATEGORY_REQUIRED,
    MSG_DELIVERABLES_REQUIRED,
    MSG_DESCRIPTION_REQUIRED,
    MSG_END_BEFORE_START,
    MSG_END_DATE_REQUIRED,
    MSG_PAYMENT_MODEL_REQUIRED,
    MSG_START_DATE_REQUIRED,
    MSG_STIPEND_POSITIVE,
    MSG_TEAM_SIZE_POSITIVE,
    MSG_TITLE_REQUIRED,
)
from app.models.enums import PaymentModel
from app.models.validation import ValidationResult

Record = Mapping[str, Any]


# ---------------------------------------------------------------------------
# Value coercion helpers
# ---------------------------------------------------------------------------


def parse_calendar_date(value: Any) -> date | None:
    """Parse a form date into a calendar ``date``.

    Accepts ``date``/``datetime`` objects and ISO 8601 strings, either a bare
    date (``2024-01-31``) or a timestamp (``2024-01-31T10:00:00Z``), in which
    case only its date part is kept.  Returns None for anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    raw = value.strip()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def as_number(value: Any) -> float | None:
    """Return *value* as a float, or None if it is not numeric or is NaN.

    Numeric strings (``"3"``, ``" 250.5 "``) and ``Decimal`` count as numbers,
    booleans do not.  Integers too large for a float become +/-inf.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (Real, Decimal)):
        try:
            number = float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
        except ValueError:
            # signalling NaN
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return None if math.isnan(number) else number


def _is_blank_text(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def _is_not_positive(value: Any) -> bool:
    number = as_number(value)
    return number is None or number <= 0


def _is_empty_list(value: Any) -> bool:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return True
    return len(value) == 0


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidationRule:
    """A predicate over the whole record that, when true, flags ``field``."""
    field: str
    message: str
    violated: Callable[[Record], bool]


def _end_before_start(record: Record) -> bool:
    start = parse_calendar_date(record.get("start_date"))
    end = parse_calendar_date(record.get("end_date"))
    if start is None or end is None:
        return False
    return end < start


def _stipend_missing(record: Record) -> bool:
    if record.get("payment_model") != PaymentModel.stipend.value:
        return False
    return _is_not_positive(record.get("stipend_amount"))


# Order matters only for rules sharing a field: the later message wins.
PROJECT_RULES: tuple[ValidationRule, ...] = (
    ValidationRule("title", MSG_TITLE_REQUIRED,
                   lambda r: _is_blank_text(r.get("title"))),
    ValidationRule("description", MSG_DESCRIPTION_REQUIRED,
                   lambda r: _is_blank_text(r.get("description"))),
    ValidationRule("category", MSG_CATEGORY_REQUIRED,
                   lambda r: not r.get("category")),
    ValidationRule("start_date", MSG_START_DATE_REQUIRED,
                   lambda r: parse_calendar_date(r.get("start_date")) is None),
    ValidationRule("end_date", MSG_END_DATE_REQUIRED,
                   lambda r: parse_calendar_date(r.get("end_date")) is None),
    ValidationRule("end_date", MSG_END_BEFORE_START, _end_before_start),
    ValidationRule("team_size", MSG_TEAM_SIZE_POSITIVE,
                   lambda r: _is_not_positive(r.get("team_size"))),
    ValidationRule("payment_model", MSG_PAYMENT_MODEL_REQUIRED,
                   lambda r: not r.get("payment_model")),
    ValidationRule("stipend_amount", MSG_STIPEND_POSITIVE, _stipend_missing),
    ValidationRule("deliverables", MSG_DELIVERABLES_REQUIRED,
                   lambda r: _is_empty_list(r.get("deliverables"))),
)


def _as_record(candidate: Any) -> Record:
    if isinstance(candidate, BaseModel):
        return candidate.model_dump()
    if isinstance(candidate, Mapping):
        return candidate
    return {}


def validate_project(
    candidate: Mapping[str, Any] | BaseModel | None,
    rules: Sequence[ValidationRule] = PROJECT_RULES,
) -> ValidationResult:
    """Validate a project draft against every rule in *rules*.

    *candidate* may be a mapping, a pydantic model (e.g. ``ProjectDraft``)
    or None; anything that is not a mapping is treated as an empty draft.
    Unknown keys are ignored.  Returns a fresh ``ValidationResult`` whose
    ``errors`` hold one message per failed field.
    """
    record = _as_record(candidate)
    errors: dict[str, str] = {}

    for rule in rules:
        try:
            violated = rule.violated(record)
        except (TypeError, ValueError, AttributeError, ArithmeticError):
            # Exotic values the helpers do not anticipate count as invalid
            violated = True
        if violated:
            errors[rule.field] = rule.message

    return ValidationResult.from_errors(errors)


class ProjectValidationState:
    """Keeps the error map of the most recent validation for display.

    The wrapped engine stays stateless; this object owns the cache and is
    meant for a single caller context (it is not synchronised).
    """

    def __init__(self, rules: Sequence[ValidationRule] = PROJECT_RULES) -> None:
        self._rules = rules
        self._errors: dict[str, str] = {}

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    def validate(self, candidate: Mapping[str, Any] | BaseModel | None) -> ValidationResult:
        result = validate_project(candidate, self._rules)
        self._errors = dict(result.errors)
        return result

    def clear(self) -> None:
        self._errors = {}
