"""Pydantic models for project validation results."""

from pydantic import BaseModel, ConfigDict


class FieldError(BaseModel):
    """A single failed rule: the form field and the message to show beside it."""
    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class ValidationResult(BaseModel):
    """Outcome of validating one project draft.

    ``errors`` maps field name to message and only contains failed fields;
    ``is_valid`` is true exactly when it is empty.
    """
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: dict[str, str] = {}

    @classmethod
    def from_errors(cls, errors: dict[str, str]) -> "ValidationResult":
        """Build a result from an accumulated error map (copied)."""
        return cls(is_valid=not errors, errors=dict(errors))

    @property
    def field_errors(self) -> list[FieldError]:
        return [FieldError(field=f, message=m) for f, m in self.errors.items()]
