"""Project persistence service.

Reads and writes the ``projects`` table through Supabase.  Every write that
carries form data goes through ``validate_project`` first, and nothing is
sent to the database unless the draft is valid.  Errors raised by the
Supabase client are not caught here; routers map them to HTTP 500.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ValidationError

from app.core.config import settings
from app.core.constants import CATEGORY_LABELS, PAYMENT_MODEL_LABELS, PROJECT_TEMPLATES
from app.db.supabase import get_supabase
from app.models.enums import PaymentModel, ProjectCategory, ProjectStatus
from app.models.project import Project, ProjectCreate, ProjectUpdate
from app.models.template import ProjectOptionsResponse, ProjectTemplate, VocabularyOption
from app.models.validation import ValidationResult
from app.services.validation import parse_calendar_date, validate_project

logger = logging.getLogger(__name__)


class ProjectValidationError(Exception):
    """Raised when a project draft fails validation; carries the result."""

    def __init__(self, result: ValidationResult) -> None:
        super().__init__("Project draft failed validation")
        self.result = result

    @property
    def errors(self) -> dict[str, str]:
        return dict(self.result.errors)


class ProjectNotFoundError(LookupError):
    """Raised when no project matches the given id."""

    def __init__(self, project_id: UUID | str) -> None:
        super().__init__(f"Project {project_id} not found")
        self.project_id = str(project_id)


# ---------------------------------------------------------------------------
# Draft -> write payload
# ---------------------------------------------------------------------------


def _draft_fields(candidate: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    """Normalize a validated draft into the columns the table stores.

    ``required_skills``/``deliverables`` default to empty lists, dates are
    reduced to calendar dates and ``stipend_amount`` is only kept for the
    stipend payment model.
    """
    data = candidate.model_dump() if isinstance(candidate, BaseModel) else dict(candidate)
    payment_model = data.get("payment_model")
    return {
        "title": data["title"].strip(),
        "description": data["description"].strip(),
        "category": data.get("category"),
        "required_skills": data.get("required_skills") or [],
        "start_date": parse_calendar_date(data.get("start_date")),
        "end_date": parse_calendar_date(data.get("end_date")),
        "team_size": data.get("team_size"),
        "payment_model": payment_model,
        "stipend_amount": (
            data.get("stipend_amount")
            if payment_model == PaymentModel.stipend.value
            else None
        ),
        "deliverables": data.get("deliverables") or [],
    }


def _validated_payload(
    candidate: Mapping[str, Any] | BaseModel,
    model: type[ProjectUpdate],
    **extra: Any,
) -> ProjectUpdate:
    """Validate *candidate* and build the typed write payload from it."""
    result = validate_project(candidate)
    if not result.is_valid:
        logger.info(
            "project_draft_rejected",
            extra={"error_fields": sorted(result.errors)},
        )
        raise ProjectValidationError(result)

    try:
        return model(**_draft_fields(candidate), **extra)
    except ValidationError as exc:
        # Values that pass the form rules but not the column types (e.g. 2.5 people)
        errors = {
            str(err["loc"][0]): err["msg"] for err in exc.errors() if err.get("loc")
        }
        logger.info(
            "project_payload_rejected",
            extra={"error_fields": sorted(errors)},
        )
        raise ProjectValidationError(ValidationResult.from_errors(errors)) from exc


def _first_row(data: Any) -> dict[str, Any] | None:
    if isinstance(data, list):
        return data[0] if data else None
    return data or None


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------


def create_project(
    candidate: Mapping[str, Any] | BaseModel,
    created_by: UUID,
) -> Project:
    """Validate a draft and insert it as a new ``open`` project.

    Raises ``ProjectValidationError`` without touching the database when
    the draft is invalid.
    """
    payload = _validated_payload(candidate, ProjectCreate, created_by=created_by)

    client = get_supabase()
    result = (
        client.table(settings.PROJECTS_TABLE)
        .insert(payload.model_dump(mode="json"))
        .execute()
    )
    row = _first_row(result.data)
    if row is None:
        raise RuntimeError("Project insert returned no row")

    project = Project.model_validate(row)
    logger.info(
        "project_created",
        extra={"project_id": str(project.id), "created_by": str(created_by)},
    )
    return project


def list_projects(
    status: ProjectStatus | None = None,
    category: str | None = None,
    created_by: UUID | None = None,
    limit: int | None = None,
) -> list[Project]:
    """Return projects newest first, optionally filtered."""
    client = get_supabase()
    query = client.table(settings.PROJECTS_TABLE).select("*")

    if status is not None:
        query = query.eq("status", status.value)
    if category:
        query = query.eq("category", category)
    if created_by is not None:
        query = query.eq("created_by", str(created_by))

    result = (
        query.order("created_at", desc=True)
        .limit(limit or settings.PROJECT_LIST_LIMIT)
        .execute()
    )
    return [Project.model_validate(row) for row in (result.data or [])]


def get_project(project_id: UUID) -> Project | None:
    """Fetch a single project, or None when it does not exist."""
    client = get_supabase()
    result = (
        client.table(settings.PROJECTS_TABLE)
        .select("*")
        .eq("id", str(project_id))
        .limit(1)
        .execute()
    )
    row = _first_row(result.data)
    return Project.model_validate(row) if row else None


def update_project(
    project_id: UUID,
    candidate: Mapping[str, Any] | BaseModel,
) -> Project:
    """Validate an edited draft and overwrite the project's form fields."""
    payload = _validated_payload(candidate, ProjectUpdate)

    client = get_supabase()
    result = (
        client.table(settings.PROJECTS_TABLE)
        .update(payload.model_dump(mode="json"))
        .eq("id", str(project_id))
        .execute()
    )
    row = _first_row(result.data)
    if row is None:
        raise ProjectNotFoundError(project_id)

    logger.info("project_updated", extra={"project_id": str(project_id)})
    return Project.model_validate(row)


def update_project_status(project_id: UUID, status: ProjectStatus) -> Project:
    """Change only the lifecycle status of a project."""
    client = get_supabase()
    result = (
        client.table(settings.PROJECTS_TABLE)
        .update({"status": status.value})
        .eq("id", str(project_id))
        .execute()
    )
    row = _first_row(result.data)
    if row is None:
        raise ProjectNotFoundError(project_id)

    logger.info(
        "project_status_updated",
        extra={"project_id": str(project_id), "status": status.value},
    )
    return Project.model_validate(row)


def delete_project(project_id: UUID) -> None:
    """Delete a project; raises ``ProjectNotFoundError`` if nothing matched."""
    client = get_supabase()
    result = (
        client.table(settings.PROJECTS_TABLE)
        .delete()
        .eq("id", str(project_id))
        .execute()
    )
    if not result.data:
        raise ProjectNotFoundError(project_id)

    logger.info("project_deleted", extra={"project_id": str(project_id)})


# ---------------------------------------------------------------------------
# Vocabularies and templates
# ---------------------------------------------------------------------------


def get_project_options() -> ProjectOptionsResponse:
    """Return the category and payment-model choices for the project form."""
    return ProjectOptionsResponse(
        categories=[
            VocabularyOption(value=c.value, label=CATEGORY_LABELS[c.value])
            for c in ProjectCategory
        ],
        payment_models=[
            VocabularyOption(value=p.value, label=PAYMENT_MODEL_LABELS[p.value])
            for p in PaymentModel
        ],
    )


def list_project_templates() -> list[ProjectTemplate]:
    return [ProjectTemplate(**template) for template in PROJECT_TEMPLATES]
