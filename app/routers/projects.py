"""Project endpoints.

POST /validate runs the validation engine on an arbitrary form payload and
always answers 200; the write endpoints run the same rules and answer 422
with the per-field error map when a draft is rejected.

The creator of a project is taken from the ``X-User-Id`` header, which the
authenticating gateway in front of this service is expected to set.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Header, HTTPException, Query, Response
from starlette.responses import JSONResponse

from app.models.enums import ProjectStatus
from app.models.project import Project, ProjectStatusUpdate
from app.models.template import ProjectOptionsResponse, ProjectTemplate
from app.models.validation import ValidationResult
from app.services.projects import (
    ProjectNotFoundError,
    ProjectValidationError,
    create_project,
    delete_project,
    get_project,
    get_project_options,
    list_project_templates,
    list_projects,
    update_project,
    update_project_status,
)
from app.services.validation import validate_project

logger = logging.getLogger(__name__)

router = APIRouter()


def _validation_failed(exc: ProjectValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "message": "Please fix the highlighted errors",
            "errors": exc.errors,
            "field_errors": [e.model_dump() for e in exc.result.field_errors],
        },
    )


def _backend_failure(event: str, exc: Exception, **context: Any) -> HTTPException:
    logger.error(event, extra={**context, "error_message": str(exc)})
    return HTTPException(status_code=500, detail=f"Project storage failed: {exc}")


# ---------------------------------------------------------------------------
# Validation, vocabularies and templates
# ---------------------------------------------------------------------------


@router.post("/validate", response_model=ValidationResult)
async def validate_project_draft(
    draft: dict[str, Any] = Body(...),
) -> ValidationResult:
    """Check a project form without saving it; reports every failed field."""
    return validate_project(draft)


@router.get("/options", response_model=ProjectOptionsResponse)
async def project_options() -> ProjectOptionsResponse:
    """Return the category and payment-model choices for the form."""
    return get_project_options()


@router.get("/templates", response_model=list[ProjectTemplate])
async def project_templates() -> list[ProjectTemplate]:
    return list_project_templates()


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------


@router.post("", status_code=201, response_model=Project)
async def create_project_endpoint(
    draft: dict[str, Any] = Body(...),
    x_user_id: UUID = Header(..., description="UUID of the authenticated creator"),
) -> Any:
    """Validate and store a new project owned by the calling user."""
    try:
        return create_project(draft, created_by=x_user_id)
    except ProjectValidationError as exc:
        return _validation_failed(exc)
    except Exception as exc:
        raise _backend_failure(
            "create_project_failed", exc, created_by=str(x_user_id)
        ) from exc


@router.get("", response_model=list[Project])
async def list_projects_endpoint(
    status: ProjectStatus | None = Query(default=None, description="Filter by status"),
    category: str | None = Query(default=None, description="Filter by category tag"),
    created_by: UUID | None = Query(default=None, description="Filter by creator UUID"),
    limit: int | None = Query(default=None, ge=1, le=1000),
) -> list[Project]:
    try:
        return list_projects(
            status=status, category=category, created_by=created_by, limit=limit
        )
    except Exception as exc:
        raise _backend_failure("list_projects_failed", exc) from exc


@router.get("/{project_id}", response_model=Project)
async def get_project_endpoint(project_id: UUID) -> Project:
    try:
        project = get_project(project_id)
    except Exception as exc:
        raise _backend_failure(
            "get_project_failed", exc, project_id=str(project_id)
        ) from exc

    if project is None:
        raise HTTPException(status_code=404, detail=f"Project {project_id} not found")
    return project


@router.put("/{project_id}", response_model=Project)
async def update_project_endpoint(
    project_id: UUID,
    draft: dict[str, Any] = Body(...),
) -> Any:
    """Replace the form fields of a project after validating them."""
    try:
        return update_project(project_id, draft)
    except ProjectValidationError as exc:
        return _validation_failed(exc)
    except ProjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        raise _backend_failure(
            "update_project_failed", exc, project_id=str(project_id)
        ) from exc


@router.patch("/{project_id}/status", response_model=Project)
async def update_project_status_endpoint(
    project_id: UUID,
    body: ProjectStatusUpdate,
) -> Project:
    try:
        return update_project_status(project_id, body.status)
    except ProjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        raise _backend_failure(
            "update_project_status_failed", exc, project_id=str(project_id)
        ) from exc


@router.delete("/{project_id}", status_code=204)
async def delete_project_endpoint(project_id: UUID) -> Response:
    try:
        delete_project(project_id)
    except ProjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        raise _backend_failure(
            "delete_project_failed", exc, project_id=str(project_id)
        ) from exc
    return Response(status_code=204)
