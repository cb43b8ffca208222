"""Pydantic models for the ``projects`` table.

``ProjectDraft`` is the in-progress form a client submits; every field is
optional because the validation engine, not pydantic, decides what is
missing.  ``ProjectCreate``/``ProjectUpdate`` are the write payloads built
only after a draft validates.  ``id``, ``created_at`` and ``updated_at`` are
managed by the database and therefore only appear on ``Project``.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import ProjectStatus


class ProjectDraft(BaseModel):
    """Candidate project record assembled from form state."""
    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None
    category: str | None = None
    required_skills: list[str] | None = None
    start_date: date | str | None = None
    end_date: date | str | None = None
    team_size: int | float | str | None = None
    payment_model: str | None = None
    stipend_amount: float | str | None = None
    deliverables: list[str] | None = None


class ProjectUpdate(BaseModel):
    """Payload for a full-form project edit (update)."""
    title: str
    description: str
    category: str
    required_skills: list[str] = []
    start_date: date
    end_date: date
    team_size: int = Field(gt=0)
    payment_model: str
    stipend_amount: float | None = None
    deliverables: list[str]


class ProjectCreate(ProjectUpdate):
    """Payload for creating a project (insert)."""
    created_by: UUID
    status: ProjectStatus = ProjectStatus.open


class ProjectStatusUpdate(BaseModel):
    """Request body for changing only the status of a project."""
    status: ProjectStatus


class Project(BaseModel):
    """Full project record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    category: str
    required_skills: list[str] = []
    start_date: date
    end_date: date
    team_size: int
    payment_model: str
    stipend_amount: float | None = None
    deliverables: list[str] = []
    status: ProjectStatus = ProjectStatus.open
    created_by: UUID
    selected_team_id: UUID | None = None
    progress: int = Field(default=0, ge=0, le=100)
    created_at: datetime
    updated_at: datetime | None = None
