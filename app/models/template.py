"""Pydantic models for the form vocabularies and project templates."""

from pydantic import BaseModel


class VocabularyOption(BaseModel):
    """A selectable value with its display label."""
    value: str
    label: str


class ProjectOptionsResponse(BaseModel):
    """Response for GET /api/v1/projects/options."""
    categories: list[VocabularyOption] = []
    payment_models: list[VocabularyOption] = []


class ProjectTemplate(BaseModel):
    """Prefill data for starting a new project from a template."""
    title: str
    description: str
    category: str
    required_skills: list[str] = []
    payment_model: str
    deliverables: list[str] = []
