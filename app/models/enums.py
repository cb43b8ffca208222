"""Enum types mirroring the PostgreSQL custom enums of the ``projects`` table."""

from enum import Enum


class ProjectCategory(str, Enum):
    """Field of work a project belongs to."""
    web_development = "web_development"
    mobile_development = "mobile_development"
    data_science = "data_science"
    machine_learning = "machine_learning"
    ui_ux_design = "ui_ux_design"
    devops = "devops"
    cybersecurity = "cybersecurity"
    blockchain = "blockchain"
    market_research = "market_research"
    other = "other"


class PaymentModel(str, Enum):
    """How contributors are compensated."""
    unpaid = "unpaid"
    stipend = "stipend"
    hourly = "hourly"
    fixed = "fixed"
    equity = "equity"


class ProjectStatus(str, Enum):
    """Lifecycle status of a project."""
    draft = "draft"
    open = "open"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"
