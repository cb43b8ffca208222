"""Application constants.

Contains the project validation messages, display labels for the project
vocabularies, and the catalogue of starter project templates.
"""

from typing import Any

# ---------------------------------------------------------------------------
# Validation messages
# One fixed message per failing field; surfaced next to the form control.
# ---------------------------------------------------------------------------
MSG_TITLE_REQUIRED: str = "Title is required"
MSG_DESCRIPTION_REQUIRED: str = "Description is required"
MSG_CATEGORY_REQUIRED: str = "Category is required"
MSG_START_DATE_REQUIRED: str = "Start date is required"
MSG_END_DATE_REQUIRED: str = "End date is required"
MSG_END_BEFORE_START: str = "End date must be after start date"
MSG_TEAM_SIZE_POSITIVE: str = "Team size must be a positive number"
MSG_PAYMENT_MODEL_REQUIRED: str = "Payment model is required"
MSG_STIPEND_POSITIVE: str = "Stipend amount must be a positive number"
MSG_DELIVERABLES_REQUIRED: str = "At least one deliverable is required"

# Fields a project form may carry; error keys are always drawn from here.
PROJECT_FORM_FIELDS: tuple[str, ...] = (
    "title",
    "description",
    "category",
    "required_skills",
    "start_date",
    "end_date",
    "team_size",
    "payment_model",
    "stipend_amount",
    "deliverables",
)

# ---------------------------------------------------------------------------
# Vocabulary labels (display in the project form selects)
# ---------------------------------------------------------------------------
CATEGORY_LABELS: dict[str, str] = {
    "web_development": "Web Development",
    "mobile_development": "Mobile Development",
    "data_science": "Data Science",
    "machine_learning": "Machine Learning",
    "ui_ux_design": "UI/UX Design",
    "devops": "DevOps",
    "cybersecurity": "Cybersecurity",
    "blockchain": "Blockchain",
    "market_research": "Market Research",
    "other": "Other",
}

PAYMENT_MODEL_LABELS: dict[str, str] = {
    "unpaid": "Unpaid",
    "stipend": "Stipend",
    "hourly": "Hourly Rate",
    "fixed": "Fixed Amount",
    "equity": "Equity",
}

# ---------------------------------------------------------------------------
# Project templates
# Prefill data for the "start from a template" flow of the create form.
# ---------------------------------------------------------------------------
PROJECT_TEMPLATES: list[dict[str, Any]] = [
    {
        "title": "Website Development",
        "description": (
            "Create a responsive website with modern UI/UX design, "
            "optimized for all devices."
        ),
        "category": "web_development",
        "required_skills": ["HTML", "CSS", "JavaScript", "React"],
        "payment_model": "fixed",
        "deliverables": ["Responsive website", "Source code", "Documentation"],
    },
    {
        "title": "Mobile App Development",
        "description": (
            "Build a cross-platform mobile application with a "
            "user-friendly interface."
        ),
        "category": "mobile_development",
        "required_skills": ["React Native", "JavaScript", "UI/UX Design"],
        "payment_model": "hourly",
        "deliverables": ["iOS app", "Android app", "Source code", "User documentation"],
    },
    {
        "title": "Data Analysis Project",
        "description": (
            "Analyze data sets to identify trends and provide actionable insights."
        ),
        "category": "data_science",
        "required_skills": ["Python", "SQL", "Data Visualization", "Statistics"],
        "payment_model": "stipend",
        "deliverables": [
            "Data analysis report", "Visualizations", "Presentation", "Recommendations",
        ],
    },
    {
        "title": "UI/UX Design Project",
        "description": (
            "Design a modern and user-friendly interface for a digital product."
        ),
        "category": "ui_ux_design",
        "required_skills": ["Figma", "UI Design", "UX Research", "Prototyping"],
        "payment_model": "fixed",
        "deliverables": [
            "Design mockups", "Prototypes", "Design system", "User flow documentation",
        ],
    },
]
