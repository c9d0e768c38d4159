from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List

from config.env_config import DEFAULT_TEMPLATE, DEFAULT_ACCENT_COLOR
from utils.ids import make_id, now_iso, next_timestamp


# ------------------- Main Resume Document ------------------------
# Field names follow the web client's stored documents. Sections are owned by
# the UI and stored as opaque entries.

class ResumeDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(default_factory=lambda: make_id("resume"), alias="_id")
    title: str = "Untitled Resume"
    personal_info: Dict[str, Any] = Field(default_factory=dict)
    professional_summary: str = ""
    experience: List[Any] = Field(default_factory=list)
    education: List[Any] = Field(default_factory=list)
    project: List[Any] = Field(default_factory=list)
    skills: List[Any] = Field(default_factory=list)
    template: str = DEFAULT_TEMPLATE
    accent_color: str = DEFAULT_ACCENT_COLOR
    is_public: bool = Field(default=False, alias="public")
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")


def new_resume(title: str, professional_summary: str = "") -> dict:
    """Build a fresh resume document with both timestamps set to the same instant."""
    timestamp = now_iso()
    resume = ResumeDocument(
        title=title,
        professional_summary=professional_summary,
        created_at=timestamp,
        updated_at=timestamp,
    )
    return resume.model_dump(by_alias=True)


IMMUTABLE_FIELDS = ("_id", "createdAt")


def _as_dict(value) -> dict:
    return value if isinstance(value, dict) else {}


def merge_resume(existing: dict, resume_data: dict) -> dict:
    """Shallow merge `resume_data` into `existing`.

    personal_info is merged one level deep, identity and creation time are
    kept, and updatedAt always moves forward.
    """
    merged = {**existing, **resume_data}

    merged["personal_info"] = {
        **_as_dict(existing.get("personal_info")),
        **_as_dict(resume_data.get("personal_info")),
    }

    for field in IMMUTABLE_FIELDS:
        if field in existing:
            merged[field] = existing[field]

    merged["updatedAt"] = next_timestamp(existing.get("updatedAt"))
    return merged
