import json
from dataclasses import dataclass
from typing import Any, Literal, Optional, Union

from fastapi import Request
from pydantic import BaseModel, ConfigDict
from starlette.datastructures import UploadFile

from config.env_config import FORM_MAX_PART_SIZE

# Bodies are loose on purpose, only presence of required fields is checked


class LooseBody(BaseModel):
    model_config = ConfigDict(extra="allow")


class UserCredentials(LooseBody):
    name: Optional[Any] = None
    email: Optional[Any] = None
    password: Optional[Any] = None


class CreateResumeRequest(LooseBody):
    title: Optional[Any] = None


class EnhanceRequest(LooseBody):
    userContent: Optional[Any] = None


class UploadResumeRequest(LooseBody):
    title: Optional[Any] = None
    resumeText: Optional[Any] = None


# ------------------- Resume update variants ------------------------

class JsonResumeUpdate(LooseBody):
    kind: Literal["json"] = "json"
    resumeId: Optional[Any] = None
    resumeData: Optional[Any] = None


@dataclass
class FormResumeUpdate:
    resume_id: Optional[str]
    resume_data: Optional[str]  # JSON-encoded
    image: Optional[UploadFile] = None
    kind: Literal["form"] = "form"


ResumeUpdateRequest = Union[JsonResumeUpdate, FormResumeUpdate]


@dataclass
class ResumeUpdate:
    resume_id: str
    resume_data: dict
    image: Optional[UploadFile] = None


class InvalidRequest(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


async def read_update_request(request: Request) -> ResumeUpdateRequest:
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form(max_part_size=FORM_MAX_PART_SIZE)
        image = form.get("image")
        resume_id = form.get("resumeId")
        resume_data = form.get("resumeData")
        # removeBackground is accepted for client compatibility and ignored
        return FormResumeUpdate(
            resume_id=resume_id if isinstance(resume_id, str) else None,
            resume_data=resume_data if isinstance(resume_data, str) else None,
            image=image if isinstance(image, UploadFile) else None,
        )

    raw = await request.body()
    if not raw:
        return JsonResumeUpdate()
    try:
        body = json.loads(raw)
    except ValueError:
        raise InvalidRequest("Invalid input")
    if not isinstance(body, dict):
        raise InvalidRequest("Invalid input")
    return JsonResumeUpdate(**{k: v for k, v in body.items() if k != "kind"})


def normalize_update(update: ResumeUpdateRequest) -> ResumeUpdate:
    """Collapse either request variant into one ResumeUpdate."""
    if isinstance(update, FormResumeUpdate):
        resume_id = update.resume_id
        resume_data = {}
        if update.resume_data:
            try:
                resume_data = json.loads(update.resume_data)
            except ValueError:
                raise InvalidRequest("resumeData must be valid JSON")
        image = update.image
    else:
        resume_id = update.resumeId
        resume_data = update.resumeData or {}
        image = None

    if not resume_id:
        raise InvalidRequest("resumeId is required")
    if not isinstance(resume_data, dict):
        raise InvalidRequest("resumeData must be an object")

    return ResumeUpdate(resume_id=str(resume_id), resume_data=resume_data, image=image)
