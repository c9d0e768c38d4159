from typing import Optional

from fastapi import status
from fastapi.responses import JSONResponse

from config.log_config import get_logger
from models.resume_model import new_resume, merge_resume
from services.resume_repository import ResumeRepository
from utils.image_data_url import image_to_data_url
from validation.request_types import (
    CreateResumeRequest,
    InvalidRequest,
    ResumeUpdateRequest,
    normalize_update,
)

logger = get_logger("resume_api")


def resume_not_found():
    return JSONResponse(
        content={"message": "Resume not found"},
        status_code=status.HTTP_404_NOT_FOUND
    )


async def create_resume(body: Optional[CreateResumeRequest], repo: ResumeRepository):
    title = body.title if body else None
    resume = new_resume(str(title) if title else "Untitled Resume")
    repo.upsert(resume)

    logger.info(f"Created resume {resume['_id']}")
    return {"resume": resume, "message": "Resume created"}


async def get_resume_by_id(resume_id: str, repo: ResumeRepository):
    resume = repo.find(resume_id)
    if not resume:
        return resume_not_found()
    return {"resume": resume}


async def get_public_resume(resume_id: str, repo: ResumeRepository):
    resume = repo.find(resume_id)
    # private resumes are indistinguishable from missing ones
    if not resume or not resume.get("public"):
        return resume_not_found()
    return {"resume": resume}


async def update_resume(update_request: ResumeUpdateRequest, repo: ResumeRepository):
    try:
        update = normalize_update(update_request)
    except InvalidRequest as e:
        return JSONResponse(content={"message": e.message}, status_code=e.status_code)

    existing = repo.find(update.resume_id)
    if not existing:
        return resume_not_found()

    updated = merge_resume(existing, update.resume_data)

    if update.image is not None:
        try:
            data_url = await image_to_data_url(update.image)
            updated["personal_info"] = {**updated["personal_info"], "image": data_url}
        except Exception as e:
            logger.warning(f"Image conversion failed for resume {update.resume_id}, keeping previous image: {e}")

    repo.upsert(updated)

    logger.debug(f"Updated resume {update.resume_id}\nfields: {', '.join(sorted(update.resume_data)) or '-'}")
    return {"resume": updated, "message": "Resume updated"}


async def delete_resume_by_id(resume_id: str, repo: ResumeRepository):
    repo.remove(resume_id)
    return {"message": "Resume deleted"}
