from typing import Optional

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from config.db import get_resume_repository
from controllers.resume_controller import (
    create_resume,
    delete_resume_by_id,
    get_public_resume,
    get_resume_by_id,
    update_resume,
)
from services.resume_repository import ResumeRepository
from validation.request_types import CreateResumeRequest, InvalidRequest, read_update_request


router = APIRouter(prefix="/api/resumes", tags=["resumes"])

# `:path` captures keep the "rest of the path" semantics, so ids may contain "/"


@router.post("/create")
async def create(
    body: Optional[CreateResumeRequest] = Body(None),
    repo: ResumeRepository = Depends(get_resume_repository),
):
    return await create_resume(body, repo)


@router.get("/get/{resume_id:path}")
async def get_resume(resume_id: str, repo: ResumeRepository = Depends(get_resume_repository)):
    return await get_resume_by_id(resume_id, repo)


@router.get("/public/{resume_id:path}")
async def get_public(resume_id: str, repo: ResumeRepository = Depends(get_resume_repository)):
    return await get_public_resume(resume_id, repo)


# Accepts a JSON body or a form with resumeId, JSON-encoded resumeData and an optional image
@router.put("/update")
async def update(request: Request, repo: ResumeRepository = Depends(get_resume_repository)):
    try:
        update_request = await read_update_request(request)
    except InvalidRequest as e:
        return JSONResponse(content={"message": e.message}, status_code=e.status_code)
    return await update_resume(update_request, repo)


@router.delete("/delete/{resume_id:path}")
async def delete_resume(resume_id: str, repo: ResumeRepository = Depends(get_resume_repository)):
    return await delete_resume_by_id(resume_id, repo)
