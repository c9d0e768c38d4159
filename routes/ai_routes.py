from typing import Optional

from fastapi import APIRouter, Body, Depends

from config.db import get_resume_repository
from controllers.ai_controller import enhance_content, upload_resume
from services.resume_repository import ResumeRepository
from validation.request_types import EnhanceRequest, UploadResumeRequest


router = APIRouter(prefix="/api/ai", tags=["ai"])



@router.post("/enhance-pro-sum")
async def enhance_professional_summary(body: Optional[EnhanceRequest] = Body(None)):
    return await enhance_content(body)


@router.post("/enhance-job-desc")
async def enhance_job_description(body: Optional[EnhanceRequest] = Body(None)):
    return await enhance_content(body)


@router.post("/upload-resume")
async def upload(
    body: Optional[UploadResumeRequest] = Body(None),
    repo: ResumeRepository = Depends(get_resume_repository),
):
    return await upload_resume(body, repo)
