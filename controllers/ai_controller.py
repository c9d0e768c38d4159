from typing import Optional

from config.env_config import UPLOAD_SUMMARY_MAX_CHARS
from config.log_config import get_logger
from models.resume_model import new_resume
from services.resume_repository import ResumeRepository
from utils.enhance import enhance_text
from validation.request_types import EnhanceRequest, UploadResumeRequest

logger = get_logger("ai_api")


async def enhance_content(body: Optional[EnhanceRequest]):
    user_content = body.userContent if body else None
    return {"enhancedContent": enhance_text(user_content)}


# Creates a resume from text the client already extracted from a PDF
async def upload_resume(body: Optional[UploadResumeRequest], repo: ResumeRepository):
    body = body or UploadResumeRequest()
    title = str(body.title) if body.title else "Uploaded Resume"
    resume_text = "" if body.resumeText is None else str(body.resumeText)

    resume = new_resume(title, professional_summary=resume_text.strip()[:UPLOAD_SUMMARY_MAX_CHARS])
    repo.upsert(resume)

    logger.info(f"Uploaded resume {resume['_id']} ({len(resume_text)} chars of text)")
    return {"resumeId": resume["_id"], "message": "Resume uploaded"}
