from fastapi import Depends, Request

from services.storage_service import StorageService
from services.resume_repository import ResumeRepository


# Dependency for FastAPI
def get_storage(request: Request) -> StorageService:
    return request.app.state.storage


def get_resume_repository(storage: StorageService = Depends(get_storage)) -> ResumeRepository:
    return ResumeRepository(storage)
