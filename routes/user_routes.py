from typing import Optional

from fastapi import APIRouter, Body, Depends

from config.db import get_storage, get_resume_repository
from controllers.user_controller import get_user_data, get_user_resumes, login_user
from services.resume_repository import ResumeRepository
from services.storage_service import StorageService
from validation.request_types import UserCredentials


router = APIRouter(prefix="/api/users", tags=["users"])



@router.get("/data")
async def get_user(storage: StorageService = Depends(get_storage)):
    return await get_user_data(storage)


@router.get("/resumes")
async def get_resumes(repo: ResumeRepository = Depends(get_resume_repository)):
    return await get_user_resumes(repo)


@router.post("/login")
async def user_login(
    user_data: Optional[UserCredentials] = Body(None),
    storage: StorageService = Depends(get_storage),
):
    return await login_user(user_data, storage)


@router.post("/register")
async def user_register(
    user_data: Optional[UserCredentials] = Body(None),
    storage: StorageService = Depends(get_storage),
):
    return await login_user(user_data, storage, register=True)
