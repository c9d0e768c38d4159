from typing import Optional

from config.log_config import get_logger
from models.user_model import User, DEFAULT_USER_NAME, DEFAULT_USER_EMAIL
from services.resume_repository import ResumeRepository
from services.seed_service import DEFAULT_TOKEN
from services.storage_service import StorageService, USER_KEY, TOKEN_KEY
from validation.request_types import UserCredentials

logger = get_logger("user_api")


def _clean(value, default: str) -> str:
    if value is None:
        return default
    return str(value).strip() or default


async def get_user_data(storage: StorageService):
    return {"user": storage.read_json(USER_KEY, None)}


async def get_user_resumes(repo: ResumeRepository):
    return {"resumes": repo.list()}


# Login and register are the same local operation, only the message differs
async def login_user(user_data: Optional[UserCredentials], storage: StorageService, register: bool = False):
    user_data = user_data or UserCredentials()

    user = User(
        name=_clean(user_data.name, DEFAULT_USER_NAME),
        email=_clean(user_data.email, DEFAULT_USER_EMAIL),
    ).model_dump(by_alias=True)

    storage.write_json(USER_KEY, user)
    storage.write_raw(TOKEN_KEY, DEFAULT_TOKEN)

    logger.info(f"{'Registered' if register else 'Logged in'} local user {user['email']}")
    return {
        "token": DEFAULT_TOKEN,
        "user": user,
        "message": "Registered (local)" if register else "Logged in (local)",
    }
