from config.log_config import get_logger
from models.user_model import default_user
from services.storage_service import StorageService, USER_KEY, TOKEN_KEY, RESUMES_KEY

logger = get_logger("Seed_Service")

DEFAULT_TOKEN = "local_token"


# Same notion of "empty" as the web client: null, false, 0 and "" count as
# missing, while {} and [] are real values
def is_missing(value) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return value == ""


def ensure_seed(storage: StorageService) -> None:
    """Make sure the local user, token and resume collection exist.

    Safe to call any number of times; values that are already present are
    never touched.
    """
    if is_missing(storage.read_json(USER_KEY, None)):
        logger.debug("Seeding default local user")
        storage.write_json(USER_KEY, default_user().model_dump(by_alias=True))

    if storage.read_raw(TOKEN_KEY) is None:
        storage.write_raw(TOKEN_KEY, DEFAULT_TOKEN)

    if is_missing(storage.read_json(RESUMES_KEY, None)):
        storage.write_json(RESUMES_KEY, [])
