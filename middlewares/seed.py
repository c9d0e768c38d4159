from fastapi import Request, status
from fastapi.responses import JSONResponse

from config.log_config import get_logger
from services.seed_service import ensure_seed
from services.storage_service import StorageWriteError

logger = get_logger("Seed_Middleware")

STORAGE_UNAVAILABLE = "Storage unavailable"


# Runs before route matching, so even unmatched requests see seeded storage
async def seed_storage(request: Request, call_next):
    try:
        ensure_seed(request.app.state.storage)
    except StorageWriteError as e:
        logger.error(f"Seeding failed for {request.method} {request.url.path}: {e}")
        return JSONResponse(
            content={"message": STORAGE_UNAVAILABLE},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return await call_next(request)
