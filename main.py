from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.log_config import get_logger
from middlewares.seed import seed_storage, STORAGE_UNAVAILABLE
from routes.user_routes import router as user_router
from routes.resume_routes import router as resume_router
from routes.ai_routes import router as ai_router
from services.storage_service import StorageService, StorageWriteError
from services.stores import KeyValueStore, build_store

logger = get_logger("LocalApi")


def requested_path(request: Request) -> str:
    """The path as the caller sent it, percent-encoding intact and no query string."""
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    return raw_path.decode("latin-1").split("?", 1)[0]


def create_app(store: Optional[KeyValueStore] = None) -> FastAPI:
    """Build the local API application on top of `store`.

    Routers are matched in the order they are included here; the first
    matching (method, path) wins.
    """
    # exact paths only, "/api/users/data/" is not a route
    app = FastAPI(title="Local Resume API", redirect_slashes=False)
    app.state.storage = StorageService(store if store is not None else build_store())

    app.middleware("http")(seed_storage)

    @app.exception_handler(StarletteHTTPException)
    async def no_route_handler(request: Request, exc: StarletteHTTPException):
        # unknown paths (404) and known paths with another method (405) alike
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            message = f"No local route for {request.method} {requested_path(request)}"
            logger.debug(message)
            return JSONResponse(content={"message": message}, status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(content={"message": str(exc.detail)}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.method} {request.url.path}\n{exc.errors()}")
        return JSONResponse(
            content={"message": "Invalid input"},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(StorageWriteError)
    async def storage_write_handler(request: Request, exc: StorageWriteError):
        logger.error(f"Storage write failed on {request.method} {request.url.path}\n{exc}")
        return JSONResponse(
            content={"message": STORAGE_UNAVAILABLE},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(Exception)
    async def unexpected_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            content={"message": "Internal server error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    app.include_router(user_router)
    app.include_router(resume_router)
    app.include_router(ai_router)

    return app
