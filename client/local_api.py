"""Axios-shaped client for the local resume API.

Requests never leave the process: they are dispatched to the FastAPI app
through httpx's ASGI transport. Successful calls resolve to ``{"data": ...}``;
failures raise :class:`ApiError`, whose ``response`` attribute carries
``{"status", "data": {"message"}}`` so existing ``err.response`` checks keep
working.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import httpx
from fastapi import FastAPI

from config.env_config import LOCAL_API_BASE_URL
from config.log_config import get_logger
from main import create_app
from services.stores import KeyValueStore

logger = get_logger("Local_Api_Client")


class ApiError(Exception):
    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.message = message
        self.status = status
        self.response = {"status": status, "data": {"message": message}}

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "response": self.response}


@dataclass
class FormData:
    """Multi-part style body, the counterpart of a browser FormData."""

    fields: Dict[str, str] = field(default_factory=dict)
    files: Dict[str, Tuple[str, bytes, str]] = field(default_factory=dict)

    def set(self, name: str, value: Any) -> None:
        self.fields[name] = value if isinstance(value, str) else str(value)

    def set_file(self, name: str, filename: str, content: bytes, content_type: str = "application/octet-stream") -> None:
        self.files[name] = (filename, content, content_type)


def normalize_url(url: Optional[str]) -> str:
    if not url:
        return "/"
    return url if url.startswith("/") else f"/{url}"


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


class LocalApi:
    def __init__(
        self,
        app: Optional[FastAPI] = None,
        store: Optional[KeyValueStore] = None,
        base_url: str = LOCAL_API_BASE_URL,
    ):
        if app is None:
            app = create_app(store)
        self.app = app
        # unhandled errors come back as 500 responses instead of raising here
        transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
        self._client = httpx.AsyncClient(transport=transport, base_url=base_url)

    async def __aenter__(self) -> "LocalApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(self, method: str, url: str, body: Any = None, config: Optional[dict] = None) -> Dict[str, Any]:
        # config is accepted for call-site compatibility only
        path = normalize_url(url)

        kwargs: Dict[str, Any] = {}
        if isinstance(body, FormData):
            kwargs["data"] = body.fields
            if body.files:
                kwargs["files"] = body.files
        elif body is not None:
            kwargs["json"] = body

        response = await self._client.request(method, path, **kwargs)
        payload = _json_or_none(response)

        if response.is_success:
            return {"data": payload}

        message = payload.get("message") if isinstance(payload, dict) else None
        if not message:
            message = response.reason_phrase or "Request failed"
        logger.debug(f"{method} {path} failed with {response.status_code}: {message}")
        raise ApiError(message, response.status_code or 400)

    async def get(self, url: str, config: Optional[dict] = None) -> Dict[str, Any]:
        return await self.request("GET", url, None, config)

    async def post(self, url: str, body: Any = None, config: Optional[dict] = None) -> Dict[str, Any]:
        return await self.request("POST", url, body, config)

    async def put(self, url: str, body: Any = None, config: Optional[dict] = None) -> Dict[str, Any]:
        return await self.request("PUT", url, body, config)

    async def delete(self, url: str, config: Optional[dict] = None) -> Dict[str, Any]:
        return await self.request("DELETE", url, None, config)


_default_api: Optional[LocalApi] = None


def get_api() -> LocalApi:
    """Process-wide client backed by the configured storage backend."""
    global _default_api
    if _default_api is None:
        _default_api = LocalApi()
    return _default_api
