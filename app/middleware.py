import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import Header, Request

from .core import API_KEY
from .errors import CatalogError, ErrorKind

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "Unauthorized - API key required"

# ---------------------------
# Request logger (HTTP middleware)
# ---------------------------
async def log_requests(request: Request, call_next):
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    logger.info("[%s] %s %s", datetime.now(timezone.utc).isoformat(), request.method, target)
    return await call_next(request)

# ---------------------------
# API-key gate (router dependency)
# ---------------------------
async def require_api_key(apikey: Optional[str] = Header(None)) -> None:
    if not apikey or apikey != API_KEY:
        raise CatalogError(ErrorKind.UNAUTHORIZED, UNAUTHORIZED_MESSAGE)
