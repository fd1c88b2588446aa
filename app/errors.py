"""
Error taxonomy and the terminal error-to-response mapping.

Route logic raises :class:`CatalogError` carrying an :class:`ErrorKind`
and a message. The exception handlers registered in ``app.main`` pass
every failure through :func:`error_response`, which is the only place
that decides the HTTP status and JSON body of an error.
"""

import logging
from enum import Enum

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = "Internal Server Error"


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    INTERNAL = "internal"


STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.INTERNAL: 500,
}


class CatalogError(Exception):
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


def error_response(kind: ErrorKind, message: str) -> JSONResponse:
    status = STATUS_BY_KIND.get(kind, 500)
    message = message or INTERNAL_SERVER_ERROR
    if status >= 500:
        logger.error(message)
    else:
        logger.warning(message)
    return JSONResponse(status_code=status, content={"error": message})
