"""
Error mapping for API routers

Every verb of every resource translates service errors the same way, and
every error body has the shape {"detail": {"code": ..., "message": ...}}.

Status codes: a missing addressed record is 404, a null sent for a field
the record cannot hold is 422 (like any other request validation error),
and every other failure is 500. Reference and conflict failures keep their
own code in the body so clients can still tell them apart.
"""
from fastapi import HTTPException, Request

from nile.core.exceptions import (
    InvalidPayloadError,
    NileError,
    NotFoundError,
    ReferenceNotFoundError,
)

# Checked in order: ReferenceNotFoundError must win over its NotFoundError parent
ERROR_STATUS = (
    (ReferenceNotFoundError, 500),
    (NotFoundError, 404),
    (InvalidPayloadError, 422),
)


def error_detail(code: str, message: str) -> dict:
    return {"code": code, "message": message}


def http_error(error: NileError) -> HTTPException:
    """Translate a service error into the matching HTTPException (500 unless listed)"""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error_detail(error.code, error.message))
    return HTTPException(status_code=500, detail=error_detail(error.code, error.message))


def internal_error(message: str) -> HTTPException:
    """500 for anything the service layer did not raise on purpose"""
    return HTTPException(status_code=500, detail=error_detail("INTERNAL_ERROR", message))


def location_for(request: Request, entity_id: int) -> str:
    """Location header value for a resource created by POST on request.url"""
    return f"{request.url.path.rstrip('/')}/{entity_id}"
