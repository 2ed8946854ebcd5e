"""Centralized error transformation for API routes.

Maps Sampurnan errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from sampurnan.domain.shared.error import (
    AuthorizationError,
    DomainError,
    FormatError,
    InfrastructureError,
    InvalidStateError,
    NotFoundError,
    SampurnanError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    ValidationError: 422,
    FormatError: 422,
    InvalidStateError: 409,
    AuthorizationError: 401,
}


def map_error(error: SampurnanError) -> HTTPException:
    """Map a Sampurnan error to an HTTPException carrying ``{code, message[, field]}``."""
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        status_code = DOMAIN_ERROR_STATUS_MAP.get(type(error), 400)
        if isinstance(error, ValidationError) and error.field is not None:
            detail["field"] = error.field
        if isinstance(error, AuthorizationError):
            return HTTPException(status_code=401, detail=detail, headers={"WWW-Authenticate": "Bearer"})
        return HTTPException(status_code=status_code, detail=detail)

    return HTTPException(status_code=500, detail=detail)
