from __future__ import annotations

import json

from fastapi import HTTPException, Request, status

from quiz_catalog.catalog.errors import (
    CatalogError,
    CatalogValidationError,
    ConflictError,
)


async def read_json_body(request: Request) -> object:
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": "E_INVALID_JSON"},
        ) from exc


def not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail={"code": "E_NOT_FOUND"})


def as_http_error(exc: CatalogError) -> HTTPException:
    if isinstance(exc, CatalogValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "code": "E_VALIDATION",
                "errors": [{"field": error.field, "message": error.message} for error in exc.errors],
            },
        )
    if isinstance(exc, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail={"code": "E_CONFLICT"})
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"code": "E_INTERNAL"},
    )
