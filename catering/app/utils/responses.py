"""Envelopes wrapping every API response."""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse

from ..middlewares.request_id import request_id_ctx


def ok(data: Any) -> dict[str, Any]:
    return {"ok": True, "data": data}


def err(
    code: int | str,
    message: str,
    *,
    hint: str | None = None,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Return an error envelope tagged with the current request id."""

    error: dict[str, Any] = {"code": code, "message": message}
    if hint:
        error["hint"] = hint
    if details:
        error["details"] = details
    return {"ok": False, "request_id": request_id_ctx.get(), "error": error}


def error_response(
    status_code: int, code: int | str, message: str, *, hint: str | None = None
) -> JSONResponse:
    return JSONResponse(err(code, message, hint=hint), status_code=status_code)
