"""
Uniform JSON envelope for every comment endpoint.

Body shape::

    {"success": bool, "data": {...}, "msg": "..."}

``data`` and ``msg`` are omitted when not supplied.  The HTTP status
defaults to 200 for a success and 500 for a failure; callers pass an
explicit status only for caller-correctable errors (400, 401).
"""
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def build_envelope(
    success: bool,
    data: dict[str, Any] | None = None,
    msg: str | None = None,
) -> dict[str, Any]:
    body: dict[str, Any] = {"success": success}
    if data is not None:
        body["data"] = data
    if msg is not None:
        body["msg"] = msg
    return body


def send_api_response(
    success: bool,
    data: dict[str, Any] | None = None,
    msg: str | None = None,
    status_code: int | None = None,
) -> JSONResponse:
    if status_code is None:
        status_code = (
            status.HTTP_200_OK if success else status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(build_envelope(success, data, msg)),
    )
