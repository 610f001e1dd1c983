from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def build_envelope(success: bool, data: Any = None, error: str | None = None,
                   count: int | None = None, error_code: str | None = None) -> dict:
    """{success, data?, error?, error_code?, count?}; keys left unset are omitted."""
    body: dict[str, Any] = {"success": success}
    if data is not None:
        body["data"] = data
    if error:
        body["error"] = error
    if error_code:
        body["error_code"] = error_code
    if count is not None:
        body["count"] = count
    return body


def api_response(success: bool = True, data: Any = None, error: str | None = None, count: int | None = None,
                 error_code: str | None = None, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(build_envelope(success, data, error, count, error_code)),
    )


def error_response(error: str, status_code: int = 400, error_code: str | None = None) -> JSONResponse:
    return api_response(False, error=error, error_code=error_code, status_code=status_code)
