"""
Response envelope.

Every JSON response of the resource API has the shape::

    {"success": true, "data": ...}       # data omitted for deletes
    {"success": false, "error": "..."}   # or a field-error map

``success=True`` never carries ``error`` and ``success=False`` never carries
``data``; the model refuses to build anything else.
"""

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, model_validator

from fabtrack.core.errors import AppError, ErrorDetail


class Envelope(BaseModel):
    """Uniform ``{success, data | error}`` wrapper."""

    success: bool
    data: Any = None
    error: ErrorDetail | None = None

    @model_validator(mode="after")
    def check_shape(self) -> "Envelope":
        if self.success and self.error is not None:
            raise ValueError("successful envelope cannot carry an error")
        if not self.success and self.data is not None:
            raise ValueError("failed envelope cannot carry data")
        if not self.success and self.error is None:
            raise ValueError("failed envelope requires an error")
        return self

    def render(self) -> dict[str, Any]:
        """JSON body with absent members left out rather than null."""
        content: dict[str, Any] = {"success": self.success}
        if self.data is not None:
            content["data"] = jsonable_encoder(self.data)
        if self.error is not None:
            content["error"] = self.error
        return content


def success_response(
    data: Any = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Render a successful envelope."""
    envelope = Envelope(success=True, data=data)
    return JSONResponse(content=envelope.render(), status_code=status_code)


def error_response(error: ErrorDetail, status_code: int) -> JSONResponse:
    """Render a failed envelope."""
    envelope = Envelope(success=False, error=error)
    return JSONResponse(content=envelope.render(), status_code=status_code)


def app_error_response(exc: AppError) -> JSONResponse:
    return error_response(exc.error, exc.status_code)
