"""
Application error taxonomy.

Every failure a handler reports is one of these. Each carries the HTTP status
it maps to and the ``error`` value of the response envelope, which is either
a message string or a field-error map.
"""

from __future__ import annotations

from typing import Union

FieldErrors = dict[str, list[str]]
ErrorDetail = Union[str, FieldErrors]

UNAUTHORIZED_MESSAGE = "Yetkisiz."


class AppError(Exception):
    """Base class for errors rendered as ``{success: false, error}``."""

    status_code: int = 500
    default_message: str = "Beklenmeyen bir hata oluştu."

    def __init__(self, error: ErrorDetail | None = None):
        self.error: ErrorDetail = error if error is not None else self.default_message
        super().__init__(self.error if isinstance(self.error, str) else "validation failed")


class Unauthenticated(AppError):
    """No session where the policy requires one."""

    status_code = 401
    default_message = UNAUTHORIZED_MESSAGE


class Forbidden(AppError):
    """Caller's role is not allowed to perform the action."""

    status_code = 403
    default_message = UNAUTHORIZED_MESSAGE


class ValidationFailed(AppError):
    """Payload rejected by a schema; ``error`` is the field-error map."""

    status_code = 400

    def __init__(self, field_errors: FieldErrors):
        super().__init__(field_errors)
        self.field_errors = field_errors


class NotFound(AppError):
    """Requested record does not exist."""

    status_code = 404
    default_message = "Kayıt bulunamadı."


class Unexpected(AppError):
    """Anything else: store failures, unparseable JSON bodies."""

    status_code = 500
