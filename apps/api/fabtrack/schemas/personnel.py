"""
Personnel schemas.

Creating personnel also opens a login account, so the create payload
carries the initial password. It is never part of a response.
"""

from .base import RecordResponse, RequestSchema, partial
from .fields import email, min_length, non_empty, optional_text

PASSWORD_MIN_LENGTH = 6


class PersonnelCreate(RequestSchema):
    email: email("Geçerli bir email giriniz.")
    password: min_length(PASSWORD_MIN_LENGTH, "Şifre en az 6 karakter olmalı.")
    full_name: non_empty("Ad soyad zorunlu.")
    phone: optional_text() = None
    department: optional_text() = None
    position: optional_text() = None


PersonnelUpdate = partial(PersonnelCreate)


class PersonnelResponse(RecordResponse):
    email: str
    full_name: str
    phone: str | None = None
    department: str | None = None
    position: str | None = None
