"""
Tests for the response envelope and error taxonomy.
"""

import json

import pytest
from pydantic import ValidationError

from fabtrack.core.errors import (
    Forbidden,
    NotFound,
    Unauthenticated,
    Unexpected,
    ValidationFailed,
)
from fabtrack.core.responses import Envelope, app_error_response, success_response


def test_success_envelope_omits_error():
    assert Envelope(success=True, data={"id": "1"}).render() == {
        "success": True,
        "data": {"id": "1"},
    }


def test_success_without_data_omits_data():
    response = success_response()
    assert json.loads(response.body) == {"success": True}
    assert response.status_code == 200


def test_empty_list_is_still_data():
    assert Envelope(success=True, data=[]).render() == {"success": True, "data": []}


def test_envelope_shape_is_enforced():
    with pytest.raises(ValidationError):
        Envelope(success=True, error="boom")
    with pytest.raises(ValidationError):
        Envelope(success=False, data={"id": "1"})
    with pytest.raises(ValidationError):
        Envelope(success=False)


@pytest.mark.parametrize(
    "exc, status_code, error",
    [
        (Unauthenticated(), 401, "Yetkisiz."),
        (Forbidden(), 403, "Yetkisiz."),
        (NotFound("Proje bulunamadı."), 404, "Proje bulunamadı."),
        (Unexpected("database is locked"), 500, "database is locked"),
        (ValidationFailed({"name": ["Proje adı zorunlu."]}), 400, {"name": ["Proje adı zorunlu."]}),
    ],
)
def test_app_errors_render_as_envelopes(exc, status_code, error):
    response = app_error_response(exc)
    assert response.status_code == status_code
    assert json.loads(response.body) == {"success": False, "error": error}
