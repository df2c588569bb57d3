from unittest.mock import MagicMock

import pytest
import requests


def make_response(status_code=200, text="[]", reason="OK"):
    """Respuesta real de requests, para que ok/text se comporten como en producción."""
    response = requests.models.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def fake_session():
    """Sesión de requests simulada; las pruebas configuran session.request."""
    session = MagicMock()
    session.request.return_value = make_response()
    return session
