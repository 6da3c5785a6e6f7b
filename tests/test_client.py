"""Tests para el cliente del servicio de formularios."""

from unittest.mock import MagicMock

import pytest
import requests

from dynaform.client import (
    FETCH_FAILED_MESSAGE,
    FORM_NOT_FOUND_MESSAGE,
    LOGIN_FAILED_MESSAGE,
    REGISTRATION_FAILED_MESSAGE,
    FormServiceClient,
)
from dynaform.context import SessionContext
from dynaform.errors import SchemaError, ServiceError

BASE_URL = "https://forms.example.com"


def _response(status_code=200, body=None):
    """Respuesta simulada con la interfaz usada de requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    if body is None:
        response.json.side_effect = ValueError("no JSON")
    else:
        response.json.return_value = body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


@pytest.fixture
def http():
    return MagicMock()


@pytest.fixture
def client(http):
    return FormServiceClient(BASE_URL + "/", timeout_s=5, session=http)


@pytest.fixture
def context():
    return SessionContext(roll_number="42", name="Ada")


class TestCreateUser:
    """Tests para create_user."""

    def test_posts_payload(self, client, http, context):
        """Test cuerpo y URL del registro."""
        http.post.return_value = _response(200, {"message": "ok"})
        assert client.create_user(context) == {"message": "ok"}
        http.post.assert_called_once_with(
            BASE_URL + "/create-user",
            json={"rollNumber": "42", "name": "Ada"},
            timeout=5,
        )

    def test_empty_body(self, client, http, context):
        """Test respuesta exitosa sin JSON."""
        http.post.return_value = _response(201)
        assert client.create_user(context) == {}

    def test_server_message(self, client, http, context):
        """Test que se usa el mensaje del servidor."""
        http.post.return_value = _response(400, {"message": "User already exists"})
        with pytest.raises(ServiceError, match="User already exists") as exc_info:
            client.create_user(context)
        assert exc_info.value.status_code == 400

    def test_default_message(self, client, http, context):
        """Test mensaje por defecto si el servidor no envía uno."""
        http.post.return_value = _response(500)
        with pytest.raises(ServiceError) as exc_info:
            client.create_user(context)
        assert exc_info.value.message == REGISTRATION_FAILED_MESSAGE

    def test_connection_error(self, client, http, context):
        """Test fallo de red."""
        http.post.side_effect = requests.ConnectionError("unreachable")
        with pytest.raises(ServiceError, match=REGISTRATION_FAILED_MESSAGE) as exc_info:
            client.create_user(context)
        assert exc_info.value.status_code is None


class TestGetForm:
    """Tests para get_form."""

    def test_returns_schema(self, client, http, raw_schema):
        """Test obtención del formulario."""
        http.get.return_value = _response(200, {"form": raw_schema})
        schema = client.get_form("42")
        assert schema.title == "Student Registration"
        http.get.assert_called_once_with(
            BASE_URL + "/get-form",
            params={"rollNumber": "42"},
            timeout=5,
        )

    @pytest.mark.parametrize("body", [{}, {"form": None}, {"form": {}}])
    def test_form_not_found(self, client, http, body):
        """Test respuesta sin formulario."""
        http.get.return_value = _response(200, body)
        with pytest.raises(SchemaError, match=FORM_NOT_FOUND_MESSAGE):
            client.get_form("42")

    def test_http_error(self, client, http):
        """Test estado HTTP de error."""
        http.get.return_value = _response(404, {"message": "nope"})
        with pytest.raises(SchemaError, match=FETCH_FAILED_MESSAGE):
            client.get_form("42")

    def test_timeout(self, client, http):
        """Test tiempo de espera agotado."""
        http.get.side_effect = requests.Timeout("slow")
        with pytest.raises(SchemaError, match=FETCH_FAILED_MESSAGE):
            client.get_form("42")

    def test_invalid_json(self, client, http):
        """Test cuerpo que no es JSON."""
        http.get.return_value = _response(200)
        with pytest.raises(SchemaError, match=FETCH_FAILED_MESSAGE):
            client.get_form("42")

    def test_malformed_form(self, client, http):
        """Test formulario que no pasa la validación del esquema."""
        http.get.return_value = _response(200, {"form": {"title": "T", "sections": []}})
        with pytest.raises(SchemaError, match="no sections"):
            client.get_form("42")


class TestLogin:
    """Tests para login."""

    def test_new_user(self, client, http, context, raw_schema):
        """Test registro nuevo seguido de obtención del formulario."""
        http.post.return_value = _response(200, {"message": "created"})
        http.get.return_value = _response(200, {"form": raw_schema})
        schema = client.login(context)
        assert schema.count_fields() == 8

    def test_existing_user(self, client, http, context, raw_schema):
        """Test que un usuario ya registrado continúa con el formulario."""
        http.post.return_value = _response(400, {"message": "User already exists"})
        http.get.return_value = _response(200, {"form": raw_schema})
        assert client.login(context).title == "Student Registration"

    def test_other_registration_error(self, client, http, context):
        """Test que otros errores de registro se propagan."""
        http.post.return_value = _response(500)
        with pytest.raises(ServiceError, match=LOGIN_FAILED_MESSAGE):
            client.login(context)
        http.get.assert_not_called()
