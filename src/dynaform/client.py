"""
Cliente HTTP del servicio de formularios.

Endpoints:
- POST /create-user        {"rollNumber", "name"}
- GET  /get-form?rollNumber=...  -> {"form": {...}}

No hay reintentos: un fallo se reporta como ServiceError (registro) o
SchemaError (obtención del formulario).
"""

import logging
from typing import Optional

import requests

from dynaform.context import SessionContext
from dynaform.errors import SchemaError, ServiceError
from dynaform.schema import FormSchema, load_schema

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch form structure"
FORM_NOT_FOUND_MESSAGE = "Form not found for this roll number."
REGISTRATION_FAILED_MESSAGE = "Registration failed"
LOGIN_FAILED_MESSAGE = "Login/Registration failed"


def _server_message(response: requests.Response) -> Optional[str]:
    """Extrae el campo "message" de una respuesta de error, si existe."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str):
            return message
    return None


class FormServiceClient:
    """Cliente del servicio de formularios."""

    def __init__(self, base_url: str, timeout_s: float = 30.0, session: requests.Session = None):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.http = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def create_user(
        self,
        context: SessionContext,
        failure_message: str = REGISTRATION_FAILED_MESSAGE,
    ) -> dict:
        """
        Registra al usuario.

        Args:
            context: Matrícula y nombre del usuario
            failure_message: Mensaje si el servidor no envía uno propio

        Raises:
            ServiceError: Si la llamada falla; incluye el mensaje del servidor
        """
        url = self._url("create-user")
        logger.debug("POST %s rollNumber=%s", url, context.roll_number)
        try:
            response = self.http.post(url, json=context.to_payload(), timeout=self.timeout_s)
        except requests.RequestException as exc:
            logger.warning("Registro fallido: %s", exc)
            raise ServiceError(f"{failure_message}: {exc}") from exc

        if not response.ok:
            message = _server_message(response) or failure_message
            logger.warning("Registro rechazado (%d): %s", response.status_code, message)
            raise ServiceError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError:
            return {}

    def get_form(self, roll_number: str) -> FormSchema:
        """
        Obtiene y valida el formulario del usuario.

        Raises:
            SchemaError: Si no se pudo obtener o el formulario es inválido
        """
        url = self._url("get-form")
        logger.debug("GET %s rollNumber=%s", url, roll_number)
        try:
            response = self.http.get(
                url,
                params={"rollNumber": roll_number},
                timeout=self.timeout_s,
            )
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("No se pudo obtener el formulario: %s", exc)
            raise SchemaError(FETCH_FAILED_MESSAGE) from exc

        if not isinstance(body, dict) or not body.get("form"):
            raise SchemaError(FORM_NOT_FOUND_MESSAGE)
        return load_schema(body["form"])

    def login(self, context: SessionContext) -> FormSchema:
        """
        Registra o identifica al usuario y obtiene su formulario.

        Si el registro falla porque el usuario ya existe, se continúa con
        la obtención del formulario.
        """
        try:
            self.create_user(context, failure_message=LOGIN_FAILED_MESSAGE)
        except ServiceError as exc:
            if "already exists" not in exc.message.lower():
                raise
            logger.info("Usuario %s ya registrado", context.roll_number)
        return self.get_form(context.roll_number)
