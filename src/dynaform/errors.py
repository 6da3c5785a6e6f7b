"""
Excepciones de dynaform.

Los errores de validación por campo NO son excepciones: viajan como datos
en el mapa de errores (dict fieldId -> mensaje).
"""


class DynaformError(Exception):
    """Error base del paquete."""


class SchemaError(DynaformError):
    """Esquema de formulario mal formado, incompleto o imposible de obtener."""


class NavigationError(DynaformError):
    """Transición de sección no disponible en el estado actual."""


class ServiceError(DynaformError):
    """Fallo en una llamada al servicio de formularios."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
