"""
dynaform - Motor de formularios multi-sección definidos por esquema.

El esquema (secciones, campos, tipos, restricciones y opciones) llega del
servicio de formularios; dynaform lo valida, lo traduce a widgets, valida
cada sección antes de avanzar y reúne las respuestas en un solo registro.
"""

__version__ = "0.1.0"

from dynaform.answers import AnswerStore, AnswerValue, ErrorMap
from dynaform.errors import DynaformError, NavigationError, SchemaError, ServiceError
from dynaform.navigation import Navigator, NavResult
from dynaform.renderer import ChangeEvent, Widget, WidgetKind, render_field, render_section
from dynaform.schema import (
    FieldDef,
    FieldOption,
    FieldType,
    FormSchema,
    Section,
    load_schema,
    load_schema_file,
)
from dynaform.session import FormSession
from dynaform.validation import validate_field, validate_section

__all__ = [
    # Esquema
    "FieldDef",
    "FieldOption",
    "FieldType",
    "FormSchema",
    "Section",
    "load_schema",
    "load_schema_file",
    # Respuestas y errores
    "AnswerStore",
    "AnswerValue",
    "ErrorMap",
    "validate_field",
    "validate_section",
    # Widgets
    "ChangeEvent",
    "Widget",
    "WidgetKind",
    "render_field",
    "render_section",
    # Navegación
    "Navigator",
    "NavResult",
    "FormSession",
    # Excepciones
    "DynaformError",
    "SchemaError",
    "NavigationError",
    "ServiceError",
]
