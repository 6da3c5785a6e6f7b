"""
Validación y formateo de respuestas.

validate_section es una función pura: no modifica las respuestas ni el
mapa de errores anterior, solo devuelve uno nuevo.
"""

import re
from collections.abc import Mapping
from typing import Optional

from dynaform.answers import AnswerValue, ErrorMap, is_empty
from dynaform.schema import FieldDef, FieldType, Section

REQUIRED_MESSAGE = "This field is required"
MIN_LENGTH_MESSAGE = "Minimum length is {min_length}"
MAX_LENGTH_MESSAGE = "Maximum length is {max_length}"
EMAIL_MESSAGE = "Invalid email format"

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


def validate_field(field: FieldDef, value: Optional[AnswerValue]) -> Optional[str]:
    """
    Valida el valor de un campo.

    Orden de prioridad (solo se reporta el primer error):
    requerido > longitud mínima > longitud máxima > formato de email.

    Returns:
        Mensaje de error, o None si el valor es válido
    """
    if is_empty(value):
        if field.required:
            return REQUIRED_MESSAGE
        return None

    if field.is_text_like:
        if field.min_length is not None and len(value) < field.min_length:
            return MIN_LENGTH_MESSAGE.format(min_length=field.min_length)

        if field.max_length is not None and len(value) > field.max_length:
            return MAX_LENGTH_MESSAGE.format(max_length=field.max_length)

    if field.type == FieldType.EMAIL:
        if not isinstance(value, str) or not EMAIL_PATTERN.search(value):
            return EMAIL_MESSAGE

    return None


def validate_section(
    section: Section,
    answers: Mapping[str, AnswerValue],
) -> tuple[ErrorMap, bool]:
    """
    Valida todos los campos de una sección.

    Solo inspecciona los campos de la sección recibida; las demás
    secciones no se revalidan.

    Args:
        section: Sección a validar
        answers: Respuestas actuales (fieldId -> valor)

    Returns:
        Tupla (errores, es_valida). El mapa de errores reemplaza por
        completo al anterior: los campos sin error no aparecen.
    """
    errors: ErrorMap = {}
    for field in section.fields:
        message = validate_field(field, answers.get(field.field_id))
        if message is not None:
            errors[field.field_id] = message
    return errors, not errors


def format_answer(field: FieldDef, value: Optional[AnswerValue]) -> str:
    """Formatea una respuesta para mostrar."""
    if is_empty(value):
        return "-"

    if field.type == FieldType.CHECKBOX:
        return ", ".join(field.option_label(v) for v in value)
    elif field.type in (FieldType.DROPDOWN, FieldType.RADIO):
        return field.option_label(value)

    return str(value)
