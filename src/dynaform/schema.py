"""
Modelo del esquema de formulario.

Representación tipada (e inmutable) de la definición de formulario que
entrega el servicio: secciones ordenadas, cada una con sus campos, tipos,
restricciones y opciones. Los nombres de clave del servicio (camelCase)
se aceptan como alias.
"""

import json
import logging
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)

from dynaform.errors import SchemaError

logger = logging.getLogger(__name__)


class FieldType(str, Enum):
    """Tipos de campo soportados."""
    TEXT = "text"
    EMAIL = "email"
    TEL = "tel"
    TEXTAREA = "textarea"
    DATE = "date"
    DROPDOWN = "dropdown"
    RADIO = "radio"
    CHECKBOX = "checkbox"


# Tipos con restricciones de longitud
TEXT_LIKE_TYPES = frozenset({
    FieldType.TEXT,
    FieldType.EMAIL,
    FieldType.TEL,
    FieldType.TEXTAREA,
})

# Tipos que requieren lista de opciones
CHOICE_TYPES = frozenset({
    FieldType.DROPDOWN,
    FieldType.RADIO,
    FieldType.CHECKBOX,
})


class _SchemaModel(BaseModel):
    """Base inmutable para los modelos del esquema."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class FieldOption(_SchemaModel):
    """Una opción de dropdown, radio o checkbox."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    value: str
    label: str
    test_id: Optional[str] = Field(default=None, alias="dataTestId")


class FieldDef(_SchemaModel):
    """Definición de un campo del formulario."""
    field_id: str = Field(alias="fieldId", min_length=1)
    type: FieldType
    label: str
    required: bool = False
    placeholder: Optional[str] = None
    min_length: Optional[int] = Field(default=None, alias="minLength")
    max_length: Optional[int] = Field(default=None, alias="maxLength")
    options: tuple[FieldOption, ...] = ()
    test_id: Optional[str] = Field(default=None, alias="dataTestId")

    @model_validator(mode="after")
    def _check_constraints(self) -> "FieldDef":
        if self.is_choice:
            if not self.options:
                raise ValueError(
                    f"Field '{self.field_id}' of type '{self.type.value}' requires options"
                )
            values = [opt.value for opt in self.options]
            if len(set(values)) != len(values):
                raise ValueError(f"Field '{self.field_id}' has duplicate option values")
        elif self.options:
            raise ValueError(
                f"Field '{self.field_id}' of type '{self.type.value}' does not accept options"
            )

        # Los límites se aceptan en cualquier tipo; solo se aplican a los de texto
        if self.min_length is not None or self.max_length is not None:
            if self.min_length is not None and self.min_length < 0:
                raise ValueError(f"Field '{self.field_id}': minLength must be >= 0")
            if self.max_length is not None and self.max_length < 0:
                raise ValueError(f"Field '{self.field_id}': maxLength must be >= 0")
            if (
                self.min_length is not None
                and self.max_length is not None
                and self.min_length > self.max_length
            ):
                raise ValueError(f"Field '{self.field_id}': minLength is greater than maxLength")
        return self

    @property
    def is_text_like(self) -> bool:
        """True para text/email/tel/textarea."""
        return self.type in TEXT_LIKE_TYPES

    @property
    def is_choice(self) -> bool:
        """True para dropdown/radio/checkbox."""
        return self.type in CHOICE_TYPES

    def option_values(self) -> list[str]:
        """Valores de las opciones, en orden."""
        return [opt.value for opt in self.options]

    def option_label(self, value: str) -> str:
        """Etiqueta de una opción por su valor (el propio valor si no existe)."""
        for opt in self.options:
            if opt.value == value:
                return opt.label
        return value


class Section(_SchemaModel):
    """Sección del formulario: un grupo de campos que se valida junto."""
    title: str = ""
    description: str = ""
    fields: tuple[FieldDef, ...]

    @model_validator(mode="after")
    def _check_fields(self) -> "Section":
        if not self.fields:
            raise ValueError(f"Section '{self.title}' has no fields")
        seen = set()
        for fld in self.fields:
            if fld.field_id in seen:
                raise ValueError(
                    f"Duplicate fieldId '{fld.field_id}' in section '{self.title}'"
                )
            seen.add(fld.field_id)
        return self


class FormSchema(_SchemaModel):
    """Formulario completo, tal como lo entrega el servicio."""
    title: str = Field(default="", validation_alias=AliasChoices("title", "formTitle"))
    sections: tuple[Section, ...]

    @model_validator(mode="after")
    def _check_sections(self) -> "FormSchema":
        if not self.sections:
            raise ValueError("Form has no sections")
        seen = set()
        for section in self.sections:
            for fld in section.fields:
                if fld.field_id in seen:
                    raise ValueError(f"Duplicate fieldId '{fld.field_id}' across sections")
                seen.add(fld.field_id)
        return self

    def field_ids(self) -> list[str]:
        """Todos los fieldId del formulario, en orden de aparición."""
        return [fld.field_id for section in self.sections for fld in section.fields]

    def get_field(self, field_id: str) -> Optional[FieldDef]:
        """Obtiene un campo por su fieldId."""
        for section in self.sections:
            for fld in section.fields:
                if fld.field_id == field_id:
                    return fld
        return None

    def count_fields(self) -> int:
        """Cantidad total de campos."""
        return sum(len(section.fields) for section in self.sections)


def _format_validation_error(exc: ValidationError) -> str:
    """Resume un ValidationError de pydantic en una línea por problema."""
    lines = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        msg = err.get("msg", "invalid")
        lines.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(lines)


def load_schema(raw: Any) -> FormSchema:
    """
    Construye un FormSchema a partir de la estructura cruda del servicio.

    Args:
        raw: Diccionario con "title"/"formTitle" y "sections"

    Returns:
        FormSchema validado

    Raises:
        SchemaError: Si la estructura no cumple las invariantes del esquema
    """
    if not isinstance(raw, Mapping):
        raise SchemaError(f"Form definition must be an object, got {type(raw).__name__}")
    if "sections" not in raw:
        raise SchemaError("Form definition is missing 'sections'")

    try:
        schema = FormSchema.model_validate(dict(raw))
    except ValidationError as exc:
        raise SchemaError(_format_validation_error(exc)) from exc

    logger.debug(
        "Esquema cargado: %r (%d secciones, %d campos)",
        schema.title, len(schema.sections), schema.count_fields(),
    )
    return schema


def load_schema_file(path: Union[str, Path]) -> FormSchema:
    """Carga un esquema desde un archivo JSON."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise SchemaError(f"Schema file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid JSON in {path}: {exc}") from exc

    # El servicio envuelve el formulario en {"form": {...}}
    if isinstance(data, dict) and "form" in data and "sections" not in data:
        data = data["form"]
    return load_schema(data)
