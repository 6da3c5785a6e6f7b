"""
Despacho de campos a widgets.

render_field traduce una definición de campo, su valor actual y su error
a un Widget: un contrato de interacción (qué se muestra y qué eventos de
cambio emite), no píxeles. El front-end concreto (terminal, web) decide
cómo dibujarlo.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from dynaform.answers import AnswerValue
from dynaform.schema import FieldDef, FieldOption, FieldType, Section


class WidgetKind(Enum):
    """Tipos de widget."""
    INPUT = "input"                    # Entrada de una línea
    TEXTAREA = "textarea"              # Entrada multilínea
    DATE = "date"                      # Fecha ISO
    SELECT = "select"                  # Selección única desplegable
    RADIO = "radio"                    # Opciones mutuamente excluyentes
    CHECKBOX_GROUP = "checkbox_group"  # Selección múltiple


TEXTAREA_ROWS = 4


@dataclass(frozen=True)
class ChangeEvent:
    """Cambio de valor emitido por un widget."""
    field_id: str
    value: AnswerValue


@dataclass
class Widget:
    """Contrato de interacción de un campo."""
    kind: WidgetKind
    field: FieldDef
    value: AnswerValue
    error: Optional[str] = None
    input_type: Optional[str] = None  # "text", "email", "tel", "date"
    rows: int = 1
    options: list[FieldOption] = field(default_factory=list)

    @property
    def field_id(self) -> str:
        return self.field.field_id

    @property
    def label(self) -> str:
        return self.field.label

    @property
    def required(self) -> bool:
        return self.field.required

    @property
    def placeholder(self) -> Optional[str]:
        return self.field.placeholder

    @property
    def test_id(self) -> Optional[str]:
        return self.field.test_id

    @property
    def has_error(self) -> bool:
        return bool(self.error)

    @property
    def is_choice(self) -> bool:
        return self.kind in (WidgetKind.SELECT, WidgetKind.RADIO, WidgetKind.CHECKBOX_GROUP)

    def is_checked(self, option_value: str) -> bool:
        """Para checkbox: True si la opción está marcada."""
        return self.kind == WidgetKind.CHECKBOX_GROUP and option_value in self.value

    def is_selected(self, option_value: str) -> bool:
        """Para select/radio: True si la opción es la elegida."""
        return self.kind in (WidgetKind.SELECT, WidgetKind.RADIO) and self.value == option_value

    def change(self, value: str) -> ChangeEvent:
        """
        Emite el nuevo valor completo de un widget escalar.

        Para entradas de texto es el string completo tras cada tecla;
        para select/radio es el `value` de la opción elegida.
        """
        if self.kind == WidgetKind.CHECKBOX_GROUP:
            raise TypeError(f"Field '{self.field_id}' is a checkbox group; use toggle()")
        if self.kind in (WidgetKind.SELECT, WidgetKind.RADIO):
            self._check_option(value)
        return ChangeEvent(self.field_id, value)

    def toggle(self, option_value: str, checked: bool) -> ChangeEvent:
        """
        Marca o desmarca una opción de un grupo de checkbox.

        Al marcar se agrega al final si no estaba; al desmarcar se elimina.
        El orden de los demás elementos se conserva.
        """
        if self.kind != WidgetKind.CHECKBOX_GROUP:
            raise TypeError(f"Field '{self.field_id}' is not a checkbox group; use change()")
        self._check_option(option_value)

        current = list(self.value)
        if checked:
            if option_value not in current:
                current.append(option_value)
        else:
            current = [v for v in current if v != option_value]
        return ChangeEvent(self.field_id, current)

    def _check_option(self, value: str) -> None:
        if value not in self.field.option_values():
            raise ValueError(f"'{value}' is not an option of field '{self.field_id}'")


def _text_widget(field: FieldDef, value, error) -> Widget:
    return Widget(
        kind=WidgetKind.INPUT,
        field=field,
        value=value if value is not None else "",
        error=error,
        input_type=field.type.value,
    )


def _textarea_widget(field: FieldDef, value, error) -> Widget:
    return Widget(
        kind=WidgetKind.TEXTAREA,
        field=field,
        value=value if value is not None else "",
        error=error,
        rows=TEXTAREA_ROWS,
    )


def _date_widget(field: FieldDef, value, error) -> Widget:
    return Widget(
        kind=WidgetKind.DATE,
        field=field,
        value=value if value is not None else "",
        error=error,
        input_type="date",
    )


def _single_choice_widget(kind: WidgetKind):
    def build(field: FieldDef, value, error) -> Widget:
        return Widget(
            kind=kind,
            field=field,
            value=value if value is not None else "",
            error=error,
            options=list(field.options),
        )
    return build


def _checkbox_widget(field: FieldDef, value, error) -> Widget:
    return Widget(
        kind=WidgetKind.CHECKBOX_GROUP,
        field=field,
        value=list(value) if value else [],
        error=error,
        options=list(field.options),
    )


_BUILDERS = {
    FieldType.TEXT: _text_widget,
    FieldType.EMAIL: _text_widget,
    FieldType.TEL: _text_widget,
    FieldType.TEXTAREA: _textarea_widget,
    FieldType.DATE: _date_widget,
    FieldType.DROPDOWN: _single_choice_widget(WidgetKind.SELECT),
    FieldType.RADIO: _single_choice_widget(WidgetKind.RADIO),
    FieldType.CHECKBOX: _checkbox_widget,
}


def render_field(
    field: FieldDef,
    value: Optional[AnswerValue] = None,
    error: Optional[str] = None,
) -> Widget:
    """Construye el widget de un campo a partir de su valor y error actuales."""
    try:
        build = _BUILDERS[field.type]
    except KeyError:
        raise TypeError(f"No widget for field type '{field.type}'") from None
    return build(field, value, error or None)


def render_section(
    section: Section,
    answers: Mapping[str, AnswerValue],
    errors: Mapping[str, str],
) -> list[Widget]:
    """Construye los widgets de una sección, en el orden de sus campos."""
    return [
        render_field(fld, answers.get(fld.field_id), errors.get(fld.field_id))
        for fld in section.fields
    ]
