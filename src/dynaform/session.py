"""
Sesión de llenado de un formulario.

Une el esquema, las respuestas, el mapa de errores y el navegador.
Aplica los eventos de cambio de los widgets (escribe el valor y limpia el
error del campo) y entrega las respuestas al colaborador de envío cuando
la última sección es válida.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from dynaform.answers import AnswerStore, AnswerValue, ErrorMap
from dynaform.errors import NavigationError
from dynaform.navigation import Navigator, NavResult
from dynaform.renderer import ChangeEvent, Widget, render_field, render_section
from dynaform.schema import FieldDef, FormSchema, Section
from dynaform.validation import validate_section

logger = logging.getLogger(__name__)

SubmitHandler = Callable[[dict[str, AnswerValue]], Any]


class FormSession:
    """Estado de un recorrido por las secciones de un formulario."""

    def __init__(
        self,
        schema: FormSchema,
        answers: Optional[Mapping[str, AnswerValue]] = None,
        on_submit: Optional[SubmitHandler] = None,
    ):
        """
        Inicializa la sesión en la primera sección.

        Args:
            schema: Esquema ya cargado y validado
            answers: Respuestas iniciales opcionales
            on_submit: Recibe una copia de las respuestas al enviar
        """
        self.schema = schema
        self.answers = AnswerStore(answers)
        self.errors: ErrorMap = {}
        self.navigator = Navigator(len(schema.sections))
        self.on_submit = on_submit
        self.submitted_answers: Optional[dict[str, AnswerValue]] = None

    # ------------------------------------------------------------------
    # Estado
    # ------------------------------------------------------------------

    @property
    def index(self) -> int:
        return self.navigator.index

    @property
    def section(self) -> Section:
        """Sección activa."""
        return self.schema.sections[self.navigator.index]

    @property
    def section_count(self) -> int:
        return self.navigator.section_count

    @property
    def is_first(self) -> bool:
        return self.navigator.is_first

    @property
    def is_last(self) -> bool:
        return self.navigator.is_last

    @property
    def is_submitted(self) -> bool:
        return self.navigator.submitted

    def progress_label(self) -> str:
        """Texto de progreso, ej: "Section 2 of 3"."""
        return f"Section {self.index + 1} of {self.section_count}"

    def widgets(self) -> list[Widget]:
        """Widgets de la sección activa."""
        return render_section(self.section, self.answers, self.errors)

    def widget(self, field_id: str) -> Widget:
        """Widget de un campo de la sección activa."""
        return render_field(
            self._active_field(field_id),
            self.answers.get(field_id),
            self.errors.get(field_id),
        )

    # ------------------------------------------------------------------
    # Edición
    # ------------------------------------------------------------------

    def apply(self, event: ChangeEvent) -> None:
        """
        Aplica un evento de cambio.

        Reemplaza el valor del campo y borra su error; el error solo vuelve
        a aparecer en la siguiente validación.
        """
        self._ensure_editable()
        self._active_field(event.field_id)
        self.answers.set(event.field_id, event.value)
        self.errors.pop(event.field_id, None)

    def change(self, field_id: str, value: str) -> None:
        """Atajo: cambia el valor de un campo escalar de la sección activa."""
        self.apply(self.widget(field_id).change(value))

    def toggle(self, field_id: str, option_value: str, checked: bool) -> None:
        """Atajo: marca o desmarca una opción de un checkbox de la sección activa."""
        self.apply(self.widget(field_id).toggle(option_value, checked))

    # ------------------------------------------------------------------
    # Navegación
    # ------------------------------------------------------------------

    def validate(self) -> bool:
        """Valida la sección activa y reemplaza el mapa de errores."""
        self.errors, valid = validate_section(self.section, self.answers)
        return valid

    def next(self) -> NavResult:
        """Valida la sección activa y avanza si es válida."""
        if not self.navigator.can_next:
            raise NavigationError(self.navigator.unavailable_reason("next"))
        result = self.navigator.next(self.validate())
        if result == NavResult.BLOCKED:
            logger.info("Sección %d con %d errores", self.index + 1, len(self.errors))
        return result

    def prev(self) -> NavResult:
        """Vuelve a la sección anterior sin validar ni tocar los errores."""
        return self.navigator.prev()

    def submit(self) -> NavResult:
        """
        Valida la última sección y, si es válida, entrega las respuestas.

        Solo se valida la sección activa: las secciones anteriores no se
        revalidan aunque sus respuestas hayan cambiado.
        """
        if not self.navigator.can_submit:
            raise NavigationError(self.navigator.unavailable_reason("submit"))
        result = self.navigator.submit(self.validate())
        if result == NavResult.BLOCKED:
            logger.info("Envío bloqueado: %d errores", len(self.errors))
            return result

        self.submitted_answers = self.answers.to_dict()
        logger.info(
            "Formulario %r enviado (%d respuestas)",
            self.schema.title, len(self.submitted_answers),
        )
        if self.on_submit is not None:
            self.on_submit(self.answers.to_dict())
        return result

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------

    def _active_field(self, field_id: str) -> FieldDef:
        for fld in self.section.fields:
            if fld.field_id == field_id:
                return fld
        raise KeyError(f"Field '{field_id}' is not in the active section")

    def _ensure_editable(self) -> None:
        if self.is_submitted:
            raise NavigationError("Cannot edit: form already submitted")
