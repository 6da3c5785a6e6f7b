"""
Recorrido interactivo de un formulario en la terminal.

Cada sección se muestra con su progreso; cada campo se pregunta con
questionary según el tipo de widget. Al final de la sección se ofrece
avanzar (o enviar), volver, reeditar o cancelar. Las transiciones las
decide FormSession: este módulo solo dibuja y pregunta.
"""

import logging
from datetime import date
from enum import Enum
from typing import Any, Optional

import questionary

from dynaform.answers import AnswerValue
from dynaform.cli.styles import get_prompt_style
from dynaform.cli.theme import (
    print_step,
    print_section,
    print_field_error,
    print_error,
    print_info,
    print_warning,
)
from dynaform.navigation import NavResult
from dynaform.renderer import Widget, WidgetKind
from dynaform.session import FormSession

logger = logging.getLogger(__name__)

NO_ANSWER = "__no_answer__"


class SectionAction(Enum):
    """Acciones disponibles al terminar una sección."""
    NEXT = "next"
    PREV = "prev"
    SUBMIT = "submit"
    EDIT = "edit"
    CANCEL = "cancel"


# ============================================================================
# Preguntas (questionary)
# ============================================================================

def _validate_iso_date(text: str) -> Any:
    """Acepta vacío o una fecha ISO (AAAA-MM-DD)."""
    if not text:
        return True
    try:
        date.fromisoformat(text)
    except ValueError:
        return "Use the YYYY-MM-DD format"
    return True


def _message(widget: Widget) -> str:
    msg = widget.label
    if widget.required:
        msg += " *"
    if widget.placeholder:
        msg += f" ({widget.placeholder})"
    return msg


def ask_text(widget: Widget) -> Optional[str]:
    """Pregunta un valor de texto. None si el usuario interrumpe."""
    kwargs = {}
    if widget.kind == WidgetKind.DATE:
        kwargs["validate"] = _validate_iso_date
    return questionary.text(
        _message(widget),
        default=widget.value or "",
        multiline=widget.kind == WidgetKind.TEXTAREA,
        style=get_prompt_style(),
        **kwargs,
    ).ask()


def ask_choice(widget: Widget) -> Optional[str]:
    """Pregunta una opción única. Retorna NO_ANSWER si se deja sin responder."""
    choices = [questionary.Choice(opt.label, value=opt.value) for opt in widget.options]
    default = widget.value if widget.value else None
    if default is None:
        choices.append(questionary.Choice("(leave unanswered)", value=NO_ANSWER))
    return questionary.select(
        _message(widget),
        choices=choices,
        default=default,
        style=get_prompt_style(),
    ).ask()


def ask_checkbox(widget: Widget) -> Optional[list[str]]:
    """Pregunta una selección múltiple."""
    choices = [
        questionary.Choice(opt.label, value=opt.value, checked=widget.is_checked(opt.value))
        for opt in widget.options
    ]
    return questionary.checkbox(
        _message(widget),
        choices=choices,
        style=get_prompt_style(),
    ).ask()


def ask_action(session: FormSession) -> Optional[SectionAction]:
    """Pregunta qué hacer al terminar la sección activa."""
    choices = []
    if session.is_last:
        choices.append(questionary.Choice("Submit", value=SectionAction.SUBMIT))
    else:
        choices.append(questionary.Choice("Next", value=SectionAction.NEXT))
    if not session.is_first:
        choices.append(questionary.Choice("Previous", value=SectionAction.PREV))
    choices.append(questionary.Choice("Edit this section again", value=SectionAction.EDIT))
    choices.append(questionary.Choice("Cancel", value=SectionAction.CANCEL))

    return questionary.select(
        session.progress_label(),
        choices=choices,
        style=get_prompt_style(),
    ).ask()


def confirm_cancel() -> bool:
    """Confirma la cancelación del formulario."""
    answer = questionary.confirm(
        "Discard all answers and exit?",
        default=False,
        style=get_prompt_style(),
    ).ask()
    return bool(answer)


# ============================================================================
# Recorrido
# ============================================================================

def _selected_toggles(current: list[str], selected: list[str]) -> list[tuple[str, bool]]:
    """
    Traduce la selección final de un checkbox a una secuencia de toggles.

    Primero se desmarcan las opciones quitadas y luego se marcan las nuevas,
    en el orden en que se eligieron; así se conserva el orden de las que ya
    estaban marcadas.
    """
    toggles = [(v, False) for v in current if v not in selected]
    toggles.extend((v, True) for v in selected if v not in current)
    return toggles


def prompt_widget(session: FormSession, widget: Widget) -> bool:
    """
    Pregunta un campo y aplica la respuesta a la sesión.

    Returns:
        False si el usuario interrumpió (Ctrl+C)
    """
    if widget.error:
        print_field_error(f"{widget.label}: {widget.error}")

    if widget.kind == WidgetKind.CHECKBOX_GROUP:
        selected = ask_checkbox(widget)
        if selected is None:
            return False
        for option_value, checked in _selected_toggles(list(widget.value), selected):
            session.toggle(widget.field_id, option_value, checked)
        return True

    if widget.kind in (WidgetKind.SELECT, WidgetKind.RADIO):
        chosen = ask_choice(widget)
        if chosen is None:
            return False
        if chosen != NO_ANSWER:
            session.apply(widget.change(chosen))
        return True

    text = ask_text(widget)
    if text is None:
        return False
    session.apply(widget.change(text))
    return True


def run_walkthrough(session: FormSession) -> Optional[dict[str, AnswerValue]]:
    """
    Recorre el formulario hasta enviarlo o cancelarlo.

    Returns:
        Respuestas enviadas, o None si el usuario canceló
    """
    pending: Optional[set[str]] = None  # None => preguntar todos los campos

    while not session.is_submitted:
        section = session.section
        print_step(session.index + 1, session.section_count, section.title)
        print_section(section.description)

        for widget in session.widgets():
            if pending is not None and widget.field_id not in pending:
                continue
            if not prompt_widget(session, widget):
                print_warning("Form cancelled")
                return None
        pending = set()

        action = ask_action(session)
        logger.debug("Acción %s en sección %d", action, session.index + 1)
        if action is None or action == SectionAction.CANCEL:
            if action is None or confirm_cancel():
                print_warning("Form cancelled")
                return None
            continue

        if action == SectionAction.EDIT:
            pending = None
        elif action == SectionAction.PREV:
            session.prev()
            print_info("<< Back to the previous section")
            pending = None
        else:
            if action == SectionAction.SUBMIT:
                result = session.submit()
            else:
                result = session.next()

            if result == NavResult.BLOCKED:
                print_error(f"Please fix {len(session.errors)} field(s) before continuing")
                pending = set(session.errors)
            else:
                pending = None

    return session.submitted_answers
