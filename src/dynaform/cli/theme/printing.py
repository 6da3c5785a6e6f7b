"""
Funciones que imprimen directamente a la consola.
"""

from rich.panel import Panel
from rich.text import Text
from rich import box

from dynaform.cli.theme.palette import get_console, get_palette
from dynaform.cli.theme.styled import (
    styled_header, styled_label, styled_success, styled_warning,
    styled_error, styled_info, styled_field_error, styled_failure_panel,
)

PROGRESS_BAR_WIDTH = 30


def print_header(text: str, subtitle: str = None) -> None:
    get_console().print(styled_header(text, subtitle))


def print_step(step_num: int, total: int, title: str) -> None:
    """
    Imprime el panel de progreso de una sección.

    Args:
        step_num: Número de sección (desde 1)
        total: Cantidad de secciones
        title: Título de la sección
    """
    p = get_palette()
    filled = PROGRESS_BAR_WIDTH * step_num // total

    bar = Text()
    bar.append("█" * filled, style=p.primary)
    bar.append("░" * (PROGRESS_BAR_WIDTH - filled), style=p.muted)
    bar.append(f"  {100 * step_num // total}%", style=p.muted)

    console = get_console()
    console.print()
    console.print(Panel(
        bar,
        title=Text(f" Section {step_num} of {total}", style=f"bold {p.secondary}"),
        title_align="left",
        subtitle=Text(title, style=f"italic {p.muted}") if title else None,
        subtitle_align="left",
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 1),
        width=50,
    ))


def print_field(label: str, value, required: bool = False, indent: int = 2) -> None:
    get_console().print(" " * indent, styled_label(label, value, required))


def print_field_error(text: str) -> None:
    get_console().print(styled_field_error(text))


def print_success(text: str) -> None:
    get_console().print(styled_success(text))


def print_warning(text: str) -> None:
    get_console().print(styled_warning(text))


def print_error(text: str) -> None:
    get_console().print(styled_error(text))


def print_info(text: str) -> None:
    get_console().print(styled_info(text))


def print_failure(text: str, title: str = "ERROR") -> None:
    """Imprime un panel de fallo (formulario no disponible, esquema inválido)."""
    get_console().print(styled_failure_panel(text, title))


def print_section(description: str = "") -> None:
    """Imprime la descripción de la sección activa (el título va en print_step)."""
    console = get_console()
    p = get_palette()
    console.print()
    if description:
        console.print(description, style=p.muted, markup=False)
    console.print()
