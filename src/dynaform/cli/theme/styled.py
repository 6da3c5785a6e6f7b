"""
Objetos Rich estilizados (no imprimen directamente).
"""

from rich.panel import Panel
from rich.text import Text
from rich import box

from dynaform.cli.theme.palette import get_palette


def _tagged(tag: str, text: str, color: str) -> Text:
    return Text(f"[{tag}] {text}", style=color)


def styled_header(text: str, subtitle: str = None) -> Panel:
    """Panel de encabezado con subtítulo opcional."""
    p = get_palette()
    content = Text(text, style=f"bold {p.primary}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)
    return Panel(content, border_style=p.border, box=box.ROUNDED, padding=(0, 2))


def styled_label(label: str, value, required: bool = False) -> Text:
    """Etiqueta de campo con su valor, ej: "Email *: ada@example.com"."""
    p = get_palette()
    text = Text(label, style=p.label)
    if required:
        text.append(" *", style=f"bold {p.required}")
    text.append(": ", style=p.label)
    text.append(str(value), style=f"bold {p.value}")
    return text


def styled_success(text: str) -> Text:
    return _tagged("+", text, get_palette().success)


def styled_warning(text: str) -> Text:
    return _tagged("!", text, get_palette().warning)


def styled_error(text: str) -> Text:
    return _tagged("x", text, get_palette().error)


def styled_info(text: str) -> Text:
    return _tagged("i", text, get_palette().info)


def styled_field_error(text: str) -> Text:
    """Mensaje de validación que acompaña a un campo."""
    return Text(f"    ^ {text}", style=get_palette().error)


def styled_failure_panel(text: str, title: str = "ERROR") -> Panel:
    """Panel de fallo cuando no se puede mostrar el formulario."""
    p = get_palette()
    return Panel(
        Text(text, style=p.error),
        title=Text(title, style=f"bold {p.error}"),
        title_align="left",
        border_style=p.error,
        box=box.ROUNDED,
        padding=(1, 2),
    )
