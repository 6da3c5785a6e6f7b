"""
Paletas de colores y tema activo de la consola.

El tema se elige con `--theme` o con la clave "theme" de config.json.
"""

from dataclasses import dataclass, asdict
from typing import Optional
from enum import Enum

from rich.console import Console
from rich.theme import Theme


class ThemeName(Enum):
    """Temas disponibles."""
    DEFAULT = "default"
    NORD = "nord"
    MINIMAL = "minimal"


@dataclass(frozen=True)
class ColorPalette:
    """Colores usados por paneles, tablas y preguntas."""
    primary: str      # Título del formulario
    secondary: str    # Títulos de sección, encabezados de tabla
    accent: str       # Marcador de pregunta, puntero
    success: str      # Envío completado, registro exitoso
    warning: str      # Cancelación
    error: str        # Errores de campo, formulario no disponible
    info: str
    muted: str        # Descripciones, placeholders
    value: str        # Respuestas
    label: str        # Etiquetas de campo
    required: str     # Marca "*" de campo requerido
    border: str

    def to_rich_theme(self) -> Theme:
        """Estilos con nombre para usar en markup ("[error]...[/]")."""
        styles = asdict(self)
        styles["title"] = f"bold {self.primary}"
        styles["value"] = f"bold {self.value}"
        styles["required"] = f"bold {self.required}"
        return Theme(styles)


THEMES = {
    ThemeName.DEFAULT: ColorPalette(
        primary="#4e8fd1",
        secondary="#6fb3b8",
        accent="#c38fd6",
        success="#6cbf6c",
        warning="#e0b050",
        error="#e06060",
        info="#4e8fd1",
        muted="#8a8a8a",
        value="#e8c070",
        label="#b8b8b8",
        required="#e06060",
        border="#5a5a5a",
    ),
    ThemeName.NORD: ColorPalette(
        primary="#88c0d0",      # nord8
        secondary="#81a1c1",    # nord9
        accent="#b48ead",       # nord15
        success="#a3be8c",      # nord14
        warning="#ebcb8b",      # nord13
        error="#bf616a",        # nord11
        info="#5e81ac",         # nord10
        muted="#616e88",
        value="#d08770",        # nord12
        label="#d8dee9",        # nord4
        required="#bf616a",
        border="#434c5e",       # nord2
    ),
    ThemeName.MINIMAL: ColorPalette(
        primary="#ffffff",
        secondary="#c0c0c0",
        accent="#5fafff",
        success="#87d787",
        warning="#ffd787",
        error="#ff8787",
        info="#5fafff",
        muted="#707070",
        value="#ffffff",
        label="#a0a0a0",
        required="#ff8787",
        border="#444444",
    ),
}


class CLITheme:
    """Tema activo y consola asociada (estado global de la CLI)."""

    _palette: ColorPalette = THEMES[ThemeName.DEFAULT]
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        cls._palette = THEMES[theme]
        cls._console = None  # La consola se recrea con los estilos nuevos

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        if cls._console is None:
            cls._console = Console(theme=cls._palette.to_rich_theme())
        return cls._console


def set_theme_by_name(name: str) -> None:
    """Activa un tema por nombre ("default", "nord", "minimal")."""
    try:
        theme = ThemeName(name.strip().lower())
    except ValueError:
        available = ", ".join(t.value for t in ThemeName)
        raise ValueError(f"Unknown theme '{name}'. Available: {available}") from None
    CLITheme.set_theme(theme)


def get_console() -> Console:
    """Consola Rich con el tema activo."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Paleta del tema activo."""
    return CLITheme.get_palette()
