"""
CLI de dynaform - formularios dinámicos en la terminal.

Comandos:
- register: Registra un usuario en el servicio de formularios
- login: Registra o identifica al usuario y guarda la sesión
- logout: Elimina la sesión guardada
- fill: Recorre el formulario sección por sección y lo envía
- show: Muestra la estructura del formulario
- check: Valida un archivo de esquema
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from dynaform.cli.theme import set_theme_by_name
from dynaform.config import Settings, load_settings
from dynaform.errors import DynaformError

app = typer.Typer(
    name="dynaform",
    help="Completa formularios dinámicos obtenidos del servicio de formularios.",
    no_args_is_help=True,
)

# Configuración activa (se carga en el callback)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Obtiene la configuración activa, cargándola si hace falta."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def configure_logging(verbose: bool) -> None:
    """Instala RichHandler en el logger del paquete."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    pkg_logger = logging.getLogger("dynaform")
    pkg_logger.handlers = [handler]
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = False


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Muestra el log de depuración")] = False,
    theme: Annotated[Optional[str], typer.Option("--theme", help="Tema: default, nord, minimal")] = None,
    base_url: Annotated[Optional[str], typer.Option("--base-url", help="URL del servicio de formularios")] = None,
    data_dir: Annotated[Optional[Path], typer.Option("--data-dir", help="Directorio de datos (default: ~/.dynaform)")] = None,
):
    """
    dynaform - formularios multi-sección definidos por el servidor.

    Cada usuario (identificado por su roll number) recibe su propio
    formulario; las respuestas se validan sección por sección.
    """
    global _settings
    configure_logging(verbose)
    try:
        settings = load_settings(data_dir=data_dir)
        overrides = {}
        if base_url:
            overrides["base_url"] = base_url
        if theme:
            overrides["theme"] = theme
        if overrides:
            settings = Settings(**{**settings.model_dump(), **overrides})
        set_theme_by_name(settings.theme)
    except (DynaformError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)
    _settings = settings


@app.command()
def register(
    roll_number: Annotated[str, typer.Argument(help="Roll number del usuario")],
    name: Annotated[str, typer.Argument(help="Nombre del usuario")],
):
    """
    Registra un usuario nuevo.

    Ejemplo:
        dynaform register 21CS042 "Ada Lovelace"
    """
    from dynaform.cli.auth import register_user
    register_user(roll_number, name)


@app.command()
def login(
    roll_number: Annotated[str, typer.Argument(help="Roll number del usuario")],
    name: Annotated[str, typer.Argument(help="Nombre del usuario")],
):
    """
    Registra o identifica al usuario y guarda la sesión.

    Ejemplo:
        dynaform login 21CS042 "Ada Lovelace"
    """
    from dynaform.cli.auth import login_user
    login_user(roll_number, name)


@app.command()
def logout():
    """Elimina la sesión guardada."""
    from dynaform.cli.auth import logout_user
    logout_user()


@app.command()
def fill(
    schema_file: Annotated[Optional[Path], typer.Option("--schema", "-s", help="Esquema JSON local en lugar del servicio")] = None,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Archivo JSON para las respuestas")] = None,
):
    """
    Completa el formulario sección por sección.

    Ejemplo:
        dynaform fill
        dynaform fill --schema form.json --output answers.json
    """
    from dynaform.cli.form import fill_form
    fill_form(schema_file, output)


@app.command()
def show(
    schema_file: Annotated[Optional[Path], typer.Option("--schema", "-s", help="Esquema JSON local en lugar del servicio")] = None,
):
    """Muestra secciones y campos del formulario."""
    from dynaform.cli.form import show_form
    show_form(schema_file)


@app.command()
def check(
    schema_file: Annotated[Path, typer.Argument(help="Archivo JSON con el esquema")],
):
    """
    Valida un archivo de esquema.

    Ejemplo:
        dynaform check form.json
    """
    from dynaform.cli.form import check_schema
    check_schema(schema_file)
