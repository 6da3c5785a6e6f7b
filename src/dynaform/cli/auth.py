"""
Comandos de identificación: register, login, logout.
"""

import typer

from dynaform.client import FormServiceClient
from dynaform.context import ContextStore, SessionContext
from dynaform.errors import DynaformError
from dynaform.cli.theme import print_error, print_field, print_header, print_info, print_success


def get_client() -> FormServiceClient:
    """Cliente del servicio con la configuración activa."""
    from dynaform.cli import get_settings
    settings = get_settings()
    return FormServiceClient(settings.base_url, timeout_s=settings.timeout_s)


def get_context_store() -> ContextStore:
    """Almacén de sesión en el directorio de datos."""
    from dynaform.cli import get_settings
    return ContextStore(get_settings().data_dir)


def _make_context(roll_number: str, name: str) -> SessionContext:
    roll_number = roll_number.strip()
    if not roll_number:
        print_error("Roll number is required")
        raise typer.Exit(1)
    return SessionContext(roll_number=roll_number, name=name.strip())


def register_user(roll_number: str, name: str) -> None:
    """Registra al usuario en el servicio."""
    context = _make_context(roll_number, name)
    try:
        get_client().create_user(context)
    except DynaformError as exc:
        print_error(str(exc))
        raise typer.Exit(1)
    print_success("Registration successful! You can now login.")


def login_user(roll_number: str, name: str) -> None:
    """Registra o identifica al usuario, verifica su formulario y guarda la sesión."""
    context = _make_context(roll_number, name)
    try:
        schema = get_client().login(context)
    except DynaformError as exc:
        print_error(str(exc))
        raise typer.Exit(1)

    path = get_context_store().save(context)
    print_header("SESSION STARTED", f"Saved to {path}")
    print_field("Roll number", context.roll_number)
    if context.name:
        print_field("Name", context.name)
    print_field("Form", schema.title or "(untitled)")
    print_field("Sections", len(schema.sections))
    print_info("Run 'dynaform fill' to complete the form.")


def logout_user() -> None:
    """Elimina la sesión guardada."""
    if get_context_store().clear():
        print_success("Session closed")
    else:
        print_info("No active session")
