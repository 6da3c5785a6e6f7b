"""
Comandos de formulario: fill, show, check.
"""

import json
from pathlib import Path
from typing import Optional

import typer

from dynaform.errors import DynaformError, SchemaError
from dynaform.schema import FormSchema, load_schema_file
from dynaform.session import FormSession
from dynaform.cli.auth import get_client, get_context_store
from dynaform.cli.theme import (
    get_console,
    print_answers,
    print_error,
    print_failure,
    print_header,
    print_schema,
    print_success,
)


def load_form(schema_file: Optional[Path]) -> FormSchema:
    """
    Obtiene el esquema desde un archivo o desde el servicio.

    Sin archivo, usa la sesión guardada por `dynaform login`. Cualquier
    fallo termina el comando con un panel de error (no hay formulario
    parcial).
    """
    try:
        if schema_file is not None:
            return load_schema_file(schema_file)

        context = get_context_store().load()
        if context is None:
            print_error("No active session. Run 'dynaform login ROLL NAME' first.")
            raise typer.Exit(1)
        return get_client().get_form(context.roll_number)
    except SchemaError as exc:
        print_failure(f"Cannot render form.\n{exc}", title="FORM UNAVAILABLE")
        raise typer.Exit(1)


def save_answers(answers: dict, output: Path) -> Path:
    """Guarda las respuestas como JSON."""
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        json.dump(answers, f, indent=2, ensure_ascii=False)
    return output


def fill_form(schema_file: Optional[Path], output: Optional[Path]) -> None:
    """Recorre el formulario y entrega las respuestas."""
    from dynaform.cli.walkthrough import run_walkthrough

    schema = load_form(schema_file)
    print_header(schema.title or "Form", f"{len(schema.sections)} section(s)")

    def on_submit(answers: dict) -> None:
        print_answers(schema, answers)
        get_console().print_json(data=answers)
        if output is not None:
            try:
                path = save_answers(answers, output)
            except OSError as exc:
                print_error(f"Cannot save answers to {output}: {exc}")
                raise typer.Exit(1)
            print_success(f"Answers saved to {path}")

    session = FormSession(schema, on_submit=on_submit)
    try:
        answers = run_walkthrough(session)
    except DynaformError as exc:
        print_error(str(exc))
        raise typer.Exit(1)

    if answers is None:
        raise typer.Exit(1)
    print_success("Form submitted")


def show_form(schema_file: Optional[Path]) -> None:
    """Imprime la estructura del formulario."""
    print_schema(load_form(schema_file))


def check_schema(schema_file: Path) -> None:
    """Valida un archivo de esquema."""
    try:
        schema = load_schema_file(schema_file)
    except SchemaError as exc:
        print_error(f"Invalid schema: {exc}")
        raise typer.Exit(1)
    print_success(
        f"{schema_file}: OK ({len(schema.sections)} sections, {schema.count_fields()} fields)"
    )
