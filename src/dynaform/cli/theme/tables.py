"""
Funciones para crear e imprimir tablas Rich.
"""

from collections.abc import Mapping

from rich.table import Table
from rich.text import Text
from rich import box

from dynaform.cli.theme.palette import get_console, get_palette
from dynaform.schema import FieldDef, FormSchema, Section
from dynaform.validation import format_answer


def create_results_table(
    title: str = None,
    columns: list[tuple[str, str]] = None,  # [(nombre, justify), ...]
) -> Table:
    """Crea una tabla estilizada."""
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )

    if columns:
        for name, justify in columns:
            table.add_column(name, justify=justify)

    return table


def _constraints(field: FieldDef) -> str:
    """Resumen de restricciones de un campo."""
    parts = []
    if field.min_length is not None:
        parts.append(f"min {field.min_length}")
    if field.max_length is not None:
        parts.append(f"max {field.max_length}")
    if field.options:
        parts.append(", ".join(opt.value for opt in field.options))
    return "; ".join(parts) if parts else "-"


def create_section_table(section: Section, number: int) -> Table:
    """Crea la tabla de campos de una sección."""
    p = get_palette()
    table = create_results_table(
        title=f"{number}. {section.title}",
        columns=[
            ("fieldId", "left"),
            ("Type", "left"),
            ("Label", "left"),
            ("Req.", "center"),
            ("Constraints", "left"),
        ],
    )
    for fld in section.fields:
        req = Text("yes", style=f"bold {p.required}") if fld.required else Text("-", style=p.muted)
        table.add_row(fld.field_id, fld.type.value, fld.label, req, _constraints(fld))
    return table


def print_schema(schema: FormSchema) -> None:
    """Imprime la estructura completa de un formulario."""
    console = get_console()
    p = get_palette()
    console.print()
    console.print(schema.title or "(untitled)", style=f"bold {p.primary}", markup=False)
    console.print(
        f"{len(schema.sections)} sections, {schema.count_fields()} fields",
        style=p.muted,
    )
    for i, section in enumerate(schema.sections, start=1):
        console.print()
        if section.description:
            console.print(section.description, style=p.muted, markup=False)
        console.print(create_section_table(section, i))


def print_answers(schema: FormSchema, answers: Mapping) -> None:
    """Imprime las respuestas enviadas, agrupadas por sección."""
    console = get_console()
    table = create_results_table(
        title=schema.title or None,
        columns=[("Section", "left"), ("Field", "left"), ("Answer", "left")],
    )
    for section in schema.sections:
        for fld in section.fields:
            table.add_row(
                section.title,
                fld.label,
                format_answer(fld, answers.get(fld.field_id)),
            )
    console.print(table)
