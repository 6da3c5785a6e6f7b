"""
Presentación de la CLI de dynaform con Rich.

- palette: paletas y tema activo (CLITheme)
- styled: objetos Text/Panel estilizados
- printing: impresión directa (mensajes, progreso de sección)
- tables: estructura del formulario y respuestas enviadas
"""

from dynaform.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
    set_theme_by_name,
)
from dynaform.cli.theme.styled import (
    styled_header,
    styled_label,
    styled_success,
    styled_warning,
    styled_error,
    styled_info,
    styled_field_error,
    styled_failure_panel,
)
from dynaform.cli.theme.printing import (
    print_header,
    print_step,
    print_field,
    print_field_error,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_failure,
    print_section,
)
from dynaform.cli.theme.tables import (
    create_results_table,
    create_section_table,
    print_schema,
    print_answers,
)

__all__ = [
    "ThemeName",
    "ColorPalette",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    "set_theme_by_name",
    "styled_header",
    "styled_label",
    "styled_success",
    "styled_warning",
    "styled_error",
    "styled_info",
    "styled_field_error",
    "styled_failure_panel",
    "print_header",
    "print_step",
    "print_field",
    "print_field_error",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_failure",
    "print_section",
    "create_results_table",
    "create_section_table",
    "print_schema",
    "print_answers",
]
