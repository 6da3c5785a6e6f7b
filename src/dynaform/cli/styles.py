"""
Estilo de las preguntas de questionary, derivado del tema activo.
"""

from questionary import Style

from dynaform.cli.theme import get_palette


def get_prompt_style() -> Style:
    """
    Estilo de questionary para el tema activo.

    Se construye en cada llamada para respetar el tema elegido con --theme.
    """
    p = get_palette()
    return Style([
        ("qmark", f"fg:{p.accent} bold"),
        ("question", "bold"),
        ("answer", f"fg:{p.value} bold"),
        ("pointer", f"fg:{p.accent} bold"),
        ("highlighted", f"fg:{p.primary} bold"),
        ("selected", f"fg:{p.success}"),         # Opciones marcadas en checkbox
        ("instruction", f"fg:{p.muted} italic"),
        ("validation-toolbar", f"fg:{p.error} bold"),  # Fecha con formato inválido
        ("text", ""),
        ("separator", f"fg:{p.border}"),
    ])
