"""
Almacén de respuestas del formulario.

Mapea fieldId -> valor. El valor es un string para los campos escalares
(text, email, tel, textarea, date, dropdown, radio) y una lista ordenada
de strings para checkbox. Una clave ausente significa "sin respuesta".
"""

from collections.abc import Iterator, Mapping
from typing import Optional, Union

AnswerValue = Union[str, list[str]]
ErrorMap = dict[str, str]


def is_empty(value: Optional[AnswerValue]) -> bool:
    """True si el valor cuenta como respuesta vacía (None, "" o lista vacía)."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    return len(value) == 0


class AnswerStore(Mapping):
    """Respuestas de una sesión de formulario."""

    def __init__(self, seed: Optional[Mapping[str, AnswerValue]] = None):
        self._values: dict[str, AnswerValue] = {}
        if seed:
            for field_id, value in seed.items():
                self.set(field_id, value)

    def __getitem__(self, field_id: str) -> AnswerValue:
        return self._values[field_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"AnswerStore({self._values!r})"

    def set(self, field_id: str, value: AnswerValue) -> None:
        """Guarda un valor, reemplazando cualquier valor anterior."""
        # Copia de listas para que nadie comparta la lista almacenada
        self._values[field_id] = list(value) if isinstance(value, (list, tuple)) else value

    def to_dict(self) -> dict[str, AnswerValue]:
        """Copia independiente de las respuestas."""
        return {
            key: list(value) if isinstance(value, list) else value
            for key, value in self._values.items()
        }
