"""
Contexto de sesión del usuario.

Guarda el número de matrícula (roll number) y el nombre con que el
usuario se registró, para que `dynaform fill` pueda pedir su formulario
sin volver a preguntar.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

CONTEXT_FILENAME = "session.json"


class SessionContext(BaseModel):
    """Identidad del usuario frente al servicio de formularios."""
    model_config = ConfigDict(populate_by_name=True)

    roll_number: str = Field(alias="rollNumber", min_length=1)
    name: str = ""

    def to_payload(self) -> dict:
        """Cuerpo JSON que espera el servicio."""
        return self.model_dump(by_alias=True)


class ContextStore:
    """Persiste el contexto de sesión en disco."""

    def __init__(self, data_dir: Path):
        """
        Args:
            data_dir: Directorio de datos (ej: ~/.dynaform/)
        """
        self.data_dir = Path(data_dir)

    @property
    def path(self) -> Path:
        return self.data_dir / CONTEXT_FILENAME

    def save(self, context: SessionContext) -> Path:
        """Guarda el contexto."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(context.to_payload(), f, indent=2, ensure_ascii=False)
        logger.debug("Contexto guardado en %s", self.path)
        return self.path

    def load(self) -> Optional[SessionContext]:
        """Carga el contexto, o None si no hay sesión guardada o es ilegible."""
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return SessionContext.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Contexto ilegible en %s: %s", self.path, exc)
            return None

    def clear(self) -> bool:
        """Elimina el contexto guardado. Retorna True si existía."""
        if self.path.exists():
            self.path.unlink()
            return True
        return False
