"""
Configuración de dynaform.

Orden de precedencia: valores por defecto < ~/.dynaform/config.json <
variables de entorno (DYNAFORM_BASE_URL, DYNAFORM_TIMEOUT) < opciones CLI.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from dynaform.errors import DynaformError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://dynamic-form-generator-9rl7.onrender.com"
DEFAULT_DATA_DIR = Path.home() / ".dynaform"
CONFIG_FILENAME = "config.json"


class Settings(BaseModel):
    """Parámetros de conexión y presentación."""
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = Field(default=30.0, gt=0)
    data_dir: Path = DEFAULT_DATA_DIR
    theme: str = "default"

    @field_validator("base_url")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v


def load_settings(path: Optional[Path] = None, data_dir: Optional[Path] = None) -> Settings:
    """
    Carga la configuración.

    Args:
        path: Archivo de configuración. Default: <data_dir>/config.json
        data_dir: Directorio de datos. Default: ~/.dynaform/

    Returns:
        Settings con archivo y entorno aplicados
    """
    data_dir = Path(data_dir) if data_dir is not None else DEFAULT_DATA_DIR
    path = Path(path) if path is not None else data_dir / CONFIG_FILENAME

    values: dict = {"data_dir": data_dir}
    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                values.update(json.load(f))
        except json.JSONDecodeError as exc:
            raise DynaformError(f"Invalid configuration in {path}: {exc}") from exc
        logger.debug("Configuración leída de %s", path)

    if os.environ.get("DYNAFORM_BASE_URL"):
        values["base_url"] = os.environ["DYNAFORM_BASE_URL"]
    if os.environ.get("DYNAFORM_TIMEOUT"):
        values["timeout_s"] = os.environ["DYNAFORM_TIMEOUT"]

    try:
        return Settings(**values)
    except ValidationError as exc:
        raise DynaformError(f"Invalid configuration: {exc}") from exc
