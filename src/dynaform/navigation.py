"""
Máquina de estados de navegación entre secciones.

Estados: índice de sección 0 <= i < N, más el estado terminal SUBMITTED.
El navegador no valida por sí mismo: recibe el resultado de la validación
de la sección activa y decide la transición.
"""

import logging
from enum import Enum

from dynaform.errors import NavigationError

logger = logging.getLogger(__name__)


class NavResult(Enum):
    """Resultado de una transición."""
    ADVANCED = "advanced"    # Pasó a la sección siguiente
    RETREATED = "retreated"  # Volvió a la sección anterior
    BLOCKED = "blocked"      # La validación impidió la transición
    SUBMITTED = "submitted"  # Formulario enviado (estado terminal)


class Navigator:
    """Controlador de navegación entre secciones."""

    def __init__(self, section_count: int):
        if section_count < 1:
            raise ValueError("A form needs at least one section")
        self.section_count = section_count
        self.index = 0
        self.submitted = False

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.section_count - 1

    @property
    def can_next(self) -> bool:
        return not self.submitted and not self.is_last

    @property
    def can_prev(self) -> bool:
        return not self.submitted and not self.is_first

    @property
    def can_submit(self) -> bool:
        return not self.submitted and self.is_last

    def next(self, valid: bool) -> NavResult:
        """Avanza a la sección siguiente si la sección activa es válida."""
        if not self.can_next:
            raise NavigationError(self.unavailable_reason("next"))
        if not valid:
            logger.debug("Avance bloqueado en sección %d", self.index)
            return NavResult.BLOCKED
        self.index += 1
        logger.debug("Sección %d -> %d", self.index - 1, self.index)
        return NavResult.ADVANCED

    def prev(self) -> NavResult:
        """Vuelve a la sección anterior, sin validar."""
        if not self.can_prev:
            raise NavigationError(self.unavailable_reason("prev"))
        self.index -= 1
        logger.debug("Sección %d -> %d", self.index + 1, self.index)
        return NavResult.RETREATED

    def submit(self, valid: bool) -> NavResult:
        """Pasa al estado terminal si la última sección es válida."""
        if not self.can_submit:
            raise NavigationError(self.unavailable_reason("submit"))
        if not valid:
            logger.debug("Envío bloqueado en sección %d", self.index)
            return NavResult.BLOCKED
        self.submitted = True
        logger.debug("Formulario enviado desde sección %d", self.index)
        return NavResult.SUBMITTED

    def unavailable_reason(self, action: str) -> str:
        if self.submitted:
            return f"Cannot {action}: form already submitted"
        return (
            f"Cannot {action} from section {self.index + 1} of {self.section_count}"
        )
