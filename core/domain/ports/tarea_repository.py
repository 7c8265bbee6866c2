from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from core.domain.models.tarea import EstadoTarea, Tarea


class TareaRepository(ABC):
    """Los listados se devuelven ordenados por fecha de creación descendente."""

    @abstractmethod
    def list(self, estado: EstadoTarea | None = None) -> List[Tarea]:
        raise NotImplementedError

    @abstractmethod
    def listar_por_usuario(
        self, usuario_id: UUID, estado: EstadoTarea | None = None
    ) -> List[Tarea]:
        """Tareas donde el usuario es responsable o creador."""
        raise NotImplementedError

    @abstractmethod
    def save(self, tarea: Tarea) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, tarea_id: UUID) -> Tarea | None:
        raise NotImplementedError

    @abstractmethod
    def eliminar(self, tarea_id: UUID) -> None:
        raise NotImplementedError
