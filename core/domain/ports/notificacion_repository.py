from abc import ABC, abstractmethod
from uuid import UUID

from core.domain.models.notificacion import Notificacion


class NotificacionRepository(ABC):
    @abstractmethod
    def save(self, notificacion: Notificacion) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, notificacion_id: UUID) -> Notificacion | None:
        raise NotImplementedError

    @abstractmethod
    def listar_por_usuario(
        self,
        usuario_id: UUID,
        leida: bool | None = None,
        limit: int | None = None,
    ) -> list[Notificacion]:
        """Notificaciones del destinatario, las más recientes primero."""
        raise NotImplementedError

    @abstractmethod
    def contar_no_leidas(self, usuario_id: UUID) -> int:
        raise NotImplementedError

    @abstractmethod
    def marcar_todas_leidas(self, usuario_id: UUID) -> int:
        raise NotImplementedError

    @abstractmethod
    def eliminar(self, notificacion_id: UUID) -> None:
        raise NotImplementedError

    @abstractmethod
    def eliminar_por_tarea(self, tarea_id: UUID) -> int:
        raise NotImplementedError

    @abstractmethod
    def eliminar_leidas(self, usuario_id: UUID) -> int:
        raise NotImplementedError
