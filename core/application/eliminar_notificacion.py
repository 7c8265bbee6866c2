import logging
from uuid import UUID

from core.application.marcar_notificacion_leida import buscar_notificacion
from core.domain.models.usuario import Actor
from core.domain.permisos import exigir_destinatario
from core.domain.ports.notificacion_repository import NotificacionRepository

logger = logging.getLogger(__name__)


class EliminarNotificacionUseCase:
    def __init__(self, repository: NotificacionRepository) -> None:
        self._repository = repository

    def execute(self, actor: Actor, notificacion_id: UUID) -> None:
        notificacion = buscar_notificacion(self._repository, notificacion_id)
        exigir_destinatario(actor, notificacion)
        self._repository.eliminar(notificacion_id)


class LimpiarLeidasUseCase:
    def __init__(self, repository: NotificacionRepository) -> None:
        self._repository = repository

    def execute(self, actor: Actor) -> int:
        eliminadas = self._repository.eliminar_leidas(actor.id)
        logger.info(f"{eliminadas} notificaciones leídas eliminadas para {actor.id}")
        return eliminadas
