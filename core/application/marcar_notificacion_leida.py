from dataclasses import replace
from uuid import UUID

from core.domain.errors import NoEncontradoError
from core.domain.models.notificacion import Notificacion
from core.domain.models.usuario import Actor
from core.domain.permisos import exigir_destinatario
from core.domain.ports.notificacion_repository import NotificacionRepository


def buscar_notificacion(
    repository: NotificacionRepository, notificacion_id: UUID
) -> Notificacion:
    notificacion = repository.get(notificacion_id)
    if notificacion is None:
        raise NoEncontradoError("Notificación", notificacion_id)
    return notificacion


class MarcarLeidaUseCase:
    def __init__(self, repository: NotificacionRepository) -> None:
        self._repository = repository

    def execute(self, actor: Actor, notificacion_id: UUID) -> Notificacion:
        notificacion = buscar_notificacion(self._repository, notificacion_id)
        exigir_destinatario(actor, notificacion)

        if notificacion.leida:
            return notificacion
        notificacion = replace(notificacion, leida=True)
        self._repository.save(notificacion)
        return notificacion


class MarcarTodasLeidasUseCase:
    def __init__(self, repository: NotificacionRepository) -> None:
        self._repository = repository

    def execute(self, actor: Actor) -> int:
        return self._repository.marcar_todas_leidas(actor.id)
