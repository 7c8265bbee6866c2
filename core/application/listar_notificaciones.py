from dataclasses import dataclass

from core.domain.errors import ValidacionError
from core.domain.models.notificacion import Notificacion
from core.domain.models.usuario import Actor
from core.domain.ports.notificacion_repository import NotificacionRepository

LIMITE_POR_DEFECTO = 20
LIMITE_NO_LEIDAS = 10


@dataclass(slots=True)
class ListarNotificacionesCommand:
    leida: bool | None = None
    limit: int = LIMITE_POR_DEFECTO


@dataclass(slots=True)
class ListadoNotificaciones:
    notificaciones: list[Notificacion]
    no_leidas: int


class ListarNotificacionesUseCase:
    def __init__(self, repository: NotificacionRepository) -> None:
        self._repository = repository

    def execute(
        self, actor: Actor, cmd: ListarNotificacionesCommand | None = None
    ) -> ListadoNotificaciones:
        cmd = cmd or ListarNotificacionesCommand()
        if cmd.limit < 1:
            raise ValidacionError({"limit": "El límite debe ser mayor que cero"})

        notificaciones = self._repository.listar_por_usuario(
            actor.id, leida=cmd.leida, limit=cmd.limit
        )
        return ListadoNotificaciones(
            notificaciones=notificaciones,
            no_leidas=self._repository.contar_no_leidas(actor.id),
        )


class ListarNoLeidasUseCase:
    def __init__(self, repository: NotificacionRepository) -> None:
        self._repository = repository

    def execute(self, actor: Actor) -> list[Notificacion]:
        return self._repository.listar_por_usuario(
            actor.id, leida=False, limit=LIMITE_NO_LEIDAS
        )


class ContarNoLeidasUseCase:
    def __init__(self, repository: NotificacionRepository) -> None:
        self._repository = repository

    def execute(self, actor: Actor) -> int:
        return self._repository.contar_no_leidas(actor.id)
