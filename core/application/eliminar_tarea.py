import logging
from dataclasses import dataclass
from uuid import UUID

from core.application.obtener_tarea import buscar_tarea
from core.domain.models.usuario import Actor
from core.domain.permisos import exigir_eliminacion
from core.domain.ports.notificacion_repository import NotificacionRepository
from core.domain.ports.tarea_repository import TareaRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EliminarTareaCommand:
    id: UUID


class EliminarTareaUseCase:
    def __init__(
        self,
        repository: TareaRepository,
        notificaciones: NotificacionRepository,
    ) -> None:
        self._repository = repository
        self._notificaciones = notificaciones

    def execute(self, actor: Actor, cmd: EliminarTareaCommand) -> None:
        tarea = buscar_tarea(self._repository, cmd.id)
        exigir_eliminacion(actor, tarea)

        self._repository.eliminar(cmd.id)
        eliminadas = self._notificaciones.eliminar_por_tarea(cmd.id)
        logger.info(
            f"Tarea {cmd.id} eliminada por {actor.id} "
            f"junto con {eliminadas} notificaciones"
        )
