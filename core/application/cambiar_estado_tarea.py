import logging
from dataclasses import dataclass, replace
from uuid import UUID

from core.application.notificar import NotificacionFanout, ResultadoMutacion
from core.application.obtener_tarea import buscar_tarea
from core.domain.eventos import derivar_cambio_estado
from core.domain.models.tarea import EstadoTarea
from core.domain.models.usuario import Actor
from core.domain.permisos import exigir_actualizacion
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.transiciones import transicionar
from core.domain.validacion import parsear_estado

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CambiarEstadoCommand:
    estado: EstadoTarea | str


class CambiarEstadoTareaUseCase:
    def __init__(
        self, repository: TareaRepository, fanout: NotificacionFanout
    ) -> None:
        self._repository = repository
        self._fanout = fanout

    def execute(
        self, actor: Actor, tarea_id: UUID, cmd: CambiarEstadoCommand
    ) -> ResultadoMutacion:
        tarea = buscar_tarea(self._repository, tarea_id)
        exigir_actualizacion(actor, tarea)
        solicitado = parsear_estado(cmd.estado)

        transicion = transicionar(tarea.estado, solicitado)
        if not transicion.es_cambio:
            logger.debug(f"Tarea {tarea.id} ya está en {solicitado.value}")
            return ResultadoMutacion(tarea=tarea)

        anterior = tarea.estado
        tarea = replace(tarea, estado=transicion.estado)
        self._repository.save(tarea)
        logger.info(
            f"Tarea {tarea.id}: {anterior.value} -> {tarea.estado.value} ({actor.id})"
        )

        fanout = self._fanout.emitir(derivar_cambio_estado(tarea, transicion, actor))
        return ResultadoMutacion(tarea=tarea, fanout=fanout)
