import logging
from dataclasses import asdict, dataclass, replace
from datetime import datetime
from uuid import UUID

from core.application.notificar import NotificacionFanout, ResultadoMutacion
from core.application.obtener_tarea import buscar_tarea
from core.domain.errors import NoEncontradoError
from core.domain.eventos import derivar_edicion
from core.domain.models.tarea import EstadoTarea, PrioridadTarea
from core.domain.models.usuario import Actor
from core.domain.permisos import exigir_actualizacion
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.ports.usuario_repository import UsuarioRepository
from core.domain.validacion import normalizar_campos

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EditarTareaCommand:
    """Los campos en None se conservan con su valor actual."""

    titulo: str | None = None
    descripcion: str | None = None
    fecha_limite: datetime | str | None = None
    responsable: UUID | str | None = None
    estado: EstadoTarea | str | None = None
    prioridad: PrioridadTarea | str | None = None


class EditarTareaUseCase:
    def __init__(
        self,
        repository: TareaRepository,
        usuarios: UsuarioRepository,
        fanout: NotificacionFanout,
        notificar_actualizacion_en_reasignacion: bool = True,
    ) -> None:
        self._repository = repository
        self._usuarios = usuarios
        self._fanout = fanout
        self._notificar_actualizacion_en_reasignacion = (
            notificar_actualizacion_en_reasignacion
        )

    def execute(
        self, actor: Actor, tarea_id: UUID, cmd: EditarTareaCommand
    ) -> ResultadoMutacion:
        tarea = buscar_tarea(self._repository, tarea_id)
        exigir_actualizacion(actor, tarea)

        cambios = normalizar_campos(asdict(cmd), parcial=True)
        responsable_anterior = tarea.responsable
        nuevo_responsable = cambios.get("responsable")
        if (
            nuevo_responsable is not None
            and nuevo_responsable != responsable_anterior
            and self._usuarios.get(nuevo_responsable) is None
        ):
            raise NoEncontradoError("Usuario", nuevo_responsable)

        tarea = replace(tarea, **cambios)
        self._repository.save(tarea)
        logger.info(
            f"Tarea {tarea.id} actualizada por {actor.id} "
            f"(campos: {', '.join(sorted(cambios)) or 'ninguno'})"
        )

        solicitudes = derivar_edicion(
            tarea,
            responsable_anterior,
            actor,
            self._notificar_actualizacion_en_reasignacion,
        )
        return ResultadoMutacion(tarea=tarea, fanout=self._fanout.emitir(solicitudes))
