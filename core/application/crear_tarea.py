import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from uuid import UUID, uuid4

from core.application.notificar import NotificacionFanout, ResultadoMutacion
from core.domain.errors import NoEncontradoError
from core.domain.eventos import derivar_creacion
from core.domain.models.tarea import PrioridadTarea, Tarea
from core.domain.models.usuario import Actor
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.ports.usuario_repository import UsuarioRepository
from core.domain.validacion import normalizar_campos

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CrearTareaCommand:
    titulo: str
    descripcion: str
    fecha_limite: datetime | str
    responsable: UUID | str | None = None
    prioridad: PrioridadTarea | str = PrioridadTarea.MEDIA


class CrearTareaUseCase:
    def __init__(
        self,
        repository: TareaRepository,
        usuarios: UsuarioRepository,
        fanout: NotificacionFanout,
    ) -> None:
        self._repository = repository
        self._usuarios = usuarios
        self._fanout = fanout

    def execute(self, actor: Actor, cmd: CrearTareaCommand) -> ResultadoMutacion:
        campos = normalizar_campos(asdict(cmd))

        responsable = campos.get("responsable")
        if responsable is None:
            responsable = actor.id
        elif self._usuarios.get(responsable) is None:
            raise NoEncontradoError("Usuario", responsable)

        tarea = Tarea(
            id=uuid4(),
            titulo=campos["titulo"],
            descripcion=campos["descripcion"],
            fecha_limite=campos["fecha_limite"],
            responsable=responsable,
            creado_por=actor.id,
            prioridad=campos.get("prioridad", PrioridadTarea.MEDIA),
        )
        self._repository.save(tarea)
        logger.info(f"Tarea {tarea.id} creada por {actor.id}")

        fanout = self._fanout.emitir(derivar_creacion(tarea, actor))
        return ResultadoMutacion(tarea=tarea, fanout=fanout)
