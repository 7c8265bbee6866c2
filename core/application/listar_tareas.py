from dataclasses import dataclass

from core.domain.models.tarea import EstadoTarea, Tarea
from core.domain.models.usuario import Actor
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.validacion import parsear_estado


@dataclass(slots=True)
class ListarTareasCommand:
    estado: EstadoTarea | str | None = None


class ListarTareasUseCase:
    """
    Los administradores ven todas las tareas; el resto, aquellas en las
    que figuran como responsable o como creador.
    """

    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(
        self, actor: Actor, cmd: ListarTareasCommand | None = None
    ) -> list[Tarea]:
        cmd = cmd or ListarTareasCommand()
        estado = parsear_estado(cmd.estado) if cmd.estado is not None else None

        if actor.es_admin:
            return self._repository.list(estado)
        return self._repository.listar_por_usuario(actor.id, estado)
