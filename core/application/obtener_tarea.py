from uuid import UUID

from core.domain.errors import NoEncontradoError
from core.domain.models.tarea import Tarea
from core.domain.models.usuario import Actor
from core.domain.permisos import exigir_lectura
from core.domain.ports.tarea_repository import TareaRepository


def buscar_tarea(repository: TareaRepository, tarea_id: UUID) -> Tarea:
    tarea = repository.get(tarea_id)
    if tarea is None:
        raise NoEncontradoError("Tarea", tarea_id)
    return tarea


class ObtenerTareaUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, actor: Actor, tarea_id: UUID) -> Tarea:
        tarea = buscar_tarea(self._repository, tarea_id)
        exigir_lectura(actor, tarea)
        return tarea
