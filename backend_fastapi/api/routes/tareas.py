from uuid import UUID

from fastapi import APIRouter, Depends, status

from backend_fastapi.api.deps import (
    actor_actual,
    cambiar_estado_tarea_use_case,
    crear_tarea_use_case,
    editar_tarea_use_case,
    eliminar_tarea_use_case,
    listar_tareas_use_case,
    obtener_tarea_use_case,
)
from backend_fastapi.api.schemas import (
    CambiarEstadoRequest,
    CrearTareaRequest,
    EditarTareaRequest,
    RespuestaMensaje,
    RespuestaTarea,
    RespuestaTareas,
    TareaOut,
)
from core.application.cambiar_estado_tarea import CambiarEstadoTareaUseCase
from core.application.crear_tarea import CrearTareaUseCase
from core.application.editar_tarea import EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaCommand, EliminarTareaUseCase
from core.application.listar_tareas import ListarTareasCommand, ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase
from core.domain.models.tarea import Tarea
from core.domain.models.usuario import Actor

router = APIRouter(prefix="/tareas", tags=["tareas"])


def _listado(tareas: list[Tarea]) -> RespuestaTareas:
    return RespuestaTareas(
        tareas=[TareaOut.model_validate(t) for t in tareas], total=len(tareas)
    )


@router.get(
    "",
    response_model=RespuestaTareas,
    summary="Listar las tareas visibles para el usuario",
)
def listar_tareas(
    actor: Actor = Depends(actor_actual),
    use_case: ListarTareasUseCase = Depends(listar_tareas_use_case),
) -> RespuestaTareas:
    """
    Obtiene las tareas donde el usuario es responsable o creador
    (todas, si es administrador), las más recientes primero.
    """
    return _listado(use_case.execute(actor))


@router.get(
    "/estado/{estado}",
    response_model=RespuestaTareas,
    summary="Listar tareas filtradas por estado",
)
def listar_tareas_por_estado(
    estado: str,
    actor: Actor = Depends(actor_actual),
    use_case: ListarTareasUseCase = Depends(listar_tareas_use_case),
) -> RespuestaTareas:
    """
    - **estado**: Pendiente, En_progreso, Completada o Cancelada.
    """
    return _listado(use_case.execute(actor, ListarTareasCommand(estado=estado)))


@router.get(
    "/{tarea_id}",
    response_model=RespuestaTarea,
    summary="Obtener una tarea",
)
def obtener_tarea(
    tarea_id: UUID,
    actor: Actor = Depends(actor_actual),
    use_case: ObtenerTareaUseCase = Depends(obtener_tarea_use_case),
) -> RespuestaTarea:
    return RespuestaTarea(tarea=TareaOut.model_validate(use_case.execute(actor, tarea_id)))


@router.post(
    "",
    response_model=RespuestaTarea,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def crear_tarea(
    body: CrearTareaRequest,
    actor: Actor = Depends(actor_actual),
    use_case: CrearTareaUseCase = Depends(crear_tarea_use_case),
) -> RespuestaTarea:
    """
    Crea una nueva tarea y notifica al responsable si no es quien la crea.

    - **titulo**: Título de la tarea (mínimo 3 caracteres).
    - **descripcion**: Descripción de la tarea.
    - **fechaLimite**: Fecha límite.
    - **responsable**: Usuario asignado (por defecto, el creador).
    - **prioridad**: Baja, Media, Alta o Urgente (por defecto Media).
    """
    resultado = use_case.execute(actor, body.to_command())
    return RespuestaTarea(
        tarea=TareaOut.model_validate(resultado.tarea),
        msg="Tarea creada exitosamente",
    )


@router.put(
    "/{tarea_id}",
    response_model=RespuestaTarea,
    summary="Editar una tarea existente",
)
def editar_tarea(
    tarea_id: UUID,
    body: EditarTareaRequest,
    actor: Actor = Depends(actor_actual),
    use_case: EditarTareaUseCase = Depends(editar_tarea_use_case),
) -> RespuestaTarea:
    """
    Modifica los campos enviados; los omitidos conservan su valor.
    Solo el creador, el responsable o un administrador pueden editarla.
    """
    resultado = use_case.execute(actor, tarea_id, body.to_command())
    return RespuestaTarea(
        tarea=TareaOut.model_validate(resultado.tarea),
        msg="Tarea actualizada exitosamente",
    )


@router.patch(
    "/{tarea_id}/estado",
    response_model=RespuestaTarea,
    summary="Cambiar el estado de una tarea",
)
def cambiar_estado_tarea(
    tarea_id: UUID,
    body: CambiarEstadoRequest,
    actor: Actor = Depends(actor_actual),
    use_case: CambiarEstadoTareaUseCase = Depends(cambiar_estado_tarea_use_case),
) -> RespuestaTarea:
    """
    - **estado**: Pendiente, En_progreso, Completada o Cancelada.
    """
    resultado = use_case.execute(actor, tarea_id, body.to_command())
    return RespuestaTarea(
        tarea=TareaOut.model_validate(resultado.tarea),
        msg="Estado actualizado exitosamente",
    )


@router.delete(
    "/{tarea_id}",
    response_model=RespuestaMensaje,
    summary="Eliminar una tarea",
)
def eliminar_tarea(
    tarea_id: UUID,
    actor: Actor = Depends(actor_actual),
    use_case: EliminarTareaUseCase = Depends(eliminar_tarea_use_case),
) -> RespuestaMensaje:
    """
    Elimina la tarea y todas sus notificaciones.
    Solo el creador o un administrador pueden eliminarla.
    """
    use_case.execute(actor, EliminarTareaCommand(id=tarea_id))
    return RespuestaMensaje(msg="Tarea eliminada exitosamente")
