from uuid import UUID

from fastapi import APIRouter, Depends, Query

from backend_fastapi.api.deps import (
    actor_actual,
    contar_no_leidas_use_case,
    eliminar_notificacion_use_case,
    limpiar_leidas_use_case,
    listar_no_leidas_use_case,
    listar_notificaciones_use_case,
    marcar_leida_use_case,
    marcar_todas_leidas_use_case,
)
from backend_fastapi.api.schemas import (
    NotificacionOut,
    RespuestaActualizadas,
    RespuestaContador,
    RespuestaEliminadas,
    RespuestaMensaje,
    RespuestaNoLeidas,
    RespuestaNotificacion,
    RespuestaNotificaciones,
)
from core.application.eliminar_notificacion import (
    EliminarNotificacionUseCase,
    LimpiarLeidasUseCase,
)
from core.application.listar_notificaciones import (
    LIMITE_POR_DEFECTO,
    ContarNoLeidasUseCase,
    ListarNoLeidasUseCase,
    ListarNotificacionesCommand,
    ListarNotificacionesUseCase,
)
from core.application.marcar_notificacion_leida import (
    MarcarLeidaUseCase,
    MarcarTodasLeidasUseCase,
)
from core.domain.models.usuario import Actor

router = APIRouter(prefix="/notificaciones", tags=["notificaciones"])


@router.get("", response_model=RespuestaNotificaciones, summary="Listar notificaciones")
def listar_notificaciones(
    leida: bool | None = Query(default=None),
    limit: int = Query(default=LIMITE_POR_DEFECTO),
    actor: Actor = Depends(actor_actual),
    use_case: ListarNotificacionesUseCase = Depends(listar_notificaciones_use_case),
) -> RespuestaNotificaciones:
    """
    - **leida**: filtra por estado de lectura (opcional).
    - **limit**: máximo de resultados (por defecto 20).
    """
    listado = use_case.execute(actor, ListarNotificacionesCommand(leida=leida, limit=limit))
    return RespuestaNotificaciones(
        notificaciones=[NotificacionOut.model_validate(n) for n in listado.notificaciones],
        no_leidas=listado.no_leidas,
        total=len(listado.notificaciones),
    )


@router.get(
    "/no-leidas",
    response_model=RespuestaNoLeidas,
    summary="Últimas notificaciones no leídas",
)
def listar_no_leidas(
    actor: Actor = Depends(actor_actual),
    use_case: ListarNoLeidasUseCase = Depends(listar_no_leidas_use_case),
) -> RespuestaNoLeidas:
    notificaciones = use_case.execute(actor)
    return RespuestaNoLeidas(
        notificaciones=[NotificacionOut.model_validate(n) for n in notificaciones],
        total=len(notificaciones),
    )


@router.get(
    "/contador",
    response_model=RespuestaContador,
    summary="Número de notificaciones no leídas",
)
def contar_no_leidas(
    actor: Actor = Depends(actor_actual),
    use_case: ContarNoLeidasUseCase = Depends(contar_no_leidas_use_case),
) -> RespuestaContador:
    return RespuestaContador(no_leidas=use_case.execute(actor))


@router.patch(
    "/marcar-todas-leidas",
    response_model=RespuestaActualizadas,
    summary="Marcar todas las notificaciones como leídas",
)
def marcar_todas_leidas(
    actor: Actor = Depends(actor_actual),
    use_case: MarcarTodasLeidasUseCase = Depends(marcar_todas_leidas_use_case),
) -> RespuestaActualizadas:
    return RespuestaActualizadas(
        msg="Todas las notificaciones marcadas como leídas",
        actualizadas=use_case.execute(actor),
    )


@router.patch(
    "/{notificacion_id}/leida",
    response_model=RespuestaNotificacion,
    summary="Marcar una notificación como leída",
)
def marcar_leida(
    notificacion_id: UUID,
    actor: Actor = Depends(actor_actual),
    use_case: MarcarLeidaUseCase = Depends(marcar_leida_use_case),
) -> RespuestaNotificacion:
    notificacion = use_case.execute(actor, notificacion_id)
    return RespuestaNotificacion(
        notificacion=NotificacionOut.model_validate(notificacion),
        msg="Notificación marcada como leída",
    )


# Debe registrarse antes que DELETE /{notificacion_id}.
@router.delete(
    "/limpiar-leidas",
    response_model=RespuestaEliminadas,
    summary="Eliminar las notificaciones leídas",
)
def limpiar_leidas(
    actor: Actor = Depends(actor_actual),
    use_case: LimpiarLeidasUseCase = Depends(limpiar_leidas_use_case),
) -> RespuestaEliminadas:
    return RespuestaEliminadas(
        msg="Notificaciones leídas eliminadas", eliminadas=use_case.execute(actor)
    )


@router.delete(
    "/{notificacion_id}",
    response_model=RespuestaMensaje,
    summary="Eliminar una notificación",
)
def eliminar_notificacion(
    notificacion_id: UUID,
    actor: Actor = Depends(actor_actual),
    use_case: EliminarNotificacionUseCase = Depends(eliminar_notificacion_use_case),
) -> RespuestaMensaje:
    use_case.execute(actor, notificacion_id)
    return RespuestaMensaje(msg="Notificación eliminada exitosamente")
