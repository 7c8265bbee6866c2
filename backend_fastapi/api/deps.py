from fastapi import Depends, Header

from core.application.cambiar_estado_tarea import CambiarEstadoTareaUseCase
from core.application.crear_tarea import CrearTareaUseCase
from core.application.editar_tarea import EditarTareaUseCase
from core.application.eliminar_notificacion import (
    EliminarNotificacionUseCase,
    LimpiarLeidasUseCase,
)
from core.application.eliminar_tarea import EliminarTareaUseCase
from core.application.listar_notificaciones import (
    ContarNoLeidasUseCase,
    ListarNoLeidasUseCase,
    ListarNotificacionesUseCase,
)
from core.application.listar_tareas import ListarTareasUseCase
from core.application.marcar_notificacion_leida import (
    MarcarLeidaUseCase,
    MarcarTodasLeidasUseCase,
)
from core.application.notificar import NotificacionFanout
from core.application.obtener_tarea import ObtenerTareaUseCase
from core.domain.models.usuario import Actor
from core.domain.ports.notificacion_repository import NotificacionRepository
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.ports.usuario_repository import UsuarioRepository
from infrastructure.container import (
    get_notificacion_repository,
    get_proveedor_identidad,
    get_tarea_repository,
    get_usuario_repository,
    notificar_actualizacion_en_reasignacion,
)


# ── Repositorios ──────────────────────────────────────────────────────────────


def tarea_repository() -> TareaRepository:
    return get_tarea_repository()


def notificacion_repository() -> NotificacionRepository:
    return get_notificacion_repository()


def usuario_repository() -> UsuarioRepository:
    return get_usuario_repository()


# ── Identidad ─────────────────────────────────────────────────────────────────


def actor_actual(
    x_token: str | None = Header(default=None),
    usuarios: UsuarioRepository = Depends(usuario_repository),
) -> Actor:
    return get_proveedor_identidad(usuarios).resolver(x_token or "")


# ── Casos de uso: tareas ──────────────────────────────────────────────────────


def notificacion_fanout(
    notificaciones: NotificacionRepository = Depends(notificacion_repository),
) -> NotificacionFanout:
    return NotificacionFanout(repository=notificaciones)


def crear_tarea_use_case(
    tareas: TareaRepository = Depends(tarea_repository),
    usuarios: UsuarioRepository = Depends(usuario_repository),
    fanout: NotificacionFanout = Depends(notificacion_fanout),
) -> CrearTareaUseCase:
    return CrearTareaUseCase(repository=tareas, usuarios=usuarios, fanout=fanout)


def editar_tarea_use_case(
    tareas: TareaRepository = Depends(tarea_repository),
    usuarios: UsuarioRepository = Depends(usuario_repository),
    fanout: NotificacionFanout = Depends(notificacion_fanout),
) -> EditarTareaUseCase:
    return EditarTareaUseCase(
        repository=tareas,
        usuarios=usuarios,
        fanout=fanout,
        notificar_actualizacion_en_reasignacion=notificar_actualizacion_en_reasignacion(),
    )


def cambiar_estado_tarea_use_case(
    tareas: TareaRepository = Depends(tarea_repository),
    fanout: NotificacionFanout = Depends(notificacion_fanout),
) -> CambiarEstadoTareaUseCase:
    return CambiarEstadoTareaUseCase(repository=tareas, fanout=fanout)


def eliminar_tarea_use_case(
    tareas: TareaRepository = Depends(tarea_repository),
    notificaciones: NotificacionRepository = Depends(notificacion_repository),
) -> EliminarTareaUseCase:
    return EliminarTareaUseCase(repository=tareas, notificaciones=notificaciones)


def listar_tareas_use_case(
    tareas: TareaRepository = Depends(tarea_repository),
) -> ListarTareasUseCase:
    return ListarTareasUseCase(repository=tareas)


def obtener_tarea_use_case(
    tareas: TareaRepository = Depends(tarea_repository),
) -> ObtenerTareaUseCase:
    return ObtenerTareaUseCase(repository=tareas)


# ── Casos de uso: notificaciones ──────────────────────────────────────────────


def listar_notificaciones_use_case(
    repo: NotificacionRepository = Depends(notificacion_repository),
) -> ListarNotificacionesUseCase:
    return ListarNotificacionesUseCase(repository=repo)


def listar_no_leidas_use_case(
    repo: NotificacionRepository = Depends(notificacion_repository),
) -> ListarNoLeidasUseCase:
    return ListarNoLeidasUseCase(repository=repo)


def contar_no_leidas_use_case(
    repo: NotificacionRepository = Depends(notificacion_repository),
) -> ContarNoLeidasUseCase:
    return ContarNoLeidasUseCase(repository=repo)


def marcar_leida_use_case(
    repo: NotificacionRepository = Depends(notificacion_repository),
) -> MarcarLeidaUseCase:
    return MarcarLeidaUseCase(repository=repo)


def marcar_todas_leidas_use_case(
    repo: NotificacionRepository = Depends(notificacion_repository),
) -> MarcarTodasLeidasUseCase:
    return MarcarTodasLeidasUseCase(repository=repo)


def eliminar_notificacion_use_case(
    repo: NotificacionRepository = Depends(notificacion_repository),
) -> EliminarNotificacionUseCase:
    return EliminarNotificacionUseCase(repository=repo)


def limpiar_leidas_use_case(
    repo: NotificacionRepository = Depends(notificacion_repository),
) -> LimpiarLeidasUseCase:
    return LimpiarLeidasUseCase(repository=repo)
