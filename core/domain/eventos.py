"""
Derivación de notificaciones a partir de las mutaciones de una tarea.

Cada función devuelve la lista (posiblemente vacía) de solicitudes que la
mutación produce. Ninguna solicitud tiene como destinatario al actor que
provocó el cambio.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

from core.domain.models.notificacion import (
    Notificacion,
    PrioridadNotificacion,
    TipoNotificacion,
)
from core.domain.models.tarea import PrioridadTarea, Tarea
from core.domain.models.usuario import Actor
from core.domain.transiciones import DecisionNotificacion, Transicion

_PRIORIDADES_ALTAS = {PrioridadTarea.ALTA, PrioridadTarea.URGENTE}


@dataclass(frozen=True, slots=True)
class SolicitudNotificacion:
    mensaje: str
    usuario_id: UUID
    tipo: TipoNotificacion
    tarea_id: UUID | None = None
    prioridad: PrioridadNotificacion = PrioridadNotificacion.MEDIA

    def a_notificacion(self) -> Notificacion:
        return Notificacion(
            id=uuid4(),
            mensaje=self.mensaje,
            usuario_id=self.usuario_id,
            tarea_id=self.tarea_id,
            tipo=self.tipo,
            prioridad=self.prioridad,
        )


def prioridad_asignacion(prioridad: PrioridadTarea) -> PrioridadNotificacion:
    if prioridad in _PRIORIDADES_ALTAS:
        return PrioridadNotificacion.ALTA
    return PrioridadNotificacion.MEDIA


def _al_responsable(
    tarea: Tarea,
    mensaje: str,
    tipo: TipoNotificacion,
    prioridad: PrioridadNotificacion = PrioridadNotificacion.MEDIA,
) -> SolicitudNotificacion:
    return SolicitudNotificacion(
        mensaje=mensaje,
        usuario_id=tarea.responsable,
        tipo=tipo,
        tarea_id=tarea.id,
        prioridad=prioridad,
    )


def derivar_creacion(tarea: Tarea, actor: Actor) -> list[SolicitudNotificacion]:
    if tarea.responsable == actor.id:
        return []
    return [
        _al_responsable(
            tarea,
            f"You have been assigned a new task: '{tarea.titulo}'",
            TipoNotificacion.TAREA_ASIGNADA,
            prioridad_asignacion(tarea.prioridad),
        )
    ]


def derivar_edicion(
    tarea: Tarea,
    responsable_anterior: UUID,
    actor: Actor,
    notificar_actualizacion_en_reasignacion: bool = True,
) -> list[SolicitudNotificacion]:
    """
    Reasignación y actualización son disparadores independientes: una
    edición que cambia el responsable puede producir ambos avisos salvo
    que la política indique lo contrario.
    """
    if tarea.responsable == actor.id:
        return []

    solicitudes: list[SolicitudNotificacion] = []
    reasignada = tarea.responsable != responsable_anterior
    if reasignada:
        solicitudes.append(
            _al_responsable(
                tarea,
                f"You have been assigned the task: '{tarea.titulo}'",
                TipoNotificacion.TAREA_ASIGNADA,
                prioridad_asignacion(tarea.prioridad),
            )
        )
    if not reasignada or notificar_actualizacion_en_reasignacion:
        solicitudes.append(
            _al_responsable(
                tarea,
                f"Task '{tarea.titulo}' was updated",
                TipoNotificacion.TAREA_ACTUALIZADA,
            )
        )
    return solicitudes


def derivar_cambio_estado(
    tarea: Tarea, transicion: Transicion, actor: Actor
) -> list[SolicitudNotificacion]:
    if not transicion.es_cambio or tarea.responsable == actor.id:
        return []
    if transicion.decision is DecisionNotificacion.COMPLETADA:
        return [
            _al_responsable(
                tarea,
                f"Task '{tarea.titulo}' marked completed",
                TipoNotificacion.TAREA_COMPLETADA,
            )
        ]
    return [
        _al_responsable(
            tarea,
            f"Task '{tarea.titulo}' status changed to {transicion.estado.etiqueta}",
            TipoNotificacion.TAREA_ACTUALIZADA,
        )
    ]
