from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID

from core.domain.models.tarea import ahora_utc


class TipoNotificacion(Enum):
    TAREA_ASIGNADA = "tarea_asignada"
    TAREA_ACTUALIZADA = "tarea_actualizada"
    TAREA_COMPLETADA = "tarea_completada"
    TAREA_VENCIDA = "tarea_vencida"
    RECORDATORIO = "recordatorio"
    SISTEMA = "sistema"
    COMENTARIO = "comentario"


class PrioridadNotificacion(Enum):
    BAJA = "baja"
    MEDIA = "media"
    ALTA = "alta"


@dataclass(slots=True)
class Notificacion:
    id: UUID
    mensaje: str
    usuario_id: UUID
    tarea_id: UUID | None = None
    leida: bool = False
    tipo: TipoNotificacion = TipoNotificacion.SISTEMA
    prioridad: PrioridadNotificacion = PrioridadNotificacion.MEDIA
    fecha: datetime = field(default_factory=ahora_utc)
