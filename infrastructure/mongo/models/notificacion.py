from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from core.domain.models.notificacion import (
    Notificacion,
    PrioridadNotificacion,
    TipoNotificacion,
)
from core.domain.models.tarea import a_utc


class NotificacionMongo(BaseModel):
    """Documento de la colección `notificaciones`."""

    id: str = Field(alias="_id")
    mensaje: str
    fecha: datetime
    usuario_id: str
    tarea_id: str | None = None
    leida: bool = False
    tipo: str = TipoNotificacion.SISTEMA.value
    prioridad: str = PrioridadNotificacion.MEDIA.value

    model_config = {"populate_by_name": True}

    def to_domain(self) -> Notificacion:
        return Notificacion(
            id=UUID(self.id),
            mensaje=self.mensaje,
            fecha=a_utc(self.fecha),
            usuario_id=UUID(self.usuario_id),
            tarea_id=UUID(self.tarea_id) if self.tarea_id else None,
            leida=self.leida,
            tipo=TipoNotificacion(self.tipo),
            prioridad=PrioridadNotificacion(self.prioridad),
        )

    @classmethod
    def from_domain(cls, notificacion: Notificacion) -> "NotificacionMongo":
        return cls(
            id=str(notificacion.id),
            mensaje=notificacion.mensaje.strip(),
            fecha=notificacion.fecha,
            usuario_id=str(notificacion.usuario_id),
            tarea_id=str(notificacion.tarea_id) if notificacion.tarea_id else None,
            leida=notificacion.leida,
            tipo=notificacion.tipo.value,
            prioridad=notificacion.prioridad.value,
        )
