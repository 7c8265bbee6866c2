from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from core.domain.models.tarea import EstadoTarea, PrioridadTarea, Tarea, a_utc


class TareaMongo(BaseModel):
    """
    Modelo de Tarea para MongoDB.
    Representa cómo se almacena la tarea en la base de datos.
    """

    id: str = Field(alias="_id")
    titulo: str
    descripcion: str
    estado: str
    prioridad: str = PrioridadTarea.MEDIA.value
    fecha_creacion: datetime
    fecha_limite: datetime
    responsable: str
    creado_por: str | None = None

    model_config = {"populate_by_name": True}

    def to_domain(self) -> Tarea:
        """
        Convierte el documento de MongoDB al modelo de dominio.

        Retorna:
            Tarea: La entidad de dominio.
        """
        return Tarea(
            id=UUID(self.id),
            titulo=self.titulo,
            descripcion=self.descripcion,
            estado=EstadoTarea(self.estado),
            prioridad=PrioridadTarea(self.prioridad),
            fecha_creacion=a_utc(self.fecha_creacion),
            fecha_limite=a_utc(self.fecha_limite),
            responsable=UUID(self.responsable),
            creado_por=UUID(self.creado_por) if self.creado_por else None,
        )

    @classmethod
    def from_domain(cls, tarea: Tarea) -> "TareaMongo":
        return cls(
            id=str(tarea.id),
            titulo=tarea.titulo,
            descripcion=tarea.descripcion,
            estado=tarea.estado.value,
            prioridad=tarea.prioridad.value,
            fecha_creacion=tarea.fecha_creacion,
            fecha_limite=tarea.fecha_limite,
            responsable=str(tarea.responsable),
            creado_por=str(tarea.creado_por) if tarea.creado_por else None,
        )
