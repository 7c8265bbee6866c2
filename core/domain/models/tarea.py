from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID


class EstadoTarea(Enum):
    PENDIENTE = "Pendiente"
    EN_PROGRESO = "En_progreso"
    COMPLETADA = "Completada"
    CANCELADA = "Cancelada"

    @property
    def etiqueta(self) -> str:
        return self.value.replace("_", " ")


class PrioridadTarea(Enum):
    BAJA = "Baja"
    MEDIA = "Media"
    ALTA = "Alta"
    URGENTE = "Urgente"


def ahora_utc() -> datetime:
    return datetime.now(timezone.utc)


def a_utc(fecha: datetime) -> datetime:
    """Las fechas sin zona horaria se interpretan como UTC."""
    if fecha.tzinfo is None:
        return fecha.replace(tzinfo=timezone.utc)
    return fecha.astimezone(timezone.utc)


@dataclass(slots=True)
class Tarea:
    id: UUID
    titulo: str
    descripcion: str
    fecha_limite: datetime
    responsable: UUID
    creado_por: UUID | None = None
    estado: EstadoTarea = EstadoTarea.PENDIENTE
    prioridad: PrioridadTarea = PrioridadTarea.MEDIA
    fecha_creacion: datetime = field(default_factory=ahora_utc)

    def participantes(self) -> set[UUID]:
        return {u for u in (self.creado_por, self.responsable) if u is not None}
