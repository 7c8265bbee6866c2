from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from core.application.cambiar_estado_tarea import CambiarEstadoCommand
from core.application.crear_tarea import CrearTareaCommand
from core.application.editar_tarea import EditarTareaCommand
from core.domain.models.notificacion import PrioridadNotificacion, TipoNotificacion
from core.domain.models.tarea import EstadoTarea, PrioridadTarea


class CamelModel(BaseModel):
    """Las tareas se exponen con claves camelCase (fechaLimite, creadoPor...)."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


# ── Peticiones ────────────────────────────────────────────────────────────────


class AsignableRequest(CamelModel):
    """Un responsable en blanco equivale a no enviarlo."""

    responsable: UUID | None = None

    @field_validator("responsable", mode="before")
    @classmethod
    def _responsable_en_blanco(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class CrearTareaRequest(AsignableRequest):
    titulo: str
    descripcion: str
    fecha_limite: datetime
    prioridad: PrioridadTarea = PrioridadTarea.MEDIA

    def to_command(self) -> CrearTareaCommand:
        return CrearTareaCommand(
            titulo=self.titulo,
            descripcion=self.descripcion,
            fecha_limite=self.fecha_limite,
            responsable=self.responsable,
            prioridad=self.prioridad,
        )


class EditarTareaRequest(AsignableRequest):
    titulo: str | None = None
    descripcion: str | None = None
    fecha_limite: datetime | None = None
    estado: EstadoTarea | None = None
    prioridad: PrioridadTarea | None = None

    def to_command(self) -> EditarTareaCommand:
        return EditarTareaCommand(**self.model_dump())


class CambiarEstadoRequest(BaseModel):
    estado: str

    def to_command(self) -> CambiarEstadoCommand:
        return CambiarEstadoCommand(estado=self.estado)


# ── Respuestas ────────────────────────────────────────────────────────────────


class TareaOut(CamelModel):
    id: UUID
    titulo: str
    descripcion: str
    estado: EstadoTarea
    prioridad: PrioridadTarea
    fecha_creacion: datetime
    fecha_limite: datetime
    responsable: UUID
    creado_por: UUID | None = None


class NotificacionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    mensaje: str
    fecha: datetime
    usuario_id: UUID
    tarea_id: UUID | None = None
    leida: bool
    tipo: TipoNotificacion
    prioridad: PrioridadNotificacion


class RespuestaTarea(CamelModel):
    ok: bool = True
    tarea: TareaOut
    msg: str | None = None


class RespuestaTareas(CamelModel):
    ok: bool = True
    tareas: list[TareaOut]
    total: int


class RespuestaMensaje(CamelModel):
    ok: bool = True
    msg: str


class RespuestaNotificacion(CamelModel):
    ok: bool = True
    notificacion: NotificacionOut
    msg: str | None = None


class RespuestaNotificaciones(CamelModel):
    ok: bool = True
    notificaciones: list[NotificacionOut]
    no_leidas: int
    total: int


class RespuestaNoLeidas(CamelModel):
    ok: bool = True
    notificaciones: list[NotificacionOut]
    total: int


class RespuestaContador(CamelModel):
    ok: bool = True
    no_leidas: int


class RespuestaActualizadas(CamelModel):
    ok: bool = True
    msg: str
    actualizadas: int


class RespuestaEliminadas(CamelModel):
    ok: bool = True
    msg: str
    eliminadas: int
