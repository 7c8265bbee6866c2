"""
Validación y normalización de los campos de una tarea.

Los errores se acumulan por campo y se lanzan juntos en un único
ValidacionError para que el cliente pueda mostrarlos todos a la vez.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from core.domain.errors import ValidacionError
from core.domain.models.tarea import EstadoTarea, PrioridadTarea, a_utc

TITULO_MIN_LEN = 3


class CambiosTarea(BaseModel):
    """Campos de una actualización parcial: todos opcionales."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    titulo: str | None = Field(default=None, min_length=TITULO_MIN_LEN)
    descripcion: str | None = Field(default=None, min_length=1)
    fecha_limite: datetime | None = None
    responsable: UUID | None = None
    estado: EstadoTarea | None = None
    prioridad: PrioridadTarea | None = None

    @field_validator("responsable", mode="before")
    @classmethod
    def _responsable_en_blanco(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("fecha_limite")
    @classmethod
    def _fecha_en_utc(cls, value: datetime | None) -> datetime | None:
        return a_utc(value) if value is not None else None


class CamposTarea(CambiosTarea):
    """Campos de una tarea nueva."""

    titulo: str = Field(min_length=TITULO_MIN_LEN)
    descripcion: str = Field(min_length=1)
    fecha_limite: datetime


_ESTADO = TypeAdapter(EstadoTarea)


def _errores(exc: ValidationError) -> dict[str, str]:
    errores: dict[str, str] = {}
    for error in exc.errors():
        campo = ".".join(str(p) for p in error["loc"]) or "valor"
        errores.setdefault(campo, error["msg"])
    return errores


def parsear_estado(valor: Any) -> EstadoTarea:
    try:
        return _ESTADO.validate_python(valor)
    except ValidationError as e:
        raise ValidacionError({"estado": e.errors()[0]["msg"]}) from None


def normalizar_campos(campos: dict[str, Any], parcial: bool = False) -> dict[str, Any]:
    """
    Valida y normaliza los campos conocidos de una tarea.

    Args:
        campos:  Valores recibidos; las claves desconocidas y los valores
                 None se ignoran.
        parcial: Si es True (actualización) ningún campo es obligatorio.

    Returns:
        Diccionario solo con los campos presentes, ya normalizados.
        Un responsable en blanco se omite.

    Raises:
        ValidacionError: con el detalle de cada campo inválido.
    """
    modelo = CambiosTarea if parcial else CamposTarea
    presentes = {k: v for k, v in campos.items() if v is not None}
    try:
        validado = modelo.model_validate(presentes)
    except ValidationError as e:
        raise ValidacionError(_errores(e)) from None
    return validado.model_dump(exclude_none=True)
