import os
from datetime import datetime, timezone

from peewee import (
    BooleanField,
    CharField,
    DateTimeField,
    Model,
    TextField,
    UUIDField,
)
from playhouse.db_url import connect

# SQLite por defecto; cualquier URL soportada por playhouse.db_url
db = connect(os.getenv("DATABASE_URL", "sqlite:///gestion360.db"))


def a_columna(fecha: datetime) -> datetime:
    """Las fechas se guardan en UTC sin zona horaria."""
    if fecha.tzinfo is None:
        return fecha
    return fecha.astimezone(timezone.utc).replace(tzinfo=None)


def desde_columna(fecha: datetime) -> datetime:
    return fecha.replace(tzinfo=timezone.utc)


class BaseModel(Model):
    class Meta:
        database = db


class UsuarioModel(BaseModel):
    id = UUIDField(primary_key=True)
    nombre = CharField()
    correo = CharField(unique=True)
    password = CharField()
    rol = CharField(default="usuario")

    class Meta:
        table_name = "usuarios"


class TareaModel(BaseModel):
    id = UUIDField(primary_key=True)
    titulo = CharField()
    descripcion = TextField()
    estado = CharField(index=True)
    prioridad = CharField()
    fecha_creacion = DateTimeField(index=True)
    fecha_limite = DateTimeField()
    responsable = UUIDField(index=True)
    creado_por = UUIDField(null=True, index=True)

    class Meta:
        table_name = "tareas"


class NotificacionModel(BaseModel):
    id = UUIDField(primary_key=True)
    mensaje = TextField()
    fecha = DateTimeField()
    usuario_id = UUIDField()
    tarea_id = UUIDField(null=True, index=True)
    leida = BooleanField(default=False)
    tipo = CharField()
    prioridad = CharField()

    class Meta:
        table_name = "notificaciones"
        indexes = (
            (("usuario_id", "fecha"), False),
            (("usuario_id", "leida"), False),
        )


MODELOS = [UsuarioModel, TareaModel, NotificacionModel]


def init_db() -> None:
    # Sin migraciones: las tablas se crean al arrancar si no existen.
    db.connect(reuse_if_open=True)
    db.create_tables(MODELOS, safe=True)
