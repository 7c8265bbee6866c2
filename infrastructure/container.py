import os

from core.domain.ports.notificacion_repository import NotificacionRepository
from core.domain.ports.proveedor_identidad import ProveedorIdentidad
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.ports.usuario_repository import UsuarioRepository
from infrastructure.auth.jwt_identidad import JwtProveedorIdentidad
from infrastructure.mongo.repository.notificacion_repository import (
    MongoNotificacionRepository,
)
from infrastructure.mongo.repository.tarea_repository import MongoTareaRepository
from infrastructure.mongo.repository.usuario_repository import MongoUsuarioRepository
from infrastructure.peewee.repository.notificacion_repository import (
    PeeweeNotificacionRepository,
)
from infrastructure.peewee.repository.tarea_repository import (
    PeeweeTareaRepository,
)
from infrastructure.peewee.repository.usuario_repository import (
    PeeweeUsuarioRepository,
)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _usa_mongo() -> bool:
    # Default to Peewee
    return os.getenv("ORM", "peewee").lower() == "mongo"


def get_tarea_repository() -> TareaRepository:
    if _usa_mongo():
        return MongoTareaRepository()
    return PeeweeTareaRepository()


def get_notificacion_repository() -> NotificacionRepository:
    if _usa_mongo():
        return MongoNotificacionRepository()
    return PeeweeNotificacionRepository()


def get_usuario_repository() -> UsuarioRepository:
    if _usa_mongo():
        return MongoUsuarioRepository()
    return PeeweeUsuarioRepository()


def get_proveedor_identidad(usuarios: UsuarioRepository) -> ProveedorIdentidad:
    return JwtProveedorIdentidad(usuarios=usuarios)


def notificar_actualizacion_en_reasignacion() -> bool:
    """
    Política para ediciones que cambian el responsable: si además del aviso
    de asignación se envía el de actualización.
    """
    return _as_bool(os.getenv("NOTIFICAR_ACTUALIZACION_EN_REASIGNACION", "true"))
