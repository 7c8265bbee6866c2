from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID


class RolUsuario(Enum):
    ADMIN = "admin"
    USUARIO = "usuario"


@dataclass(slots=True)
class Usuario:
    id: UUID
    nombre: str
    correo: str
    password: str = field(repr=False)
    rol: RolUsuario = RolUsuario.USUARIO


@dataclass(frozen=True, slots=True)
class Actor:
    """Identidad autenticada que ejecuta una operación."""

    id: UUID
    rol: RolUsuario = RolUsuario.USUARIO

    @property
    def es_admin(self) -> bool:
        return self.rol is RolUsuario.ADMIN

    @classmethod
    def desde_usuario(cls, usuario: Usuario) -> "Actor":
        return cls(id=usuario.id, rol=usuario.rol)
