from uuid import UUID

from pydantic import BaseModel, Field

from core.domain.models.usuario import RolUsuario, Usuario


class UsuarioMongo(BaseModel):
    id: str = Field(alias="_id")
    nombre: str
    correo: str
    password: str
    rol: str = RolUsuario.USUARIO.value

    model_config = {"populate_by_name": True}

    def to_domain(self) -> Usuario:
        return Usuario(
            id=UUID(self.id),
            nombre=self.nombre,
            correo=self.correo,
            password=self.password,
            rol=RolUsuario(self.rol),
        )

    @classmethod
    def from_domain(cls, usuario: Usuario) -> "UsuarioMongo":
        return cls(
            id=str(usuario.id),
            nombre=usuario.nombre,
            correo=usuario.correo,
            password=usuario.password,
            rol=usuario.rol.value,
        )
