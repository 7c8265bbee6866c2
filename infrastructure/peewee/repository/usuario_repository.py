from uuid import UUID
from core.domain.models.usuario import RolUsuario, Usuario
from core.domain.ports.usuario_repository import UsuarioRepository
from infrastructure.peewee.model.models import UsuarioModel, db, init_db


class PeeweeUsuarioRepository(UsuarioRepository):
    def __init__(self):
        init_db()

    def get(self, usuario_id: UUID) -> Usuario | None:
        try:
            u = UsuarioModel.get(UsuarioModel.id == usuario_id)
        except UsuarioModel.DoesNotExist:
            return None
        return Usuario(
            id=u.id,
            nombre=u.nombre,
            correo=u.correo,
            password=u.password,
            rol=RolUsuario(u.rol),
        )

    def save(self, usuario: Usuario) -> None:
        datos = dict(
            nombre=usuario.nombre,
            correo=usuario.correo,
            password=usuario.password,
            rol=usuario.rol.value,
        )
        with db.atomic():
            try:
                existing = UsuarioModel.get(UsuarioModel.id == usuario.id)
                for campo, valor in datos.items():
                    setattr(existing, campo, valor)
                existing.save()
            except UsuarioModel.DoesNotExist:
                UsuarioModel.create(id=usuario.id, **datos)
