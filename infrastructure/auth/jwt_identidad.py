import logging
import os
from uuid import UUID

import jwt

from core.domain.errors import NoAutenticadoError
from core.domain.models.usuario import Actor
from core.domain.ports.proveedor_identidad import ProveedorIdentidad
from core.domain.ports.usuario_repository import UsuarioRepository

logger = logging.getLogger(__name__)


class JwtProveedorIdentidad(ProveedorIdentidad):
    """
    Resuelve el actor a partir de un JWT firmado con SECRET_JWT_SEED.

    El token lleva el id del usuario en el claim `uid`; el rol se obtiene
    del repositorio de usuarios para que un cambio de rol tenga efecto sin
    reemitir tokens.
    """

    def __init__(
        self,
        usuarios: UsuarioRepository,
        secret: str | None = None,
        algoritmos: tuple[str, ...] = ("HS256",),
    ) -> None:
        self._usuarios = usuarios
        self._secret = secret if secret is not None else os.getenv("SECRET_JWT_SEED", "")
        self._algoritmos = list(algoritmos)

    def resolver(self, token: str) -> Actor:
        if not token:
            raise NoAutenticadoError("El usuario no esta autenticado")
        if not self._secret:
            logger.error("SECRET_JWT_SEED no está configurado")
            raise NoAutenticadoError("Token no valido")

        try:
            payload = jwt.decode(token, self._secret, algorithms=self._algoritmos)
            uid = UUID(str(payload["uid"]))
        except (jwt.InvalidTokenError, KeyError, ValueError) as e:
            logger.warning(f"Token rechazado: {e}")
            raise NoAutenticadoError("Token no valido") from e

        usuario = self._usuarios.get(uid)
        if usuario is None:
            logger.warning(f"Token válido para un usuario inexistente: {uid}")
            raise NoAutenticadoError("Token no valido")
        return Actor.desde_usuario(usuario)
