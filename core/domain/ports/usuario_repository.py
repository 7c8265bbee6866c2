from abc import ABC, abstractmethod
from uuid import UUID

from core.domain.models.usuario import Usuario


class UsuarioRepository(ABC):
    @abstractmethod
    def get(self, usuario_id: UUID) -> Usuario | None:
        raise NotImplementedError

    @abstractmethod
    def save(self, usuario: Usuario) -> None:
        raise NotImplementedError
