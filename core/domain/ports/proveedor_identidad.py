from abc import ABC, abstractmethod

from core.domain.models.usuario import Actor


class ProveedorIdentidad(ABC):
    @abstractmethod
    def resolver(self, token: str) -> Actor:
        """
        Traduce un token opaco en el actor autenticado.

        Raises:
            NoAutenticadoError: si el token falta, no es válido o su
                usuario ya no existe.
        """
        raise NotImplementedError
