"""
Errores de dominio.

La capa HTTP traduce cada uno a su código de estado:
ValidacionError -> 400, NoAutenticadoError -> 401,
PermisoDenegadoError -> 403, NoEncontradoError -> 404.
"""

from uuid import UUID


class DominioError(Exception):
    """Base de todos los errores del núcleo."""


class ValidacionError(DominioError):
    def __init__(self, errores: dict[str, str]) -> None:
        self.errores = errores
        detalle = "; ".join(f"{campo}: {msg}" for campo, msg in errores.items())
        super().__init__(f"Datos no válidos ({detalle})")


class NoEncontradoError(DominioError):
    def __init__(self, entidad: str, entidad_id: UUID | str) -> None:
        self.entidad = entidad
        self.entidad_id = entidad_id
        super().__init__(f"{entidad} {entidad_id} no existe")


class PermisoDenegadoError(DominioError):
    pass


class NoAutenticadoError(DominioError):
    pass
