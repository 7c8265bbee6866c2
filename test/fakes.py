from typing import List
from uuid import UUID

from core.domain.models.notificacion import Notificacion
from core.domain.models.tarea import EstadoTarea, Tarea
from core.domain.models.usuario import Usuario
from core.domain.ports.notificacion_repository import NotificacionRepository
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.ports.usuario_repository import UsuarioRepository


class InMemoryTareaRepository(TareaRepository):
    def __init__(self) -> None:
        self._data: dict[UUID, Tarea] = {}
        self.saves = 0

    def _ordenar(self, tareas: List[Tarea], estado: EstadoTarea | None) -> List[Tarea]:
        if estado is not None:
            tareas = [t for t in tareas if t.estado is estado]
        return sorted(tareas, key=lambda t: t.fecha_creacion, reverse=True)

    def list(self, estado: EstadoTarea | None = None) -> List[Tarea]:
        return self._ordenar(list(self._data.values()), estado)

    def listar_por_usuario(
        self, usuario_id: UUID, estado: EstadoTarea | None = None
    ) -> List[Tarea]:
        propias = [t for t in self._data.values() if usuario_id in t.participantes()]
        return self._ordenar(propias, estado)

    def save(self, tarea: Tarea) -> None:
        self.saves += 1
        self._data[tarea.id] = tarea

    def get(self, tarea_id: UUID) -> Tarea | None:
        return self._data.get(tarea_id)

    def eliminar(self, tarea_id: UUID) -> None:
        self._data.pop(tarea_id, None)


class InMemoryNotificacionRepository(NotificacionRepository):
    def __init__(self) -> None:
        self._data: dict[UUID, Notificacion] = {}

    def all(self) -> list[Notificacion]:
        return list(self._data.values())

    def save(self, notificacion: Notificacion) -> None:
        self._data[notificacion.id] = notificacion

    def get(self, notificacion_id: UUID) -> Notificacion | None:
        return self._data.get(notificacion_id)

    def listar_por_usuario(
        self,
        usuario_id: UUID,
        leida: bool | None = None,
        limit: int | None = None,
    ) -> list[Notificacion]:
        resultado = [
            n
            for n in self._data.values()
            if n.usuario_id == usuario_id and (leida is None or n.leida == leida)
        ]
        resultado.sort(key=lambda n: n.fecha, reverse=True)
        return resultado[:limit] if limit is not None else resultado

    def contar_no_leidas(self, usuario_id: UUID) -> int:
        return len(self.listar_por_usuario(usuario_id, leida=False))

    def marcar_todas_leidas(self, usuario_id: UUID) -> int:
        pendientes = self.listar_por_usuario(usuario_id, leida=False)
        for n in pendientes:
            n.leida = True
        return len(pendientes)

    def eliminar(self, notificacion_id: UUID) -> None:
        self._data.pop(notificacion_id, None)

    def _eliminar_si(self, condicion) -> int:
        ids = [n.id for n in self._data.values() if condicion(n)]
        for notificacion_id in ids:
            del self._data[notificacion_id]
        return len(ids)

    def eliminar_por_tarea(self, tarea_id: UUID) -> int:
        return self._eliminar_si(lambda n: n.tarea_id == tarea_id)

    def eliminar_leidas(self, usuario_id: UUID) -> int:
        return self._eliminar_si(lambda n: n.usuario_id == usuario_id and n.leida)


class FailingNotificacionRepository(InMemoryNotificacionRepository):
    def save(self, notificacion: Notificacion) -> None:
        raise ConnectionError("notificaciones no disponibles")


class InMemoryUsuarioRepository(UsuarioRepository):
    def __init__(self, *usuarios: Usuario) -> None:
        self._data: dict[UUID, Usuario] = {u.id: u for u in usuarios}

    def get(self, usuario_id: UUID) -> Usuario | None:
        return self._data.get(usuario_id)

    def save(self, usuario: Usuario) -> None:
        self._data[usuario.id] = usuario
