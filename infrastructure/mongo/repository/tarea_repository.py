from typing import Any, List
from uuid import UUID

from pymongo import DESCENDING
from pymongo.collection import Collection

from core.domain.models.tarea import EstadoTarea, Tarea
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.mongo.models.tarea import TareaMongo
from infrastructure.mongo.session.client import get_db


class MongoTareaRepository(TareaRepository):
    """
    Implementación de TareaRepository usando MongoDB (Synchronous).
    """

    def __init__(self) -> None:
        self.db = get_db()
        self.collection: Collection[Any] = self.db.tareas

    def save(self, tarea: Tarea) -> None:
        """
        Guarda o actualiza una tarea en la base de datos.

        Argumentos:
            tarea (Tarea): La tarea a guardar.
        """
        tarea_dict = TareaMongo.from_domain(tarea).model_dump(by_alias=True)

        self.collection.update_one(
            {"_id": tarea_dict["_id"]}, {"$set": tarea_dict}, upsert=True
        )

    def get(self, tarea_id: UUID) -> Tarea | None:
        """
        Obtiene una tarea por su ID.

        Retorna:
            Tarea | None: La tarea encontrada o None si no existe.
        """
        doc = self.collection.find_one({"_id": str(tarea_id)})
        if not doc:
            return None

        return TareaMongo(**doc).to_domain()

    def _buscar(self, filtro: dict[str, Any], estado: EstadoTarea | None) -> List[Tarea]:
        if estado is not None:
            filtro = {**filtro, "estado": estado.value}
        docs = self.collection.find(filtro).sort("fecha_creacion", DESCENDING)
        return [TareaMongo(**doc).to_domain() for doc in docs]

    def list(self, estado: EstadoTarea | None = None) -> List[Tarea]:
        """
        Lista todas las tareas, opcionalmente filtradas por estado.
        """
        return self._buscar({}, estado)

    def listar_por_usuario(
        self, usuario_id: UUID, estado: EstadoTarea | None = None
    ) -> List[Tarea]:
        """
        Lista las tareas donde el usuario es responsable o creador.
        """
        uid = str(usuario_id)
        return self._buscar(
            {"$or": [{"responsable": uid}, {"creado_por": uid}]}, estado
        )

    def eliminar(self, tarea_id: UUID) -> None:
        """
        Elimina una tarea por su ID.
        """
        self.collection.delete_one({"_id": str(tarea_id)})
