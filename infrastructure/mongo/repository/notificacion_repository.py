from typing import Any
from uuid import UUID

from pymongo import DESCENDING
from pymongo.collection import Collection

from core.domain.models.notificacion import Notificacion
from core.domain.ports.notificacion_repository import NotificacionRepository
from infrastructure.mongo.models.notificacion import NotificacionMongo
from infrastructure.mongo.session.client import get_db


class MongoNotificacionRepository(NotificacionRepository):
    """
    Implementación de NotificacionRepository usando MongoDB.
    """

    def __init__(self) -> None:
        self.db = get_db()
        self.collection: Collection[Any] = self.db.notificaciones

    def save(self, notificacion: Notificacion) -> None:
        doc = NotificacionMongo.from_domain(notificacion).model_dump(by_alias=True)
        self.collection.update_one({"_id": doc["_id"]}, {"$set": doc}, upsert=True)

    def get(self, notificacion_id: UUID) -> Notificacion | None:
        doc = self.collection.find_one({"_id": str(notificacion_id)})
        if not doc:
            return None
        return NotificacionMongo(**doc).to_domain()

    def listar_por_usuario(
        self,
        usuario_id: UUID,
        leida: bool | None = None,
        limit: int | None = None,
    ) -> list[Notificacion]:
        filtro: dict[str, Any] = {"usuario_id": str(usuario_id)}
        if leida is not None:
            filtro["leida"] = leida

        cursor = self.collection.find(filtro).sort("fecha", DESCENDING)
        if limit is not None:
            cursor = cursor.limit(limit)
        return [NotificacionMongo(**doc).to_domain() for doc in cursor]

    def contar_no_leidas(self, usuario_id: UUID) -> int:
        return self.collection.count_documents(
            {"usuario_id": str(usuario_id), "leida": False}
        )

    def marcar_todas_leidas(self, usuario_id: UUID) -> int:
        resultado = self.collection.update_many(
            {"usuario_id": str(usuario_id), "leida": False},
            {"$set": {"leida": True}},
        )
        return resultado.modified_count

    def eliminar(self, notificacion_id: UUID) -> None:
        self.collection.delete_one({"_id": str(notificacion_id)})

    def eliminar_por_tarea(self, tarea_id: UUID) -> int:
        resultado = self.collection.delete_many({"tarea_id": str(tarea_id)})
        return resultado.deleted_count

    def eliminar_leidas(self, usuario_id: UUID) -> int:
        resultado = self.collection.delete_many(
            {"usuario_id": str(usuario_id), "leida": True}
        )
        return resultado.deleted_count
