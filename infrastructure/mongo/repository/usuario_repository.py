from typing import Any
from uuid import UUID

from pymongo.collection import Collection

from core.domain.models.usuario import Usuario
from core.domain.ports.usuario_repository import UsuarioRepository
from infrastructure.mongo.models.usuario import UsuarioMongo
from infrastructure.mongo.session.client import get_db


class MongoUsuarioRepository(UsuarioRepository):
    def __init__(self) -> None:
        self.db = get_db()
        self.collection: Collection[Any] = self.db.usuarios

    def get(self, usuario_id: UUID) -> Usuario | None:
        doc = self.collection.find_one({"_id": str(usuario_id)})
        if not doc:
            return None
        return UsuarioMongo(**doc).to_domain()

    def save(self, usuario: Usuario) -> None:
        doc = UsuarioMongo.from_domain(usuario).model_dump(by_alias=True)
        self.collection.update_one({"_id": doc["_id"]}, {"$set": doc}, upsert=True)
