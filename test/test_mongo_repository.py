from datetime import datetime, timezone
from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from pymongo import DESCENDING

from core.domain.models.notificacion import Notificacion, TipoNotificacion
from core.domain.models.tarea import EstadoTarea, PrioridadTarea, Tarea
from core.domain.models.usuario import RolUsuario
from infrastructure.mongo.repository.notificacion_repository import (
    MongoNotificacionRepository,
)
from infrastructure.mongo.repository.tarea_repository import MongoTareaRepository
from infrastructure.mongo.repository.usuario_repository import MongoUsuarioRepository

FECHA = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def mock_mongo_collection():
    collection = MagicMock()
    return collection


@pytest.fixture
def mongo_repository(mock_mongo_collection):
    repo = MongoTareaRepository()
    repo.collection = mock_mongo_collection
    return repo


@pytest.fixture
def notificacion_repository(mock_mongo_collection):
    repo = MongoNotificacionRepository()
    repo.collection = mock_mongo_collection
    return repo


def _doc_tarea(**kwargs):
    doc = {
        "_id": str(uuid4()),
        "titulo": "Found Tarea",
        "descripcion": "Found Descripcion",
        "estado": "Pendiente",
        "prioridad": "Alta",
        "fecha_creacion": FECHA,
        "fecha_limite": datetime(2030, 1, 1),
        "responsable": str(uuid4()),
        "creado_por": None,
    }
    doc.update(kwargs)
    return doc


def test_save_tarea(mongo_repository, mock_mongo_collection):
    tarea = Tarea(
        id=uuid4(),
        titulo="Test Tarea",
        descripcion="Test Descripcion",
        fecha_limite=FECHA,
        responsable=uuid4(),
        creado_por=uuid4(),
        prioridad=PrioridadTarea.URGENTE,
    )

    mongo_repository.save(tarea)

    mock_mongo_collection.update_one.assert_called_once()
    args, kwargs = mock_mongo_collection.update_one.call_args
    assert args[0] == {"_id": str(tarea.id)}
    assert args[1]["$set"]["estado"] == "Pendiente"
    assert args[1]["$set"]["prioridad"] == "Urgente"
    assert args[1]["$set"]["responsable"] == str(tarea.responsable)
    assert kwargs["upsert"] is True


def test_get_tarea_found(mongo_repository, mock_mongo_collection):
    doc = _doc_tarea()
    mock_mongo_collection.find_one.return_value = doc

    result = mongo_repository.get(uuid4())

    assert result is not None
    assert str(result.id) == doc["_id"]
    assert result.titulo == "Found Tarea"
    assert result.prioridad is PrioridadTarea.ALTA
    assert result.creado_por is None
    assert result.fecha_limite == datetime(2030, 1, 1, tzinfo=timezone.utc)


def test_get_tarea_not_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one.return_value = None

    result = mongo_repository.get(uuid4())

    assert result is None


def test_list_tareas_ordenadas(mongo_repository, mock_mongo_collection):
    mock_docs = [_doc_tarea(titulo="Tarea 1"), _doc_tarea(titulo="Tarea 2", estado="Completada")]
    mock_mongo_collection.find.return_value.sort.return_value = mock_docs

    results = mongo_repository.list()

    mock_mongo_collection.find.assert_called_once_with({})
    mock_mongo_collection.find.return_value.sort.assert_called_once_with(
        "fecha_creacion", DESCENDING
    )
    assert [r.titulo for r in results] == ["Tarea 1", "Tarea 2"]
    assert results[1].estado is EstadoTarea.COMPLETADA


def test_listar_por_usuario_filtra_por_participacion_y_estado(
    mongo_repository, mock_mongo_collection
):
    usuario = uuid4()
    mock_mongo_collection.find.return_value.sort.return_value = []

    mongo_repository.listar_por_usuario(usuario, EstadoTarea.EN_PROGRESO)

    mock_mongo_collection.find.assert_called_once_with(
        {
            "$or": [{"responsable": str(usuario)}, {"creado_por": str(usuario)}],
            "estado": "En_progreso",
        }
    )


def test_eliminar_tarea(mongo_repository, mock_mongo_collection):
    tarea_id = uuid4()
    mongo_repository.eliminar(tarea_id)

    mock_mongo_collection.delete_one.assert_called_once_with({"_id": str(tarea_id)})


def test_save_notificacion(notificacion_repository, mock_mongo_collection):
    notificacion = Notificacion(
        id=uuid4(),
        mensaje="  Hola  ",
        usuario_id=uuid4(),
        tipo=TipoNotificacion.TAREA_COMPLETADA,
    )

    notificacion_repository.save(notificacion)

    args, kwargs = mock_mongo_collection.update_one.call_args
    assert args[0] == {"_id": str(notificacion.id)}
    assert args[1]["$set"]["mensaje"] == "Hola"
    assert args[1]["$set"]["tarea_id"] is None
    assert args[1]["$set"]["tipo"] == "tarea_completada"
    assert kwargs["upsert"] is True


def test_listar_notificaciones_con_filtro_y_limite(
    notificacion_repository, mock_mongo_collection
):
    usuario = uuid4()
    doc = {
        "_id": str(uuid4()),
        "mensaje": "aviso",
        "fecha": FECHA,
        "usuario_id": str(usuario),
        "tarea_id": str(uuid4()),
        "leida": False,
        "tipo": "tarea_asignada",
        "prioridad": "alta",
    }
    cursor = mock_mongo_collection.find.return_value.sort.return_value
    cursor.limit.return_value = [doc]

    result = notificacion_repository.listar_por_usuario(usuario, leida=False, limit=5)

    mock_mongo_collection.find.assert_called_once_with(
        {"usuario_id": str(usuario), "leida": False}
    )
    cursor.limit.assert_called_once_with(5)
    assert [n.mensaje for n in result] == ["aviso"]
    assert result[0].usuario_id == usuario


def test_operaciones_masivas_devuelven_conteos(
    notificacion_repository, mock_mongo_collection
):
    usuario = uuid4()
    tarea_id = uuid4()
    mock_mongo_collection.update_many.return_value.modified_count = 3
    mock_mongo_collection.delete_many.return_value.deleted_count = 2
    mock_mongo_collection.count_documents.return_value = 7

    assert notificacion_repository.marcar_todas_leidas(usuario) == 3
    assert notificacion_repository.eliminar_por_tarea(tarea_id) == 2
    assert notificacion_repository.contar_no_leidas(usuario) == 7

    mock_mongo_collection.update_many.assert_called_once_with(
        {"usuario_id": str(usuario), "leida": False}, {"$set": {"leida": True}}
    )
    mock_mongo_collection.delete_many.assert_called_once_with(
        {"tarea_id": str(tarea_id)}
    )


def test_usuario_get(mock_mongo_collection):
    repo = MongoUsuarioRepository()
    repo.collection = mock_mongo_collection
    usuario_id = uuid4()
    mock_mongo_collection.find_one.return_value = {
        "_id": str(usuario_id),
        "nombre": "Ana",
        "correo": "ana@gestion.test",
        "password": "hash",
        "rol": "admin",
    }

    usuario = repo.get(usuario_id)

    assert usuario.id == usuario_id
    assert usuario.rol is RolUsuario.ADMIN
    mock_mongo_collection.find_one.assert_called_once_with({"_id": str(usuario_id)})
