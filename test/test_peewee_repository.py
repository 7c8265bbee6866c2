import os
import unittest
from datetime import datetime, timedelta, timezone
from uuid import uuid4

# Use memory database for tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from core.domain.models.notificacion import (
    Notificacion,
    PrioridadNotificacion,
    TipoNotificacion,
)
from core.domain.models.tarea import EstadoTarea, PrioridadTarea, Tarea
from core.domain.models.usuario import RolUsuario, Usuario
from infrastructure.peewee.model.models import MODELOS, db
from infrastructure.peewee.repository.notificacion_repository import (
    PeeweeNotificacionRepository,
)
from infrastructure.peewee.repository.tarea_repository import PeeweeTareaRepository
from infrastructure.peewee.repository.usuario_repository import (
    PeeweeUsuarioRepository,
)

BASE = datetime(2025, 1, 1, tzinfo=timezone.utc)


class PeeweeTestCase(unittest.TestCase):
    def setUp(self) -> None:
        # Ensure clean state
        if db.is_closed():
            db.connect()
        db.create_tables(MODELOS, safe=True)
        for modelo in MODELOS:
            modelo.delete().execute()

    def tearDown(self) -> None:
        db.drop_tables(MODELOS)
        db.close()


def _tarea(**kwargs) -> Tarea:
    campos = dict(
        id=uuid4(),
        titulo="Tarea Peewee",
        descripcion="desc",
        fecha_limite=datetime(2030, 1, 1, tzinfo=timezone.utc),
        responsable=uuid4(),
    )
    campos.update(kwargs)
    return Tarea(**campos)


class PeeweeTareaRepositoryTests(PeeweeTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.repo = PeeweeTareaRepository()

    def test_save_and_get(self) -> None:
        tarea = _tarea(
            creado_por=uuid4(),
            estado=EstadoTarea.EN_PROGRESO,
            prioridad=PrioridadTarea.URGENTE,
        )

        self.repo.save(tarea)
        loaded = self.repo.get(tarea.id)

        self.assertEqual(loaded, tarea)
        self.assertEqual(loaded.fecha_creacion.tzinfo, timezone.utc)

    def test_save_actualiza_existente(self) -> None:
        tarea = _tarea()
        self.repo.save(tarea)

        tarea.titulo = "Renombrada"
        tarea.estado = EstadoTarea.CANCELADA
        self.repo.save(tarea)

        self.assertEqual(len(self.repo.list()), 1)
        self.assertEqual(self.repo.get(tarea.id).titulo, "Renombrada")
        self.assertEqual(self.repo.get(tarea.id).estado, EstadoTarea.CANCELADA)

    def test_listar_por_usuario_y_estado(self) -> None:
        usuario = uuid4()
        creada = _tarea(creado_por=usuario, fecha_creacion=BASE)
        asignada = _tarea(
            responsable=usuario,
            fecha_creacion=BASE + timedelta(days=1),
            estado=EstadoTarea.COMPLETADA,
        )
        ajena = _tarea(fecha_creacion=BASE + timedelta(days=2))
        for tarea in (creada, asignada, ajena):
            self.repo.save(tarea)

        self.assertEqual(
            [t.id for t in self.repo.listar_por_usuario(usuario)],
            [asignada.id, creada.id],
        )
        self.assertEqual(
            [t.id for t in self.repo.listar_por_usuario(usuario, EstadoTarea.PENDIENTE)],
            [creada.id],
        )
        self.assertEqual(
            [t.id for t in self.repo.list()], [ajena.id, asignada.id, creada.id]
        )
        self.assertEqual(
            [t.id for t in self.repo.list(EstadoTarea.COMPLETADA)], [asignada.id]
        )

    def test_eliminar(self) -> None:
        tarea = _tarea(titulo="Eliminar Peewee")
        self.repo.save(tarea)

        self.repo.eliminar(tarea.id)

        self.assertIsNone(self.repo.get(tarea.id))


class PeeweeNotificacionRepositoryTests(PeeweeTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.repo = PeeweeNotificacionRepository()
        self.usuario = uuid4()
        self.tarea_id = uuid4()

    def _notificacion(self, minutos: int, **kwargs) -> Notificacion:
        campos = dict(
            id=uuid4(),
            mensaje=f"aviso {minutos}",
            usuario_id=self.usuario,
            tarea_id=self.tarea_id,
            tipo=TipoNotificacion.TAREA_ASIGNADA,
            prioridad=PrioridadNotificacion.ALTA,
            fecha=BASE + timedelta(minutes=minutos),
        )
        campos.update(kwargs)
        notificacion = Notificacion(**campos)
        self.repo.save(notificacion)
        return notificacion

    def test_save_and_get(self) -> None:
        notificacion = self._notificacion(1)

        self.assertEqual(self.repo.get(notificacion.id), notificacion)
        self.assertIsNone(self.repo.get(uuid4()))

    def test_listar_por_usuario(self) -> None:
        vieja = self._notificacion(1)
        leida = self._notificacion(2, leida=True)
        nueva = self._notificacion(3)
        self._notificacion(4, usuario_id=uuid4())

        self.assertEqual(
            [n.id for n in self.repo.listar_por_usuario(self.usuario)],
            [nueva.id, leida.id, vieja.id],
        )
        self.assertEqual(
            [n.id for n in self.repo.listar_por_usuario(self.usuario, leida=False, limit=1)],
            [nueva.id],
        )
        self.assertEqual(self.repo.contar_no_leidas(self.usuario), 2)

    def test_marcar_todas_leidas_y_limpiar(self) -> None:
        self._notificacion(1)
        self._notificacion(2)
        ajena = self._notificacion(3, usuario_id=uuid4())

        self.assertEqual(self.repo.marcar_todas_leidas(self.usuario), 2)
        self.assertEqual(self.repo.contar_no_leidas(self.usuario), 0)
        self.assertEqual(self.repo.eliminar_leidas(self.usuario), 2)
        self.assertEqual(self.repo.listar_por_usuario(self.usuario), [])
        self.assertIsNotNone(self.repo.get(ajena.id))

    def test_eliminar_por_tarea(self) -> None:
        self._notificacion(1)
        self._notificacion(2)
        otra = self._notificacion(3, tarea_id=None, tipo=TipoNotificacion.SISTEMA)

        self.assertEqual(self.repo.eliminar_por_tarea(self.tarea_id), 2)
        self.assertEqual(
            [n.id for n in self.repo.listar_por_usuario(self.usuario)], [otra.id]
        )

    def test_eliminar(self) -> None:
        notificacion = self._notificacion(1)

        self.repo.eliminar(notificacion.id)

        self.assertIsNone(self.repo.get(notificacion.id))


class PeeweeUsuarioRepositoryTests(PeeweeTestCase):
    def test_save_and_get(self) -> None:
        repo = PeeweeUsuarioRepository()
        usuario = Usuario(
            id=uuid4(),
            nombre="Ana",
            correo="ana@gestion.test",
            password="hash",
            rol=RolUsuario.ADMIN,
        )

        repo.save(usuario)
        usuario.nombre = "Ana María"
        repo.save(usuario)

        self.assertEqual(repo.get(usuario.id), usuario)
        self.assertIsNone(repo.get(uuid4()))


if __name__ == "__main__":
    unittest.main()
