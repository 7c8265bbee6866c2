from uuid import UUID
from typing import List
from core.domain.models.tarea import EstadoTarea, PrioridadTarea, Tarea
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.peewee.model.models import (
    TareaModel,
    a_columna,
    desde_columna,
    db,
    init_db,
)


def _a_dominio(t: TareaModel) -> Tarea:
    return Tarea(
        id=t.id,
        titulo=t.titulo,
        descripcion=t.descripcion,
        estado=EstadoTarea(t.estado),
        prioridad=PrioridadTarea(t.prioridad),
        fecha_creacion=desde_columna(t.fecha_creacion),
        fecha_limite=desde_columna(t.fecha_limite),
        responsable=t.responsable,
        creado_por=t.creado_por,
    )


class PeeweeTareaRepository(TareaRepository):
    def __init__(self):
        init_db()

    def save(self, tarea: Tarea) -> None:
        datos = dict(
            titulo=tarea.titulo,
            descripcion=tarea.descripcion,
            estado=tarea.estado.value,
            prioridad=tarea.prioridad.value,
            fecha_creacion=a_columna(tarea.fecha_creacion),
            fecha_limite=a_columna(tarea.fecha_limite),
            responsable=tarea.responsable,
            creado_por=tarea.creado_por,
        )
        with db.atomic():
            try:
                existing = TareaModel.get(TareaModel.id == tarea.id)
                for campo, valor in datos.items():
                    setattr(existing, campo, valor)
                existing.save()
            except TareaModel.DoesNotExist:
                TareaModel.create(id=tarea.id, **datos)

    def get(self, tarea_id: UUID) -> Tarea | None:
        try:
            return _a_dominio(TareaModel.get(TareaModel.id == tarea_id))
        except TareaModel.DoesNotExist:
            return None

    def _consultar(self, condicion, estado: EstadoTarea | None) -> List[Tarea]:
        query = TareaModel.select()
        if estado is not None:
            condicion = (
                (TareaModel.estado == estado.value)
                if condicion is None
                else condicion & (TareaModel.estado == estado.value)
            )
        if condicion is not None:
            query = query.where(condicion)
        query = query.order_by(TareaModel.fecha_creacion.desc())
        return [_a_dominio(t) for t in query]

    def list(self, estado: EstadoTarea | None = None) -> List[Tarea]:
        return self._consultar(None, estado)

    def listar_por_usuario(
        self, usuario_id: UUID, estado: EstadoTarea | None = None
    ) -> List[Tarea]:
        condicion = (TareaModel.responsable == usuario_id) | (
            TareaModel.creado_por == usuario_id
        )
        return self._consultar(condicion, estado)

    def eliminar(self, tarea_id: UUID) -> None:
        query = TareaModel.delete().where(TareaModel.id == tarea_id)
        query.execute()
