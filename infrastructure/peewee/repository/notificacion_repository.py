from uuid import UUID
from typing import List
from core.domain.models.notificacion import (
    Notificacion,
    PrioridadNotificacion,
    TipoNotificacion,
)
from core.domain.ports.notificacion_repository import NotificacionRepository
from infrastructure.peewee.model.models import (
    NotificacionModel,
    a_columna,
    desde_columna,
    db,
    init_db,
)


def _a_dominio(n: NotificacionModel) -> Notificacion:
    return Notificacion(
        id=n.id,
        mensaje=n.mensaje,
        fecha=desde_columna(n.fecha),
        usuario_id=n.usuario_id,
        tarea_id=n.tarea_id,
        leida=n.leida,
        tipo=TipoNotificacion(n.tipo),
        prioridad=PrioridadNotificacion(n.prioridad),
    )


class PeeweeNotificacionRepository(NotificacionRepository):
    def __init__(self):
        init_db()

    def save(self, notificacion: Notificacion) -> None:
        datos = dict(
            mensaje=notificacion.mensaje.strip(),
            fecha=a_columna(notificacion.fecha),
            usuario_id=notificacion.usuario_id,
            tarea_id=notificacion.tarea_id,
            leida=notificacion.leida,
            tipo=notificacion.tipo.value,
            prioridad=notificacion.prioridad.value,
        )
        with db.atomic():
            try:
                existing = NotificacionModel.get(NotificacionModel.id == notificacion.id)
                for campo, valor in datos.items():
                    setattr(existing, campo, valor)
                existing.save()
            except NotificacionModel.DoesNotExist:
                NotificacionModel.create(id=notificacion.id, **datos)

    def get(self, notificacion_id: UUID) -> Notificacion | None:
        try:
            return _a_dominio(
                NotificacionModel.get(NotificacionModel.id == notificacion_id)
            )
        except NotificacionModel.DoesNotExist:
            return None

    def listar_por_usuario(
        self,
        usuario_id: UUID,
        leida: bool | None = None,
        limit: int | None = None,
    ) -> List[Notificacion]:
        query = NotificacionModel.select().where(
            NotificacionModel.usuario_id == usuario_id
        )
        if leida is not None:
            query = query.where(NotificacionModel.leida == leida)
        query = query.order_by(NotificacionModel.fecha.desc())
        if limit is not None:
            query = query.limit(limit)
        return [_a_dominio(n) for n in query]

    def contar_no_leidas(self, usuario_id: UUID) -> int:
        return (
            NotificacionModel.select()
            .where(
                (NotificacionModel.usuario_id == usuario_id)
                & (NotificacionModel.leida == False)  # noqa: E712
            )
            .count()
        )

    def marcar_todas_leidas(self, usuario_id: UUID) -> int:
        query = NotificacionModel.update(leida=True).where(
            (NotificacionModel.usuario_id == usuario_id)
            & (NotificacionModel.leida == False)  # noqa: E712
        )
        return query.execute()

    def eliminar(self, notificacion_id: UUID) -> None:
        NotificacionModel.delete().where(
            NotificacionModel.id == notificacion_id
        ).execute()

    def eliminar_por_tarea(self, tarea_id: UUID) -> int:
        return (
            NotificacionModel.delete()
            .where(NotificacionModel.tarea_id == tarea_id)
            .execute()
        )

    def eliminar_leidas(self, usuario_id: UUID) -> int:
        return (
            NotificacionModel.delete()
            .where(
                (NotificacionModel.usuario_id == usuario_id)
                & (NotificacionModel.leida == True)  # noqa: E712
            )
            .execute()
        )
