"""
Reglas de permisos sobre tareas y notificaciones.

- Leer / actualizar: admin, creador o responsable.
- Eliminar: admin o creador.
- Notificaciones: solo su destinatario.
"""

from core.domain.errors import PermisoDenegadoError
from core.domain.models.notificacion import Notificacion
from core.domain.models.tarea import Tarea
from core.domain.models.usuario import Actor


def puede_leer(actor: Actor, tarea: Tarea) -> bool:
    return actor.es_admin or actor.id in tarea.participantes()


def puede_actualizar(actor: Actor, tarea: Tarea) -> bool:
    return actor.es_admin or actor.id in tarea.participantes()


def puede_eliminar(actor: Actor, tarea: Tarea) -> bool:
    return actor.es_admin or actor.id == tarea.creado_por


def exigir_lectura(actor: Actor, tarea: Tarea) -> None:
    if not puede_leer(actor, tarea):
        raise PermisoDenegadoError("No tiene permisos para ver esta tarea")


def exigir_actualizacion(actor: Actor, tarea: Tarea) -> None:
    if not puede_actualizar(actor, tarea):
        raise PermisoDenegadoError("No tiene permisos para actualizar esta tarea")


def exigir_eliminacion(actor: Actor, tarea: Tarea) -> None:
    if not puede_eliminar(actor, tarea):
        raise PermisoDenegadoError("Solo el creador puede eliminar esta tarea")


def exigir_destinatario(actor: Actor, notificacion: Notificacion) -> None:
    if notificacion.usuario_id != actor.id:
        raise PermisoDenegadoError(
            "No tiene permisos para modificar esta notificación"
        )
