"""
Fan-out de notificaciones.

Convierte las solicitudes derivadas de una mutación en registros
persistidos. Es un sumidero de mejor esfuerzo: si una escritura falla se
registra en el log y se continúa con las demás, sin afectar a la mutación
de la tarea que ya se completó.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from core.domain.eventos import SolicitudNotificacion
from core.domain.models.notificacion import Notificacion
from core.domain.models.tarea import Tarea
from core.domain.ports.notificacion_repository import NotificacionRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ResultadoFanout:
    enviadas: list[Notificacion] = field(default_factory=list)
    fallidas: list[SolicitudNotificacion] = field(default_factory=list)

    @property
    def completo(self) -> bool:
        return not self.fallidas


@dataclass(slots=True)
class ResultadoMutacion:
    tarea: Tarea
    fanout: ResultadoFanout = field(default_factory=ResultadoFanout)


class NotificacionFanout:
    def __init__(self, repository: NotificacionRepository) -> None:
        self._repository = repository

    def emitir(self, solicitudes: Iterable[SolicitudNotificacion]) -> ResultadoFanout:
        resultado = ResultadoFanout()
        for solicitud in solicitudes:
            notificacion = solicitud.a_notificacion()
            try:
                self._repository.save(notificacion)
            except Exception:
                logger.exception(
                    f"⚠️ No se pudo guardar la notificación '{solicitud.tipo.value}' "
                    f"para {solicitud.usuario_id} (tarea {solicitud.tarea_id})"
                )
                resultado.fallidas.append(solicitud)
                continue
            resultado.enviadas.append(notificacion)
        return resultado
