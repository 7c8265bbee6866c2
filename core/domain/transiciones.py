from dataclasses import dataclass
from enum import Enum

from core.domain.models.tarea import EstadoTarea


class DecisionNotificacion(Enum):
    NINGUNA = "ninguna"
    COMPLETADA = "completada"
    CAMBIO_ESTADO = "cambio_estado"


@dataclass(frozen=True, slots=True)
class Transicion:
    estado: EstadoTarea
    decision: DecisionNotificacion

    @property
    def es_cambio(self) -> bool:
        return self.decision is not DecisionNotificacion.NINGUNA


def transicionar(actual: EstadoTarea, solicitado: EstadoTarea) -> Transicion:
    """
    Calcula el estado resultante y qué aviso corresponde.

    Cualquier estado puede pasar a cualquier otro; repetir el estado
    actual no produce cambio ni aviso.
    """
    if actual is solicitado:
        return Transicion(actual, DecisionNotificacion.NINGUNA)
    if solicitado is EstadoTarea.COMPLETADA:
        return Transicion(solicitado, DecisionNotificacion.COMPLETADA)
    return Transicion(solicitado, DecisionNotificacion.CAMBIO_ESTADO)
