# pidcore/modes.py
from enum import Enum

class Mode(Enum):
    P = "P"
    PI = "PI"
    PD = "PD"
    PID = "PID"

    @property
    def uses_integral(self):
        return self in (Mode.PI, Mode.PID)

    @property
    def uses_derivative(self):
        return self in (Mode.PD, Mode.PID)

def select_mode(p, i, d) -> Mode:
    """
    Elige el modo de evaluación a partir de las ganancias estrictamente
    positivas. Cualquier otra combinación (todo cero, negativos, NaN)
    cae en PID.
    """
    if p > 0 and i > 0 and d > 0:
        return Mode.PID
    if p > 0 and i > 0:
        return Mode.PI
    if p > 0 and d > 0:
        return Mode.PD
    if p > 0:
        return Mode.P
    return Mode.PID
