# pidcore/domains.py
"""
Dominios de valor del controlador: escalar (float64) y vector de 3 ejes.
Ambos exponen la misma capacidad: cero, conversión, clamp simétrico por
componente y test de finitud. La aritmética (+, *, /) la pone numpy.
"""
import numpy as np
from pidcore.utils import clip_symmetric, all_finite

class ScalarDomain:
    def zero(self):
        return np.float64(0.0)

    def coerce(self, x):
        v = np.asarray(x, dtype=float)
        if v.ndim != 0:
            raise ValueError(f"Se esperaba un escalar, obtuve forma {v.shape}")
        return np.float64(v)

    def clamp(self, x, bound):
        return np.float64(clip_symmetric(x, bound))

    def is_finite(self, x):
        return all_finite(x)

    def __repr__(self):
        return "ScalarDomain()"


class VectorDomain:
    """Vector de `size` componentes; el clamp es un cubo, ejes independientes."""
    def __init__(self, size=3):
        self.size = int(size)

    def zero(self):
        return np.zeros(self.size, dtype=float)

    def coerce(self, x):
        v = np.array(x, dtype=float)
        if v.shape != (self.size,):
            raise ValueError(f"Se esperaba un vector de forma ({self.size},), obtuve {v.shape}")
        return v

    def clamp(self, x, bound):
        return clip_symmetric(x, bound)

    def is_finite(self, x):
        return all_finite(x)

    def __repr__(self):
        return f"VectorDomain(size={self.size})"

SCALAR = ScalarDomain()
VECTOR3 = VectorDomain(3)
