# pidcore/utils.py
import numpy as np

def clip_symmetric(x, bound):
    """
    Limita x a [-bound, bound] componente a componente (cubo, no norma).
    Por comparación: x < -b -> -b ; x < b -> x ; si no -> b.
    Un NaN no pasa ninguna comparación y satura a +bound.
    """
    x = np.asarray(x, dtype=float)
    return np.where(x < -bound, -bound, np.where(x < bound, x, bound))

def all_finite(x):
    """True si todas las componentes de x son finitas."""
    return bool(np.all(np.isfinite(x)))
