# pidcore/errors.py

class PIDError(Exception):
    """Error base del paquete."""

class ConfigurationError(PIDError, ValueError):
    """Ganancias o cota de salida rechazadas (solo en modo strict)."""

class StepError(PIDError, ValueError):
    """Precondición violada en update_checked()."""
