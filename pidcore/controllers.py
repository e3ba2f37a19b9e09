# pidcore/controllers.py
import numpy as np
from pidcore.domains import SCALAR, VECTOR3
from pidcore.errors import ConfigurationError, StepError
from pidcore.io import PIDGains, read_gains_csv
from pidcore.modes import Mode, select_mode


class PIDController:
    """
    PID genérico sobre un dominio de valor (escalar o vector de 3 ejes).

    El modo (P, PI, PD, PID) se fija en configure()/reinit() a partir de las
    ganancias > 0 y no cambia hasta la siguiente configuración, aunque se
    modifiquen p/i/d a mano.

    Por defecto update() no protege nada: dt == 0 en PD/PID da un término
    derivativo inf/NaN y un error NaN llega al clamp, que por comparación
    lo satura a +max_out (el estado interno sí guarda el NaN).
    - guarded=True: error no finito, o dt == 0 con término I/D, devuelve cero
      sin tocar el estado.
    - update_checked(): misma cuenta, pero lanza StepError si la llamada
      viola las precondiciones.
    - strict=True: configure()/reinit() rechazan ganancias o cota negativas.
    - update_as(mode, ...): fuerza un camino de evaluación sin reconfigurar.
    """

    def __init__(self, p=0.0, i=0.0, d=0.0, max_out=0.0, domain=SCALAR,
                 guarded=False, strict=False):
        self.domain = domain
        self.guarded = bool(guarded)
        self.strict = bool(strict)
        self.p = self.i = self.d = self.max_out = 0.0
        self._i_err = domain.zero()
        self._prev_err = domain.zero()
        self._mode = Mode.PID
        self.configure(p, i, d, max_out)

    # ---------- Configuración ----------
    def configure(self, p, i, d, max_out, clear_errors=True):
        """Fija ganancias y cota, recalcula el modo y (por defecto) borra los errores."""
        if self.strict:
            _validate(p=p, i=i, d=d, max_out=max_out)
        self.p = float(p)
        self.i = float(i)
        self.d = float(d)
        self.max_out = float(max_out)
        self.reinit(clear_errors)

    def reinit(self, clear_errors=True):
        """Recalcula el modo con las ganancias actuales."""
        if self.strict:
            _validate(p=self.p, i=self.i, d=self.d, max_out=self.max_out)
        if clear_errors:
            self.reset()
        self._mode = select_mode(self.p, self.i, self.d)

    def reset(self):
        self._i_err = self.domain.zero()
        self._prev_err = self.domain.zero()

    # ---------- Paso de control ----------
    def update(self, error, dt):
        e = self.domain.coerce(error)
        dt = float(dt)
        if self.guarded and self._must_skip(e, dt):
            return self.domain.zero()
        return self._evaluate(self._mode, e, dt)

    def update_as(self, mode, error, dt):
        """Un paso por el camino `mode` (Mode o "P"/"PI"/"PD"/"PID"), sin cambiar self.mode."""
        return self._evaluate(Mode(mode), self.domain.coerce(error), float(dt))

    def _evaluate(self, mode, e, dt):
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            out = self._STEPS[mode](self, e, dt)
        return self.domain.clamp(out, self.max_out)

    def update_checked(self, error, dt):
        e = self.domain.coerce(error)
        dt = float(dt)
        if not np.isfinite(dt) or dt < 0:
            raise StepError(f"dt debe ser finito y >= 0, obtuve {dt}")
        if dt == 0 and self._mode.uses_derivative:
            raise StepError(f"dt == 0 en modo {self._mode.value}: derivada indefinida")
        if not self.domain.is_finite(e):
            raise StepError(f"error no finito: {e}")
        return self.update(e, dt)

    def _must_skip(self, e, dt):
        if not self.domain.is_finite(e):
            return True
        return dt == 0 and (self._mode.uses_integral or self._mode.uses_derivative)

    def _step_p(self, e, dt):
        return self.p * e

    def _step_pi(self, e, dt):
        self._i_err = self._i_err + dt * e
        return self.p * e + self.i * self._i_err

    def _step_pd(self, e, dt):
        d_err = (e - self._prev_err) / dt
        self._prev_err = e
        return self.p * e + self.d * d_err

    def _step_pid(self, e, dt):
        self._i_err = self._i_err + dt * e
        d_err = (e - self._prev_err) / dt
        self._prev_err = e
        return self.p * e + self.i * self._i_err + self.d * d_err

    _STEPS = {
        Mode.P: _step_p,
        Mode.PI: _step_pi,
        Mode.PD: _step_pd,
        Mode.PID: _step_pid,
    }

    # ---------- Lectura ----------
    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def integral_error(self):
        return self._i_err.copy()

    @property
    def previous_error(self):
        return self._prev_err.copy()

    @property
    def gains(self) -> PIDGains:
        return PIDGains(p=self.p, i=self.i, d=self.d, max_out=self.max_out)

    def __repr__(self):
        return (f"{type(self).__name__}(p={self.p}, i={self.i}, d={self.d}, "
                f"max_out={self.max_out}, mode={self._mode.value})")


class ScalarController(PIDController):
    def __init__(self, p=0.0, i=0.0, d=0.0, max_out=0.0, guarded=False, strict=False):
        super().__init__(p, i, d, max_out, domain=SCALAR, guarded=guarded, strict=strict)


class VectorController(PIDController):
    """PID de 3 ejes independientes con ganancias y cota compartidas."""
    def __init__(self, p=0.0, i=0.0, d=0.0, max_out=0.0, guarded=False, strict=False):
        super().__init__(p, i, d, max_out, domain=VECTOR3, guarded=guarded, strict=strict)


def _validate(**values):
    bad = {k: v for k, v in values.items() if not v >= 0}
    if bad:
        raise ConfigurationError(f"Valores negativos o NaN no permitidos: {bad}")


def from_gains(gains: PIDGains, vector=False, **kwargs) -> PIDController:
    """Construye un controlador escalar o vectorial a partir de un PIDGains."""
    cls = VectorController if vector else ScalarController
    return cls(gains.p, gains.i, gains.d, gains.max_out, **kwargs)


def load_controllers_from_csv(path, vector=False, **kwargs) -> dict:
    """Un controlador por fila de la tabla de ganancias (ver read_gains_csv)."""
    return {name: from_gains(g, vector=vector, **kwargs)
            for name, g in read_gains_csv(path).items()}
