# pidcore/body.py
from dataclasses import dataclass, field
import numpy as np

class PointMass:
    """
    Cuerpo puntual (1D o 3D) movido por una fuerza.
    Integración de Euler semi-implícita: v += a*dt ; x += v*dt.
    """
    def __init__(self, mass=1.0, position=0.0, velocity=0.0, damping=0.0):
        if mass <= 0:
            raise ValueError(f"La masa debe ser > 0, obtuve {mass}")
        self.mass = float(mass)
        self.damping = float(damping)      # N·s/m
        self.x0 = np.array(position, dtype=float)
        self.v0 = np.array(velocity, dtype=float)
        self.reset()

    def reset(self):
        self.x = self.x0.copy()
        self.v = self.v0.copy()
        self.a = np.zeros_like(self.x)

    def step(self, force, dt):
        self.a = (np.asarray(force, dtype=float) - self.damping * self.v) / self.mass
        self.v = self.v + self.a * dt
        self.x = self.x + self.v * dt
        return self.x.copy()

@dataclass
class History:
    time: list = field(default_factory=list)
    target: list = field(default_factory=list)
    position: list = field(default_factory=list)
    error: list = field(default_factory=list)
    output: list = field(default_factory=list)

    def as_arrays(self):
        return {k: np.asarray(v, dtype=float) for k, v in self.__dict__.items()}

def run_closed_loop(controller, body, target, dt, steps):
    """
    Lazo cerrado simple: error = target - x -> controller -> fuerza -> body.
    `target` puede ser constante o un callable target(t).
    """
    hist = History()
    t = 0.0
    for _ in range(int(steps)):
        ref = np.asarray(target(t) if callable(target) else target, dtype=float)
        err = ref - body.x
        u = controller.update(err, dt)
        body.step(u, dt)
        t += dt
        hist.time.append(t)
        hist.target.append(ref)
        hist.position.append(body.x.copy())
        hist.error.append(err)
        hist.output.append(np.copy(u))
    return hist
