# pidcore/io.py
from __future__ import annotations
import numpy as np
import pandas as pd
from dataclasses import dataclass
from pidcore.modes import Mode, select_mode

@dataclass
class PIDGains:
    p: float = 0.0
    i: float = 0.0
    d: float = 0.0
    max_out: float = 0.0   # |salida| máxima por componente

    @property
    def mode(self) -> Mode:
        return select_mode(self.p, self.i, self.d)

# ---------- Lectura de CSV ----------
GAIN_COLUMNS = ["name", "p", "i", "d", "max_out"]

def read_gains_csv(path: str) -> dict[str, PIDGains]:
    """
    Tabla de ganancias, una fila por lazo de control:
        name,p,i,d,max_out
    """
    df = pd.read_csv(path)
    missing = [c for c in GAIN_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Faltan columnas en {path}: {missing}")
    if df["name"].duplicated().any():
        dup = df.loc[df["name"].duplicated(), "name"].tolist()
        raise ValueError(f"Nombres repetidos en {path}: {dup}")
    gains = {}
    for row in df[GAIN_COLUMNS].itertuples(index=False):
        gains[str(row.name)] = PIDGains(p=float(row.p), i=float(row.i),
                                        d=float(row.d), max_out=float(row.max_out))
    return gains

# ---------- Escritura de trazas ----------
def history_to_frame(history) -> pd.DataFrame:
    """
    Aplana una History (ver pidcore.body) a un DataFrame: una columna por
    magnitud y eje (position_x, error_x, ...) o sin sufijo si es escalar.
    """
    cols = {"time": np.asarray(history.time, dtype=float)}
    for key in ("target", "position", "error", "output"):
        data = np.asarray(getattr(history, key), dtype=float)
        if data.ndim == 1:
            cols[key] = data
        else:
            for k, axis in enumerate("xyz"[:data.shape[1]]):
                cols[f"{key}_{axis}"] = data[:, k]
    return pd.DataFrame(cols)

def write_history_csv(history, path: str) -> None:
    history_to_frame(history).to_csv(path, index=False)
