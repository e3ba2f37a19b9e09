# ui/viz_matplotlib.py
import numpy as np
import matplotlib.pyplot as plt

def plot_response(history, axes=None, show=True, title=None):
    """
    Tres paneles: posición vs consigna, error y salida del controlador.
    Historias vectoriales se dibujan un trazo por eje.
    """
    data = history.as_arrays()
    t = data["time"]
    if axes is None:
        fig, axes = plt.subplots(3, 1, sharex=True, figsize=(8, 6))
    ax_pos, ax_err, ax_out = axes

    for k, label in _axis_labels(data["position"]):
        pos = data["position"] if k is None else data["position"][:, k]
        ref = data["target"] if k is None else data["target"][:, k]
        line, = ax_pos.plot(t, pos, label=f"x{label}")
        ax_pos.plot(t, ref, "--", color=line.get_color(), alpha=0.6)
        ax_err.plot(t, data["error"] if k is None else data["error"][:, k], label=f"e{label}")
        ax_out.plot(t, data["output"] if k is None else data["output"][:, k], label=f"u{label}")

    ax_pos.set_ylabel("Posición")
    ax_err.set_ylabel("Error")
    ax_out.set_ylabel("Salida")
    ax_out.set_xlabel("t [s]")
    for ax in axes:
        ax.grid(True, alpha=0.3)
        ax.legend(loc="upper right")
    ax_pos.set_title(title or "Respuesta del lazo")

    if show:
        plt.show()
    return axes

def _axis_labels(values):
    if np.ndim(values) == 1:
        return [(None, "")]
    return [(k, f"_{a}") for k, a in enumerate("xyz"[:values.shape[1]])]
