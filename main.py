# main.py
import argparse
from pathlib import Path
import numpy as np
from pidcore.io import read_gains_csv, write_history_csv
from pidcore.controllers import from_gains
from pidcore.body import PointMass, run_closed_loop

def main(argv=None):
    parser = argparse.ArgumentParser(description="Demo de lazos PID sobre cuerpos puntuales.")
    parser.add_argument("--gains", default=str(Path(__file__).parent / "config_csv" / "gains.csv"))
    parser.add_argument("--dt", type=float, default=0.02)
    parser.add_argument("--steps", type=int, default=500)
    parser.add_argument("--plot", action="store_true", help="mostrar la respuesta con matplotlib")
    parser.add_argument("--csv", default=None, help="exportar la traza vectorial a CSV")
    args = parser.parse_args(argv)

    gains = read_gains_csv(args.gains)

    # Caso A: altitud (escalar)
    alt = from_gains(gains["altitude"])
    body = PointMass(mass=1.0, position=0.0, damping=0.2)
    hA = run_closed_loop(alt, body, target=10.0, dt=args.dt, steps=args.steps)
    print(alt)
    print(f"Altitud final: {float(hA.position[-1]):.3f} (consigna 10.0)")

    # Caso B: posición 3D (vectorial, un lazo por eje)
    pos = from_gains(gains["position"], vector=True)
    body3 = PointMass(mass=2.0, position=np.zeros(3), velocity=np.zeros(3), damping=0.5)
    goal = np.array([5.0, 0.0, -5.0])
    hB = run_closed_loop(pos, body3, target=goal, dt=args.dt, steps=args.steps)
    print(pos)
    print("Posición final:", np.round(hB.position[-1], 3), "consigna", goal)

    if args.csv:
        write_history_csv(hB, args.csv)
        print(f"Traza guardada en {args.csv}")

    if args.plot:
        from ui.viz_matplotlib import plot_response
        plot_response(hA, show=False, title="A) Altitud (escalar)")
        plot_response(hB, show=True, title="B) Posición 3D (vectorial)")

if __name__ == "__main__":
    main()
