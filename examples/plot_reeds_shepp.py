"""
Plot the shortest Reeds–Shepp path between two poses.

What it does:
- Builds a ReedsShepp planner from a turning radius (or steering bound and
  front overhang).
- Prints the path word, metric segment lengths and sample count.
- Plots the samples, coloured by gear, with start/goal arrows.

Run:
    python -m examples.plot_reeds_shepp --start 0 0 0 --goal 4 3 90 --radius 1.5

If you don't have matplotlib installed, install it with:
    pip install matplotlib
"""

import argparse
import logging
import math
from pathlib import Path

import numpy as np

from rsplanner import PlannerConfig, Pose, ReedsShepp, VehicleParams

try:
    import matplotlib.pyplot as plt
except ImportError:
    plt = None


def parse_args():
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--start", type=float, nargs=3, default=[0.0, 0.0, 0.0], metavar=("X", "Y", "YAW_DEG"))
    parser.add_argument("--goal", type=float, nargs=3, default=[4.0, 3.0, 90.0], metavar=("X", "Y", "YAW_DEG"))
    parser.add_argument("--radius", type=float, default=None, help="minimum turning radius (m)")
    parser.add_argument("--front-edge", type=float, default=VehicleParams.front_edge_to_center)
    parser.add_argument("--max-steer-deg", type=float, default=30.0)
    parser.add_argument("--step", type=float, default=0.1, help="sample spacing (m)")
    parser.add_argument("--no-show", action="store_true", help="only save the figure")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args()


def build_planner(args) -> ReedsShepp:
    params = VehicleParams(front_edge_to_center=args.front_edge)
    if args.radius is not None:
        config = PlannerConfig.from_turning_radius(args.radius, params.front_edge_to_center, args.step)
    else:
        config = PlannerConfig(step_size=args.step, max_steering=math.radians(args.max_steer_deg))
    return ReedsShepp(params, config)


def plot(path, start: Pose, goal: Pose, title: str, show: bool = True):
    if plt is None:
        print("matplotlib not available; install it with `pip install matplotlib` to see the plot.")
        return

    fig, ax = plt.subplots(figsize=(6, 5))
    fwd = path.gear
    ax.scatter(path.x[fwd], path.y[fwd], s=6, c="tab:blue", label="forward")
    ax.scatter(path.x[~fwd], path.y[~fwd], s=6, c="tab:red", label="reverse")
    ax.plot(path.x, path.y, c="gray", lw=0.8, alpha=0.6)
    arrow = max(0.3, 0.05 * path.total_length)
    for pose, color, label in ((start, "green", "start"), (goal, "black", "goal")):
        ax.arrow(
            pose.x,
            pose.y,
            arrow * math.cos(pose.heading),
            arrow * math.sin(pose.heading),
            width=0.02 * arrow,
            color=color,
            label=label,
        )
    ax.set_aspect("equal")
    ax.set_title(title)
    ax.legend(loc="best")
    out_dir = Path(__file__).resolve().parent / "outputs"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / f"reeds_shepp_{path.word.lower()}.png"
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"Saved: {out_path}")
    if show:
        plt.show()


def main():
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    planner = build_planner(args)
    start = Pose(args.start[0], args.start[1], math.radians(args.start[2]))
    goal = Pose(args.goal[0], args.goal[1], math.radians(args.goal[2]))

    path = planner.shortest_rsp(start, goal)
    if path is None:
        print("No Reeds–Shepp path found.")
        return

    lengths = ", ".join(f"{t.value}{length:+.3f}" for t, length in zip(path.segment_types, path.segment_lengths))
    radius = planner.vehicle_params.min_turn_radius(planner.config.max_steering)
    print(f"turning radius: {radius:.3f} m")
    print(f"word: {path.word}  segments: {lengths}")
    print(f"length: {path.total_length:.3f} m, samples: {len(path)}, gear switches: {path.gear_switches}")
    end_err = float(np.hypot(path.x[-1] - goal.x, path.y[-1] - goal.y))
    print(f"end position error: {end_err:.2e} m")
    plot(path, start, goal, title=f"Reeds–Shepp {path.word} ({path.total_length:.2f} m)", show=not args.no_show)


if __name__ == "__main__":
    main()
