"""Command line entry point: run a simulation and print particle 0 and the collisions."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence

from parsim.simulation import Simulation


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parsim",
        description="Simulate gravitating particles on a periodic square grid.",
    )
    parser.add_argument("seed", type=int, help="random seed; negative selects a normal distribution")
    parser.add_argument("side", type=float, help="side of the square space")
    parser.add_argument("ncside", type=int, help="number of cells on each side of the grid")
    parser.add_argument("n_part", type=int, help="number of particles")
    parser.add_argument("time_steps", type=int, help="number of time steps")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse ``seed side ncside n_part time_steps``; exits with a usage message on error."""
    return _build_parser().parse_args(argv)


def format_result(x: float, y: float, collisions: int) -> str:
    """The program's output: particle 0's position and the collision count."""
    return f"{x:.3f} {y:.3f}\n{collisions}\n"


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        sim = Simulation(args.seed, args.side, args.ncside, args.n_part)
    except ValueError as exc:
        print(f"parsim: {exc}", file=sys.stderr)
        return 1

    start = time.perf_counter()
    sim.run(args.time_steps)
    elapsed = time.perf_counter() - start
    print(f"{elapsed:.1f}s", file=sys.stderr)

    p = sim.particle_0
    sys.stdout.write(format_result(p.x, p.y, sim.collisions))
    return 0


if __name__ == "__main__":
    sys.exit(main())