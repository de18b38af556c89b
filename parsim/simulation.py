"""Driver that runs the particle simulation step by step."""

from __future__ import annotations

from parsim.grid import Grid
from parsim.model import Particle
from parsim.physics import (
    check_collisions,
    compute_center_of_mass,
    compute_forces,
    compute_new_positions,
)
from parsim.rng import init_particles


class Simulation:
    """A set of particles moving on a periodic square divided into a grid of cells.

    ``symmetric`` selects how forces between particles sharing a cell are
    evaluated: once per pair (applied to both) or separately for each particle.
    """

    def __init__(self, seed: int, side: float, ncside: int, n_part: int, symmetric: bool = True) -> None:
        if n_part <= 0:
            raise ValueError("n_part must be positive")
        self.grid = Grid(side, ncside)
        self.particles: list[Particle] = init_particles(seed, side, ncside, n_part)
        self.symmetric = symmetric
        self.collisions = 0
        self.steps = 0
        self.grid.distribute(self.particles)

    @property
    def particle_0(self) -> Particle:
        """The first particle generated, whose position is the reported result."""
        return self.particles[0]

    def step(self) -> int:
        """Advance one time step and return the collisions it produced."""
        compute_center_of_mass(self.grid, self.particles)
        compute_forces(self.grid, self.particles, self.symmetric)
        compute_new_positions(self.grid, self.particles)
        found = check_collisions(self.grid, self.particles)
        self.collisions += found
        self.steps += 1
        return found

    def run(self, time_steps: int) -> int:
        """Advance ``time_steps`` steps and return the collisions they produced."""
        return sum(self.step() for _ in range(time_steps))


def simulate(seed: int, side: float, ncside: int, n_part: int, time_steps: int) -> tuple[float, float, int]:
    """Run a whole simulation; return particle 0's final position and the total collisions."""
    sim = Simulation(seed, side, ncside, n_part)
    sim.run(time_steps)
    p = sim.particle_0
    return p.x, p.y, sim.collisions