"""Particles, grid cells and the physical constants of the simulation."""

from __future__ import annotations

from dataclasses import dataclass, field

G = 6.67408e-11
EPSILON2 = 0.005 * 0.005
DELTAT = 0.1
ADJ_CELLS = 8


@dataclass(slots=True)
class Particle:
    """A point mass moving on the periodic square."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    m: float = 0.0
    fx: float = 0.0
    fy: float = 0.0
    ax: float = 0.0
    ay: float = 0.0
    cell_idx: int = -1
    is_particle_0: bool = False

    @property
    def alive(self) -> bool:
        """False once the particle has collided (its mass is zero)."""
        return self.m != 0

    def wrap(self, side: float) -> None:
        """Bring a position that left the square by less than one side back inside."""
        if self.x < 0:
            self.x += side
        elif self.x >= side:
            self.x -= side

        if self.y < 0:
            self.y += side
        elif self.y >= side:
            self.y -= side


@dataclass(frozen=True, slots=True)
class CenterOfMass:
    """Position and total mass of a cell as seen from a neighbour."""

    x: float = 0.0
    y: float = 0.0
    m: float = 0.0


@dataclass(slots=True)
class Cell:
    """A grid cell: its center of mass and the indices of its particles."""

    x: float = 0.0
    y: float = 0.0
    m: float = 0.0
    parts: list[int] = field(default_factory=list)

    @property
    def n_part(self) -> int:
        return len(self.parts)

    @property
    def center(self) -> CenterOfMass:
        return CenterOfMass(self.x, self.y, self.m)

    def reset(self) -> None:
        """Forget the particles assigned to this cell."""
        self.parts.clear()