"""Uniform square grid of cells over the periodic simulation space."""

from __future__ import annotations

from collections.abc import Sequence

from parsim.model import Cell, CenterOfMass, Particle

_NEIGHBOUR_OFFSETS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class Grid:
    """An ``ncside`` by ``ncside`` grid of cells covering a square of side ``side``."""

    def __init__(self, side: float, ncside: int) -> None:
        if side <= 0:
            raise ValueError("side must be positive")
        if ncside <= 0:
            raise ValueError("ncside must be positive")
        self.side = side
        self.ncside = ncside
        self.inv_cell_side = ncside / side
        self.cells = [Cell() for _ in range(ncside * ncside)]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, cell_idx: int) -> Cell:
        return self.cells[cell_idx]

    def cell_index(self, x: float, y: float) -> int:
        """Index of the cell holding the point (x, y)."""
        cell_x = int(x * self.inv_cell_side)
        cell_y = int(y * self.inv_cell_side)
        return cell_x + cell_y * self.ncside

    def distribute(self, particles: Sequence[Particle]) -> None:
        """Assign every particle that has not collided to the cell holding it."""
        for cell in self.cells:
            cell.reset()
        for i, p in enumerate(particles):
            if not p.alive:
                continue
            cell_idx = self.cell_index(p.x, p.y)
            self.cells[cell_idx].parts.append(i)
            p.cell_idx = cell_idx

    def _wrap(self, coord: int) -> tuple[int, float]:
        if coord < 0:
            return self.ncside - 1, -self.side
        if coord >= self.ncside:
            return 0, self.side
        return coord, 0.0

    def adjacent_centers(self, cell_idx: int) -> list[CenterOfMass]:
        """Centers of mass of the eight neighbours, shifted across periodic edges."""
        x = cell_idx % self.ncside
        y = cell_idx // self.ncside
        centers = []
        for off_x, off_y in _NEIGHBOUR_OFFSETS:
            ax, dx = self._wrap(x + off_x)
            ay, dy = self._wrap(y + off_y)
            cell = self.cells[ax + ay * self.ncside]
            centers.append(CenterOfMass(cell.x + dx, cell.y + dy, cell.m))
        return centers