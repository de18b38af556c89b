"""Row-block decomposition of the cell grid among cooperating processes."""

from __future__ import annotations

from dataclasses import dataclass

from parsim.model import Particle
from parsim.rng import init_particles


def block_low(rank: int, processes: int, ncside: int) -> int:
    """First grid row owned by ``rank``."""
    return rank * ncside // processes


def block_high(rank: int, processes: int, ncside: int) -> int:
    """Last grid row owned by ``rank``."""
    return block_low(rank + 1, processes, ncside) - 1


def block_size(rank: int, processes: int, ncside: int) -> int:
    """Number of grid rows owned by ``rank``."""
    return block_high(rank, processes, ncside) - block_low(rank, processes, ncside) + 1


def block_owner(index: int, processes: int, ncside: int) -> int:
    """Rank owning grid row ``index``."""
    return (processes * (index + 1) - 1) // ncside


_CHUNK_STEPS = (
    (100, 10),
    (250, 25),
    (500, 50),
    (1000, 100),
    (2500, 250),
    (5000, 500),
    (100000, 1000),
)


def dynamic_chunk_size(count: int) -> int:
    """Growth step for a collection that already holds ``count`` items."""
    for limit, chunk in _CHUNK_STEPS:
        if count < limit:
            return chunk
    return 2500


@dataclass(frozen=True)
class Block:
    """The rows of the grid owned by one process, plus a ghost row on each side.

    Local cell indices start with the ghost row above the block, so the
    owned cells are those from ``ncside`` up to ``ncside * (size + 1)``.
    """

    rank: int
    processes: int
    ncside: int
    side: float

    def __post_init__(self) -> None:
        if self.processes <= 0:
            raise ValueError("processes must be positive")
        if not 0 <= self.rank < self.processes:
            raise ValueError("rank must lie in [0, processes)")
        if self.ncside <= 0:
            raise ValueError("ncside must be positive")
        if self.side <= 0:
            raise ValueError("side must be positive")

    @property
    def low(self) -> int:
        return block_low(self.rank, self.processes, self.ncside)

    @property
    def high(self) -> int:
        return block_high(self.rank, self.processes, self.ncside)

    @property
    def size(self) -> int:
        return block_size(self.rank, self.processes, self.ncside)

    @property
    def n_local_cells(self) -> int:
        return self.ncside * self.size

    @property
    def inv_cell_side(self) -> float:
        return self.ncside / self.side

    @property
    def prev_rank(self) -> int:
        return (self.rank - 1 + self.processes) % self.processes

    @property
    def next_rank(self) -> int:
        return (self.rank + 1) % self.processes

    def local_cell_index(self, x: float, y: float) -> int:
        """Local index of the cell holding point (x, y); may fall outside the block."""
        cell_x = int(x * self.inv_cell_side)
        cell_y = int(y * self.inv_cell_side)
        global_idx = cell_x + cell_y * self.ncside
        return global_idx - (self.low - 1) * self.ncside

    def owns_cell(self, cell_idx: int) -> bool:
        """True when a local cell index falls in this block's own rows."""
        return 0 <= cell_idx - self.ncside < self.size * self.ncside

    def is_prev(self, cell_idx: int) -> bool:
        """True if a cell outside the block belongs to the previous rank, False if to the next."""
        if self.rank == 0 and cell_idx >= (self.size + 2) * self.ncside:
            return True
        if self.rank == self.processes - 1 and cell_idx < 0:
            return False
        return cell_idx < self.ncside


def local_particles(seed: int, side: float, ncside: int, n_part: int, block: Block) -> list[Particle]:
    """The initial particles that start inside ``block``.

    The first generated particle is flagged with ``is_particle_0``; when the
    block keeps it, it is the first element of the result.
    """
    kept = []
    for i, p in enumerate(init_particles(seed, side, ncside, n_part)):
        if block.owns_cell(block.local_cell_index(p.x, p.y)):
            p.is_particle_0 = i == 0
            kept.append(p)
    return kept