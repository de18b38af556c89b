# parsim

parsim simulates particles moving under gravity in a square, periodic
two-dimensional space. The space is split into a grid of `ncside × ncside`
cells. Two things pull on each particle: every other particle in its own cell,
and the centre of mass of each of the eight cells around it. Particles that
leave the square re-enter on the opposite side. Two particles collide when
they are in the same cell and their distance is 0.005 or less. A collision sets
the mass of both particles to zero, and they then take no further part in the
simulation.

The initial particles come from a fixed 32-bit xorshift generator, so a given
seed always gives the same starting state. A positive seed draws every value
from a uniform distribution: position, velocity and mass. A negative seed
draws them from a normal distribution with mean 0.5, truncated to [0, 1).

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Command line

```
parsim <seed> <side> <ncside> <n_part> <time_steps>
```

- `seed`: integer seed. A negative value selects the normal distribution.
- `side`: length of one side of the square space.
- `ncside`: number of grid cells along each side.
- `n_part`: number of particles.
- `time_steps`: number of time steps to simulate. Each step lasts 0.1.

The command writes two lines to standard output:

1. the final position of particle 0, as `x y` with three decimals;
2. the total number of collisions.

It writes the elapsed time to standard error, for example `0.0s`.

If an argument is missing or is not a number, the command prints a usage
message and exits with status 2. If `side`, `ncside` or `n_part` is not
positive, it prints an error and exits with status 1.

```
$ parsim 1 2 3 10 1
```

## Library

```python
from parsim.simulation import Simulation, simulate

# One call: final x and y of particle 0, and the total collision count.
x, y, collisions = simulate(1, 2.0, 3, 10, 1)

# Step by step:
sim = Simulation(1, 2.0, 3, 10, symmetric=True)
sim.step()             # one step; returns the collisions in that step
sim.run(5)             # five more steps; returns their collisions
sim.collisions         # running total of collisions
sim.steps              # number of steps taken
sim.particle_0         # the first particle generated
```

`Simulation` raises `ValueError` if `n_part`, `side` or `ncside` is not
positive.

The `symmetric` flag chooses how forces between particles in the same cell are
applied:

- `symmetric=True` (the default) computes each pair once and applies the force
  to both particles with opposite signs.
- `symmetric=False` has each particle add up, on its own, the forces that act
  on it.

### Modules

- `parsim.model`: the `Particle`, `Cell` and `CenterOfMass` records, and the
  constants `G`, `EPSILON2`, `DELTAT` and `ADJ_CELLS`.
- `parsim.rng`: `XorShiftRandom`, with `uniform()` and `normal()`, and
  `init_particles(seed, side, ncside, n_part)`.
- `parsim.grid`: `Grid`. It finds the cell that holds a point
  (`cell_index`), assigns particles that have not collided to cells
  (`distribute`), and returns the centres of mass of the eight neighbours of a
  cell, shifted across the periodic edges (`adjacent_centers`).
- `parsim.physics`: `compute_force` and the four phases of a step:
  `compute_center_of_mass`, `compute_forces`, `compute_new_positions` and
  `check_collisions`.
- `parsim.decomposition`: helpers that split the grid rows into contiguous
  blocks, one per worker:
  - `block_low`, `block_high`, `block_size`, `block_owner`;
  - `dynamic_chunk_size`;
  - `Block`, which gives local cell indices, tells whether a block owns a
    cell, and tells which neighbouring rank an outside cell belongs to;
  - `local_particles`, which selects the initial particles that start inside
    a block.
- `parsim.cli`: `parse_args`, `format_result` and `main`, the entry point of
  the `parsim` command.

## What it does not do

Every simulation runs in a single process. `parsim.decomposition` only works
out which rows, cells and initial particles belong to each block. Nothing in
the package runs the blocks in parallel or moves particles and centres of mass
between them.