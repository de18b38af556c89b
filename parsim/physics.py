"""The four phases of a simulation step: centers of mass, forces, motion, collisions."""

from __future__ import annotations

import math
from collections.abc import Sequence

from parsim.grid import Grid
from parsim.model import DELTAT, EPSILON2, G, CenterOfMass, Particle


def compute_force(x1: float, y1: float, m1: float, x2: float, y2: float, m2: float) -> tuple[float, float]:
    """Gravitational force that body 2 exerts on body 1."""
    dx = x2 - x1
    dy = y2 - y1
    dist_sq = dx * dx + dy * dy
    f = G * m1 * m2 / dist_sq
    inv_dist = 1.0 / math.sqrt(dist_sq)
    return f * dx * inv_dist, f * dy * inv_dist


def compute_center_of_mass(grid: Grid, particles: Sequence[Particle]) -> None:
    """Set each cell's total mass and center of mass from its particles."""
    for cell in grid:
        cell.x = cell.y = cell.m = 0.0
        for idx in cell.parts:
            p = particles[idx]
            cell.m += p.m
            cell.x += p.m * p.x
            cell.y += p.m * p.y
        if cell.m != 0:
            inv_mass = 1.0 / cell.m
            cell.x *= inv_mass
            cell.y *= inv_mass


def _add_center_forces(p: Particle, centers: Sequence[CenterOfMass]) -> None:
    for cm in centers:
        if cm.m != 0:
            fx, fy = compute_force(p.x, p.y, p.m, cm.x, cm.y, cm.m)
            p.fx += fx
            p.fy += fy


def _forces_symmetric(grid: Grid, particles: Sequence[Particle]) -> None:
    for cell_idx, cell in enumerate(grid):
        if not cell.parts:
            continue
        centers = grid.adjacent_centers(cell_idx)
        for j, idx in enumerate(cell.parts):
            p1 = particles[idx]
            if not p1.alive:
                continue
            for other in cell.parts[j + 1:]:
                p2 = particles[other]
                if p2.alive:
                    fx, fy = compute_force(p1.x, p1.y, p1.m, p2.x, p2.y, p2.m)
                    p1.fx += fx
                    p1.fy += fy
                    p2.fx -= fx
                    p2.fy -= fy
            _add_center_forces(p1, centers)


def _forces_per_particle(grid: Grid, particles: Sequence[Particle]) -> None:
    for cell_idx, cell in enumerate(grid):
        if not cell.parts:
            continue
        centers = grid.adjacent_centers(cell_idx)
        for idx in cell.parts:
            p1 = particles[idx]
            if not p1.alive:
                continue
            p1.fx = p1.fy = 0.0
            for other in cell.parts:
                if other == idx:
                    continue
                p2 = particles[other]
                if p2.alive:
                    fx, fy = compute_force(p1.x, p1.y, p1.m, p2.x, p2.y, p2.m)
                    p1.fx += fx
                    p1.fy += fy
            _add_center_forces(p1, centers)


def compute_forces(grid: Grid, particles: Sequence[Particle], symmetric: bool = True) -> None:
    """Accumulate on each particle the forces from its cell mates and neighbouring cells.

    With ``symmetric`` each pair inside a cell is evaluated once and the force
    applied to both particles; otherwise every particle sums its own forces.
    """
    if symmetric:
        _forces_symmetric(grid, particles)
    else:
        _forces_per_particle(grid, particles)


def compute_new_positions(grid: Grid, particles: Sequence[Particle]) -> None:
    """Advance velocities and positions by one time step and redistribute the particles."""
    for p in particles:
        if not p.alive:
            continue
        inv_mass = 1.0 / p.m
        p.ax = p.fx * inv_mass
        p.ay = p.fy * inv_mass
        p.x += p.vx * DELTAT + 0.5 * p.ax * DELTAT * DELTAT
        p.y += p.vy * DELTAT + 0.5 * p.ay * DELTAT * DELTAT
        p.vx += p.ax * DELTAT
        p.vy += p.ay * DELTAT
        p.wrap(grid.side)
        p.fx = 0.0
        p.fy = 0.0
    grid.distribute(particles)


def check_collisions(grid: Grid, particles: Sequence[Particle]) -> int:
    """Mark particles closer than the collision radius as collided; return the collision count."""
    collisions = 0
    for cell in grid:
        for j, idx in enumerate(cell.parts):
            p1 = particles[idx]
            for other in cell.parts[j + 1:]:
                p2 = particles[other]
                if not p1.alive and not p2.alive:
                    continue
                dx = p1.x - p2.x
                dy = p1.y - p2.y
                if dx * dx + dy * dy <= EPSILON2:
                    if p1.alive and p2.alive:
                        collisions += 1
                    p1.m = 0.0
                    p2.m = 0.0
    return collisions