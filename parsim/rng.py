"""Deterministic xorshift generator and the initial particle set."""

from __future__ import annotations

import math
from collections.abc import Callable

from parsim.model import EPSILON2, G, Particle

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000
_SEED_OFFSET = 987654321
_SCALE = 0.2328306e-09


def _to_signed(value: int) -> int:
    value &= _MASK
    return value - (1 << 32) if value & _SIGN_BIT else value


class XorShiftRandom:
    """32-bit xorshift generator producing numbers in [0, 1)."""

    def __init__(self, seed: int) -> None:
        self.state = (seed + _SEED_OFFSET) & _MASK

    def uniform(self) -> float:
        """Next uniformly distributed number in [0, 1)."""
        before = self.state
        s = before
        s ^= (s << 13) & _MASK
        s ^= s >> 17
        s ^= (s << 5) & _MASK
        self.state = s
        return 0.5 + _SCALE * _to_signed(before + s)

    def normal(self) -> float:
        """Next number from a normal distribution of mean 0.5, cut to [0, 1)."""
        while True:
            u1 = self.uniform()
            u2 = self.uniform()
            if u1 <= 0:
                continue
            z = math.sqrt(-2 * math.log(u1)) * math.cos(2 * math.pi * u2)
            result = 0.5 + 0.15 * z
            if 0 <= result < 1:
                return result


def _draw_particle(draw: Callable[[], float], side: float, ncside: int, n_part: int) -> Particle:
    x = draw() * side
    y = draw() * side
    vx = (draw() - 0.5) * side / ncside / 5.0
    vy = (draw() - 0.5) * side / ncside / 5.0
    m = draw() * 0.01 * (ncside * ncside) / n_part / G * EPSILON2
    return Particle(x=x, y=y, vx=vx, vy=vy, m=m)


def init_particles(seed: int, side: float, ncside: int, n_part: int) -> list[Particle]:
    """Create the initial particles; a negative seed selects the normal distribution."""
    use_normal = seed < 0
    rng = XorShiftRandom(-seed if use_normal else seed)
    draw = rng.normal if use_normal else rng.uniform
    return [_draw_particle(draw, side, ncside, n_part) for _ in range(n_part)]