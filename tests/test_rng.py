import pytest

from parsim.model import EPSILON2, G
from parsim.rng import XorShiftRandom, init_particles


def test_seed_is_offset():
    assert XorShiftRandom(0).state == 987654321


def test_seed_wraps_to_32_bits():
    assert XorShiftRandom(2**32 + 7).state == XorShiftRandom(7).state


def test_zero_state_is_fixed_point():
    rng = XorShiftRandom(-987654321)
    assert rng.state == 0
    assert rng.uniform() == 0.5
    assert rng.state == 0


def test_same_seed_same_sequence():
    a = XorShiftRandom(42)
    b = XorShiftRandom(42)
    assert [a.uniform() for _ in range(50)] == [b.uniform() for _ in range(50)]


def test_different_seeds_differ():
    a = XorShiftRandom(1)
    b = XorShiftRandom(2)
    assert [a.uniform() for _ in range(10)] != [b.uniform() for _ in range(10)]


@pytest.mark.parametrize("seed", [1, 17, 123456, 2**31 - 1])
def test_uniform_in_unit_interval(seed):
    rng = XorShiftRandom(seed)
    values = [rng.uniform() for _ in range(2000)]
    assert all(0.0 <= v < 1.0 for v in values)
    assert 0.4 < sum(values) / len(values) < 0.6


@pytest.mark.parametrize("seed", [1, 99])
def test_normal_in_unit_interval(seed):
    rng = XorShiftRandom(seed)
    values = [rng.normal() for _ in range(2000)]
    assert all(0.0 <= v < 1.0 for v in values)
    assert 0.45 < sum(values) / len(values) < 0.55


def test_init_particles_count_and_bounds():
    side, ncside, n_part = 1.0, 4, 300
    particles = init_particles(7, side, ncside, n_part)
    assert len(particles) == n_part
    vmax = 0.5 * side / ncside / 5.0
    mmax = 0.01 * ncside * ncside / n_part / G * EPSILON2
    for p in particles:
        assert 0 <= p.x < side
        assert 0 <= p.y < side
        assert abs(p.vx) <= vmax
        assert abs(p.vy) <= vmax
        assert 0 <= p.m <= mmax * (1 + 1e-12)
        assert (p.fx, p.fy) == (0.0, 0.0)


def test_init_particles_is_deterministic():
    a = init_particles(3, 2.0, 5, 40)
    b = init_particles(3, 2.0, 5, 40)
    assert a == b


def test_positive_seed_draws_uniform():
    side = 3.0
    particles = init_particles(5, side, 4, 10)
    assert particles[0].x == XorShiftRandom(5).uniform() * side


def test_negative_seed_draws_normal():
    side = 3.0
    particles = init_particles(-5, side, 4, 10)
    assert particles[0].x == XorShiftRandom(5).normal() * side
    assert particles != init_particles(5, side, 4, 10)


def test_init_particles_empty():
    assert init_particles(1, 1.0, 2, 0) == []