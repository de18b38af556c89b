"""Grid-based two-dimensional gravitational particle simulation with collision detection."""

__version__ = "0.1.0"
__all__ = ["model", "rng", "decomposition", "grid", "physics", "simulation", "cli"]