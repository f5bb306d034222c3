"""Simulation configuration for epidermis lineage dynamics.

Defines the bounded domain, the seed population (count and initial diameter),
the growth substrate rate and the number of scheduler steps. Values are set
once before the simulation starts and are immutable afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from epidermis.errors import InvalidCount, InvalidRange


@dataclass(frozen=True)
class SimulationConfig:
    """Configuration parameters for the lineage simulation."""
    min_bound: float = 0.0
    max_bound: float = 250.0
    initial_cell_count: int = 200
    initial_diameter: float = 2.0
    n_steps: int = 1
    random_seed: int = 0
    growth_rate: float = 0.0
    dt: float = 1.0
    bound_space: bool = True
    out_path: str | None = None
    census_out_path: str | None = None

    def __post_init__(self) -> None:
        if not self.min_bound < self.max_bound:
            raise InvalidRange("min_bound must be less than max_bound")
        if self.initial_cell_count < 0:
            raise InvalidCount("initial_cell_count must be non-negative")
        if self.initial_diameter < 0:
            raise ValueError("initial_diameter must be non-negative")
        if self.n_steps < 0:
            raise ValueError("n_steps must be non-negative")
        if self.growth_rate < 0:
            raise ValueError("growth_rate must be non-negative")
        if self.dt <= 0:
            raise ValueError("dt must be positive")
        if not isinstance(self.bound_space, bool):
            raise ValueError("bound_space must be boolean")
