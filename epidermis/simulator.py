"""Step scheduler for the epidermis lineage simulation.

Each step first lets the substrate grow every cell, then runs the rule bound to
each cell's lineage type. Only cells alive at the start of the step are
visited; daughters born during a step become eligible on the next one.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Sequence

import numpy as np

from epidermis.cell import Cell, LineageType
from epidermis.config import SimulationConfig
from epidermis.factory import create_cells
from epidermis.lineage import assign_lineage, run_rule
from epidermis.population import CellContainer
from epidermis.substrate import Divider, GrowthModel

logger = logging.getLogger(__name__)


def stem_cell_builder(diameter: float) -> Callable[[Sequence[float]], Cell]:
    """Return a builder that makes an active stem cell of the given diameter."""

    def construct_stem(position: Sequence[float]) -> Cell:
        cell = Cell(position=np.asarray(position, dtype=np.float64), diameter=diameter)
        assign_lineage(cell, LineageType.STEM, can_divide=True)
        return cell

    return construct_stem


class LineageSimulator:
    """Seeds stem cells in a bounded domain and advances lineage rules."""

    def __init__(self, sim_config: SimulationConfig) -> None:
        self.sim_config = sim_config
        self.rng = np.random.default_rng(sim_config.random_seed)
        self.container: CellContainer[Cell] = CellContainer()
        self.growth = GrowthModel(sim_config.growth_rate, sim_config.dt)
        self.divider = Divider(
            self.container,
            self.rng,
            sim_config.min_bound,
            sim_config.max_bound,
            bound_space=sim_config.bound_space,
        )
        self.step_idx = 0
        self.census: List[dict] = []
        self._seeded = False

    def seed(self) -> None:
        """Populate the domain with the initial stem cells (runs once)."""
        if self._seeded:
            raise RuntimeError("Simulation has already been seeded")
        create_cells(
            self.sim_config.min_bound,
            self.sim_config.max_bound,
            self.sim_config.initial_cell_count,
            stem_cell_builder(self.sim_config.initial_diameter),
            self.container,
            self.rng,
        )
        self._seeded = True
        self.census.append(self._census_row())

    def step(self) -> int:
        """Advance one step and return the number of daughters created."""
        cells = list(self.container)
        self.growth.grow(cells)

        daughters: List[Cell] = []
        for cell in cells:
            daughter = run_rule(cell, self.divider)
            if daughter is not None:
                daughters.append(daughter)
        for daughter in daughters:
            self.container.add(daughter)

        self.step_idx += 1
        row = self._census_row()
        self.census.append(row)
        logger.debug(
            "Step %d: %d divisions, %d cells, %d retired",
            self.step_idx,
            len(daughters),
            row["n_cells"],
            row["n_retired"],
        )
        return len(daughters)

    def run(self, n_steps: int | None = None) -> list[dict]:
        """Seed if needed, run ``n_steps`` steps and return final cell snapshots."""
        if n_steps is None:
            n_steps = self.sim_config.n_steps
        if n_steps < 0:
            raise ValueError("n_steps must be non-negative")
        if not self._seeded:
            self.seed()
        for _ in range(n_steps):
            self.step()
        logger.info("Ran %d steps; population %d", n_steps, len(self.container))
        return [cell.snapshot() for cell in self.container]

    def _census_row(self) -> dict:
        row = {"step": self.step_idx}
        row.update(self.container.census())
        return row
