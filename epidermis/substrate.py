"""Minimal spatial substrate: diameter growth and the division primitive.

These stand in for a full mechanical simulator. Growth adds a fixed diameter
increment per step. Division splits the mother's volume equally between mother
and daughter and pushes the two apart along a random direction.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from epidermis.cell import Cell
from epidermis.population import CellContainer


class GrowthModel:
    """Linear diameter growth applied to every cell once per step."""

    def __init__(self, growth_rate: float, dt: float = 1.0) -> None:
        if growth_rate < 0:
            raise ValueError("growth_rate must be non-negative")
        if dt <= 0:
            raise ValueError("dt must be positive")
        self.growth_rate = float(growth_rate)
        self.dt = float(dt)

    def grow(self, cells: Iterable[Cell]) -> None:
        increment = self.growth_rate * self.dt
        if increment == 0.0:
            return
        for cell in cells:
            cell.diameter += increment


class Divider:
    """Division primitive: ``divider(mother) -> daughter``.

    The daughter gets a fresh id from the container, copies the mother's
    lineage type and ``can_divide`` flag, and is not inserted into the
    container; the caller decides when it becomes visible.
    """

    def __init__(
        self,
        container: CellContainer[Cell],
        rng: np.random.Generator,
        min_bound: float,
        max_bound: float,
        bound_space: bool = True,
    ) -> None:
        self.container = container
        self.rng = rng
        self.min_bound = float(min_bound)
        self.max_bound = float(max_bound)
        self.bound_space = bound_space

    def _random_direction(self) -> np.ndarray:
        direction = self.rng.normal(size=3)
        norm = float(np.linalg.norm(direction))
        if norm == 0.0:
            return np.array([1.0, 0.0, 0.0])
        return direction / norm

    def _apply_bounds(self, position: np.ndarray) -> np.ndarray:
        if not self.bound_space:
            return position
        return np.clip(position, self.min_bound, self.max_bound)

    def __call__(self, mother: Cell) -> Cell:
        half_volume = mother.volume / 2.0
        mother.set_volume(half_volume)
        offset = self._random_direction() * (mother.diameter / 4.0)

        daughter = Cell(
            position=self._apply_bounds(mother.position + offset),
            diameter=mother.diameter,
            cell_type=mother.cell_type,
            can_divide=mother.can_divide,
            cell_id=self.container.new_id(),
            parent_id=mother.cell_id,
            generation=mother.generation + 1,
        )
        mother.position = self._apply_bounds(mother.position - offset)
        return daughter
