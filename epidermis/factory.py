"""Bulk creation of seed cells on a fixed plane.

Seed cells are scattered uniformly over a square region of the x/y plane with
z fixed at 0; the substrate later moves them along z. All cells created by one
call are committed together.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence, TypeVar

import numpy as np

from epidermis.errors import InvalidCount, InvalidRange
from epidermis.population import CellContainer

logger = logging.getLogger(__name__)

T = TypeVar("T")


def validate_bounds(min_bound: float, max_bound: float) -> None:
    if not min_bound < max_bound:
        raise InvalidRange(f"min_bound must be less than max_bound; got [{min_bound}, {max_bound}]")


def validate_count(num_cells: int) -> None:
    if num_cells < 0:
        raise InvalidCount(f"num_cells must be non-negative; got {num_cells}")


def create_cells(
    min_bound: float,
    max_bound: float,
    num_cells: int,
    cell_builder: Callable[[Sequence[float]], T],
    container: CellContainer[T],
    rng: np.random.Generator,
) -> None:
    """Build ``num_cells`` cells at random (x, y, 0) positions and commit them.

    Positions are drawn from ``[min_bound, max_bound)`` on x and y. Bounds and
    count are checked before anything is staged, so a failing call leaves the
    container untouched.
    """
    validate_bounds(min_bound, max_bound)
    validate_count(num_cells)

    container.reserve(num_cells)
    try:
        for _ in range(num_cells):
            x = float(rng.uniform(min_bound, max_bound))
            y = float(rng.uniform(min_bound, max_bound))
            # z stays at 0; cells migrate along z later
            z = 0.0
            container.push_back(cell_builder((x, y, z)))
    except Exception:
        container.rollback()
        raise
    container.commit()
    logger.info("Created %d cells in [%s, %s)", num_cells, min_bound, max_bound)
