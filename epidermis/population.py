"""Owning container for the simulated cell population.

Cells are addressed by integer ids allocated here. Bulk insertion goes through
``reserve`` / ``push_back`` / ``commit``: staged cells stay invisible to
iteration, ``len`` and lookups until ``commit`` publishes all of them at once.
"""

from __future__ import annotations

import logging
from typing import Dict, Generic, Iterator, List, TypeVar

from epidermis.cell import Cell, LineageType

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CellContainer(Generic[T]):
    """Committed cells plus a staging buffer for bulk inserts."""

    def __init__(self) -> None:
        self._cells: List[T] = []
        self._by_id: Dict[int, T] = {}
        self._staged: List[T] = []
        self._capacity_hint = 0
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[T]:
        return iter(self._cells)

    @property
    def n_staged(self) -> int:
        return len(self._staged)

    def new_id(self) -> int:
        """Allocate a fresh, never reused cell id."""
        cell_id = self._next_id
        self._next_id += 1
        return cell_id

    def reserve(self, n: int) -> None:
        """Capacity hint for an upcoming bulk insert."""
        if n < 0:
            raise ValueError("reserve count must be non-negative")
        self._capacity_hint = max(self._capacity_hint, len(self._cells) + n)

    def push_back(self, cell: T) -> None:
        """Stage a cell; it becomes visible on the next ``commit``."""
        self._staged.append(cell)

    def commit(self) -> int:
        """Publish every staged cell at once and return how many were added."""
        staged = self._staged
        self._staged = []
        for cell in staged:
            self._register(cell)
        self._cells.extend(staged)
        if staged:
            logger.debug("Committed %d cells (population %d)", len(staged), len(self._cells))
        return len(staged)

    def rollback(self) -> int:
        """Drop every staged cell without publishing it."""
        dropped = len(self._staged)
        self._staged = []
        return dropped

    def add(self, cell: T) -> None:
        """Insert a single cell immediately (used for division daughters)."""
        self._register(cell)
        self._cells.append(cell)

    def get(self, cell_id: int) -> T:
        try:
            return self._by_id[cell_id]
        except KeyError:
            raise KeyError(f"Unknown cell id: {cell_id}") from None

    def census(self) -> dict:
        """Count committed cells per lineage type plus retired cells."""
        counts = {"n_cells": len(self._cells)}
        for lineage in LineageType:
            counts[f"n_{lineage.name.lower()}"] = 0
        counts["n_retired"] = 0
        for cell in self._cells:
            if not isinstance(cell, Cell):
                continue
            counts[f"n_{cell.cell_type.name.lower()}"] += 1
            if not cell.can_divide:
                counts["n_retired"] += 1
        return counts

    def _register(self, cell: T) -> None:
        if getattr(cell, "cell_id", None) is None and hasattr(cell, "cell_id"):
            cell.cell_id = self.new_id()
        cell_id = getattr(cell, "cell_id", None)
        if cell_id is None:
            return
        if cell_id in self._by_id:
            raise ValueError(f"Duplicate cell id: {cell_id}")
        self._by_id[cell_id] = cell
        self._next_id = max(self._next_id, cell_id + 1)
