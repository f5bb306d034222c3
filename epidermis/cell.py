"""Cell state container for epidermis lineage simulations.

Represents a single cell with a position, a diameter, a lineage type and a
division-eligibility flag. No dynamics are implemented here; diameter and
position are advanced by the substrate, lineage fields by the rule engine.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

import numpy as np


class LineageType(enum.IntEnum):
    """Differentiation stage of a cell."""
    STEM = 1
    TRANSIT_AMPLIFYING = 2
    DIFFERENTIATED = 3


@dataclass
class Cell:
    """Mutable cell state for lineage simulation."""
    position: np.ndarray
    diameter: float
    cell_type: LineageType = LineageType.STEM
    can_divide: bool = True
    cell_id: Optional[int] = None
    parent_id: Optional[int] = None
    generation: int = 0

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=np.float64).copy()
        if self.position.shape != (3,):
            raise ValueError(f"position must have 3 coordinates; got shape {self.position.shape}")
        if self.diameter < 0:
            raise ValueError("diameter must be non-negative")

    @property
    def volume(self) -> float:
        return float(np.pi / 6.0 * self.diameter ** 3)

    def set_volume(self, volume: float) -> None:
        """Set the diameter from a sphere volume."""
        if volume < 0:
            raise ValueError("volume must be non-negative")
        self.diameter = float(np.cbrt(6.0 * volume / np.pi))

    def snapshot(self) -> dict:
        """Return lightweight snapshot dictionary for serialization."""
        return {
            "cell_id": self.cell_id,
            "parent_id": self.parent_id,
            "generation": self.generation,
            "x": float(self.position[0]),
            "y": float(self.position[1]),
            "z": float(self.position[2]),
            "diameter": self.diameter,
            "cell_type": self.cell_type.name,
            "can_divide": self.can_divide,
        }
