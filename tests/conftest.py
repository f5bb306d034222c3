"""
Pytest configuration for epidermis tests.
"""
import os
import sys

import numpy as np
import pytest

# Add repository root to Python path so tests can import the epidermis package
root_path = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, root_path)

from epidermis.cell import Cell, LineageType  # noqa: E402
from epidermis.population import CellContainer  # noqa: E402


class RecordingDivider:
    """Division primitive stand-in that records every call."""

    def __init__(self):
        self.calls = []
        self._next_id = 1000

    def __call__(self, mother):
        self.calls.append(mother.cell_id)
        daughter = Cell(
            position=mother.position.copy(),
            diameter=mother.diameter,
            cell_type=mother.cell_type,
            can_divide=mother.can_divide,
            cell_id=self._next_id,
            parent_id=mother.cell_id,
            generation=mother.generation + 1,
        )
        self._next_id += 1
        return daughter


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def container():
    return CellContainer()


@pytest.fixture
def divider():
    return RecordingDivider()


@pytest.fixture
def make_cell():
    def _make(diameter, cell_type=LineageType.STEM, can_divide=True, cell_id=0):
        return Cell(
            position=np.array([10.0, 20.0, 0.0]),
            diameter=diameter,
            cell_type=cell_type,
            can_divide=can_divide,
            cell_id=cell_id,
        )
    return _make
