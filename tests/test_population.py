"""
Cell container: staging, bulk commit, ids and census.
"""
import numpy as np
import pytest

from epidermis.cell import Cell, LineageType


def _cell(cell_type=LineageType.STEM, can_divide=True, cell_id=None):
    return Cell(position=np.zeros(3), diameter=2.0, cell_type=cell_type, can_divide=can_divide, cell_id=cell_id)


def test_staged_cells_are_invisible_until_commit(container):
    container.reserve(3)
    for _ in range(3):
        container.push_back(_cell())
    assert len(container) == 0
    assert list(container) == []
    assert container.n_staged == 3

    assert container.commit() == 3
    assert len(container) == 3
    assert container.n_staged == 0


def test_commit_assigns_sequential_ids(container):
    for _ in range(4):
        container.push_back(_cell())
    container.commit()
    assert [cell.cell_id for cell in container] == [0, 1, 2, 3]
    assert container.get(2).cell_id == 2


def test_new_id_never_collides_with_committed(container):
    container.push_back(_cell(cell_id=10))
    container.commit()
    assert container.new_id() == 11


def test_add_is_immediate(container):
    cell = _cell()
    container.add(cell)
    assert len(container) == 1
    assert container.get(cell.cell_id) is cell


def test_duplicate_id_rejected(container):
    container.add(_cell(cell_id=3))
    with pytest.raises(ValueError):
        container.add(_cell(cell_id=3))


def test_unknown_id(container):
    with pytest.raises(KeyError):
        container.get(42)


def test_rollback_discards_staged(container):
    container.push_back(_cell())
    container.push_back(_cell())
    assert container.rollback() == 2
    assert container.commit() == 0
    assert len(container) == 0


def test_reserve_rejects_negative(container):
    with pytest.raises(ValueError):
        container.reserve(-1)


def test_census_counts_types_and_retired(container):
    container.add(_cell(LineageType.STEM))
    container.add(_cell(LineageType.STEM, can_divide=False))
    container.add(_cell(LineageType.TRANSIT_AMPLIFYING))
    container.add(_cell(LineageType.DIFFERENTIATED))
    assert container.census() == {
        "n_cells": 4,
        "n_stem": 2,
        "n_transit_amplifying": 1,
        "n_differentiated": 1,
        "n_retired": 1,
    }
