"""
Step scheduling: seeding, one-step-per-generation division and census.
"""
import numpy as np
import pytest

from epidermis.cell import LineageType
from epidermis.config import SimulationConfig
from epidermis.simulator import LineageSimulator


def test_seed_creates_stem_cells():
    sim = LineageSimulator(SimulationConfig(random_seed=1))
    sim.seed()
    assert len(sim.container) == 200
    assert all(cell.cell_type == LineageType.STEM for cell in sim.container)
    assert all(cell.diameter == 2.0 for cell in sim.container)
    assert sim.census[0]["n_stem"] == 200


def test_seed_runs_once():
    sim = LineageSimulator(SimulationConfig(initial_cell_count=2))
    sim.seed()
    with pytest.raises(RuntimeError):
        sim.seed()


def test_one_step_doubles_small_stem_population():
    sim = LineageSimulator(SimulationConfig(initial_cell_count=50, random_seed=3))
    rows = sim.run()
    assert len(rows) == 100
    assert all(row["cell_type"] == "STEM" for row in rows)
    assert all(row["can_divide"] for row in rows)
    daughters = [row for row in rows if row["parent_id"] is not None]
    assert len(daughters) == 50


def test_daughters_wait_for_next_step():
    sim = LineageSimulator(SimulationConfig(initial_cell_count=10, n_steps=0))
    sim.seed()
    assert sim.step() == 10
    assert sim.step() == 20
    assert len(sim.container) == 40


def test_mid_sized_stem_cell_spawns_transit_amplifying():
    sim = LineageSimulator(SimulationConfig(initial_cell_count=1, initial_diameter=6.0))
    sim.run()
    cells = sorted(sim.container, key=lambda c: c.cell_id)
    assert [c.cell_type for c in cells] == [LineageType.STEM, LineageType.TRANSIT_AMPLIFYING]
    assert cells[1].parent_id == cells[0].cell_id


def test_large_stem_cell_retires_without_dividing():
    sim = LineageSimulator(SimulationConfig(initial_cell_count=1, initial_diameter=9.0))
    rows = sim.run()
    assert len(rows) == 1
    assert rows[0]["can_divide"] is False
    assert sim.census[-1]["n_retired"] == 1


def test_growth_eventually_retires_everything():
    config = SimulationConfig(initial_cell_count=3, growth_rate=3.0, n_steps=12, random_seed=5)
    sim = LineageSimulator(config)
    sim.run()
    types = {cell.cell_type for cell in sim.container}
    assert LineageType.TRANSIT_AMPLIFYING in types
    assert LineageType.DIFFERENTIATED in types
    proliferative = [
        cell for cell in sim.container
        if cell.cell_type != LineageType.DIFFERENTIATED
    ]
    assert all(not cell.can_divide for cell in proliferative)
    assert sim.step() == 0


def test_census_has_row_per_step():
    sim = LineageSimulator(SimulationConfig(initial_cell_count=4, n_steps=3))
    sim.run()
    assert [row["step"] for row in sim.census] == [0, 1, 2, 3]
    assert [row["n_cells"] for row in sim.census] == [4, 8, 16, 32]


def test_positions_stay_in_bounds():
    config = SimulationConfig(min_bound=0.0, max_bound=20.0, initial_cell_count=30, n_steps=3)
    sim = LineageSimulator(config)
    sim.run()
    positions = np.array([cell.position for cell in sim.container])
    assert np.all(positions >= 0.0)
    assert np.all(positions <= 20.0)


def test_same_seed_is_reproducible():
    def run(seed):
        sim = LineageSimulator(SimulationConfig(initial_cell_count=20, n_steps=2, random_seed=seed))
        return [(row["x"], row["y"], row["z"]) for row in sim.run()]

    assert run(11) == run(11)


def test_negative_steps_rejected():
    sim = LineageSimulator(SimulationConfig(initial_cell_count=1))
    with pytest.raises(ValueError):
        sim.run(-1)


def test_empty_population_runs():
    sim = LineageSimulator(SimulationConfig(initial_cell_count=0, n_steps=2))
    assert sim.run() == []
    assert sim.census[-1]["n_cells"] == 0
