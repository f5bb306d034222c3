"""Epidermis lineage-differentiation simulation package.

Stem cells seeded on a plane divide into transit-amplifying and differentiated
cells according to diameter-gated lineage rules.

Main entry points:
- epidermis.simulator: LineageSimulator class for programmatic use
- epidermis.factory: bulk creation of seed cells
- epidermis.lineage: the per-lineage rules and their dispatch table
- epidermis.io: config loading and CSV output
"""

from epidermis.cell import Cell, LineageType
from epidermis.config import SimulationConfig
from epidermis.errors import DivisionError, InvalidCount, InvalidRange
from epidermis.factory import create_cells
from epidermis.io import (
    load_simulation_config,
    load_snapshot_csv,
    save_census_csv,
    save_snapshot_csv,
)
from epidermis.lineage import (
    RULES,
    Branch,
    DifferentiatedRule,
    StemRule,
    TransitAmplifyingRule,
    assign_lineage,
    rule_for,
    run_rule,
)
from epidermis.population import CellContainer
from epidermis.simulator import LineageSimulator, stem_cell_builder
from epidermis.substrate import Divider, GrowthModel

__all__ = [
    # Core classes
    "Cell",
    "CellContainer",
    "LineageType",
    "LineageSimulator",
    "SimulationConfig",
    "StemRule",
    "TransitAmplifyingRule",
    "DifferentiatedRule",
    "Branch",
    "Divider",
    "GrowthModel",
    "RULES",
    # Errors
    "InvalidRange",
    "InvalidCount",
    "DivisionError",
    # Functions
    "assign_lineage",
    "create_cells",
    "rule_for",
    "run_rule",
    "stem_cell_builder",
    "load_simulation_config",
    "save_snapshot_csv",
    "load_snapshot_csv",
    "save_census_csv",
]
