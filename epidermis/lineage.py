"""Lineage rule engine for stem -> transit-amplifying -> differentiated cells.

Each lineage type is bound to exactly one rule through the ``RULES`` dispatch
table. A rule runs once per cell per step and, based on the current diameter,
either divides the cell (choosing the daughter's lineage), retires it
(``can_divide = False``), or leaves it alone.

Division ladders (d = diameter):

    Stem:               d < 5  -> Stem daughter
                        d < 8  -> TransitAmplifying daughter
                        else   -> retire
    TransitAmplifying:  d < 8  -> TransitAmplifying daughter
                        d < 10 -> Differentiated daughter
                        else   -> retire
    Differentiated:     never divides; d > 10 re-affirms the type

The differentiating branch is asymmetric: only the daughter advances to the
next stage, the mother keeps her type and stays active.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Dict, Optional

from epidermis.cell import Cell, LineageType
from epidermis.errors import DivisionError

logger = logging.getLogger(__name__)

DivideFn = Callable[[Cell], Cell]

STEM_RENEW_DIAMETER = 5.0
STEM_DIFFERENTIATE_DIAMETER = 8.0
TA_RENEW_DIAMETER = 8.0
TA_DIFFERENTIATE_DIAMETER = 10.0
DIFFERENTIATED_RELABEL_DIAMETER = 10.0


class Branch(enum.Enum):
    """Outcome of a proliferative rule's threshold ladder."""
    SELF_RENEW = "self_renew"
    DIFFERENTIATE = "differentiate"
    RETIRE = "retire"


def assign_lineage(cell: Cell, lineage: LineageType, can_divide: Optional[bool] = None) -> None:
    """Set a cell's lineage type, which also selects the rule that runs on it.

    This is the only place cell types are written, so a cell's recorded type and
    its behavior cannot drift apart.
    """
    cell.cell_type = LineageType(lineage)
    if can_divide is not None:
        cell.can_divide = bool(can_divide)


class LineageRule:
    """Per-lineage decision function applied once per cell per step."""
    lineage: LineageType

    def run(self, cell: Cell, divide: DivideFn) -> Optional[Cell]:
        """Apply the rule to ``cell``; return the daughter if one was created."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ProliferativeRule(LineageRule):
    """Three-branch divide / differentiate / retire ladder."""
    next_lineage: LineageType
    renew_below: float
    differentiate_below: float

    def select_branch(self, diameter: float, cell_type: LineageType) -> Branch:
        if cell_type != self.lineage:
            return Branch.RETIRE
        if diameter < self.renew_below:
            return Branch.SELF_RENEW
        if diameter < self.differentiate_below:
            return Branch.DIFFERENTIATE
        # Also catches NaN diameters.
        return Branch.RETIRE

    def run(self, cell: Cell, divide: DivideFn) -> Optional[Cell]:
        if not cell.can_divide:
            return None
        branch = self.select_branch(cell.diameter, cell.cell_type)
        if branch is Branch.RETIRE:
            cell.can_divide = False
            logger.debug(
                "Retired %s cell %s at diameter %.3f", cell.cell_type.name, cell.cell_id, cell.diameter
            )
            return None

        daughter = divide(cell)
        if daughter is None:
            raise DivisionError(f"Division primitive returned no daughter for cell {cell.cell_id}")
        daughter_type = self.lineage if branch is Branch.SELF_RENEW else self.next_lineage
        assign_lineage(daughter, daughter_type, can_divide=True)
        return daughter


class StemRule(ProliferativeRule):
    lineage = LineageType.STEM
    next_lineage = LineageType.TRANSIT_AMPLIFYING
    renew_below = STEM_RENEW_DIAMETER
    differentiate_below = STEM_DIFFERENTIATE_DIAMETER


class TransitAmplifyingRule(ProliferativeRule):
    lineage = LineageType.TRANSIT_AMPLIFYING
    next_lineage = LineageType.DIFFERENTIATED
    renew_below = TA_RENEW_DIAMETER
    differentiate_below = TA_DIFFERENTIATE_DIAMETER


class DifferentiatedRule(LineageRule):
    """Terminal stage: never divides and never touches ``can_divide``."""
    lineage = LineageType.DIFFERENTIATED

    def run(self, cell: Cell, divide: DivideFn) -> Optional[Cell]:
        if not cell.can_divide:
            return None
        if cell.diameter > DIFFERENTIATED_RELABEL_DIAMETER:
            assign_lineage(cell, LineageType.DIFFERENTIATED)
        return None


RULES: Dict[LineageType, LineageRule] = {
    LineageType.STEM: StemRule(),
    LineageType.TRANSIT_AMPLIFYING: TransitAmplifyingRule(),
    LineageType.DIFFERENTIATED: DifferentiatedRule(),
}


def rule_for(cell: Cell) -> LineageRule:
    """Look up the rule bound to the cell's current lineage type."""
    return RULES[LineageType(cell.cell_type)]


def run_rule(cell: Cell, divide: DivideFn) -> Optional[Cell]:
    """Run the cell's bound rule for one step."""
    return rule_for(cell).run(cell, divide)
