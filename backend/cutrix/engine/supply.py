from dataclasses import dataclass, field
from typing import Iterable, Optional

from cutrix.engine.matrix import Matrix, add_to_matrix
from cutrix.engine.ratio import SupplyBasis, task_output


@dataclass(frozen=True)
class SupplyMatrices:
    planned: Matrix = field(default_factory=dict)
    actual: Matrix = field(default_factory=dict)

    def for_basis(self, basis: SupplyBasis) -> Matrix:
        return self.planned if basis == SupplyBasis.PLANNED else self.actual


def supply_from_layouts(layouts: Optional[Iterable]) -> SupplyMatrices:
    planned: Matrix = {}
    actual: Matrix = {}
    for layout in layouts or []:
        ratios = layout.ratios or []
        for task in layout.tasks or []:
            # A color split across several layouts accumulates into one row.
            add_to_matrix(planned, task.color, task_output(ratios, task, SupplyBasis.PLANNED))
            add_to_matrix(actual, task.color, task_output(ratios, task, SupplyBasis.ACTUAL))
    return SupplyMatrices(
        planned={color: row for color, row in planned.items() if row},
        actual={color: row for color, row in actual.items() if row},
    )


def compute_supply_matrices(plan) -> SupplyMatrices:
    if plan is None:
        return SupplyMatrices()
    return supply_from_layouts(plan.layouts)
