from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping

from cutrix.engine.matrix import iter_keys


class Verdict(str, Enum):
    DEFICIT = "DEFICIT"
    EXACT = "EXACT"
    SURPLUS = "SURPLUS"
    UNCONSTRAINED = "UNCONSTRAINED"


@dataclass(frozen=True)
class ReconciliationCell:
    color: str
    size: str
    supplied: int
    required: int
    verdict: Verdict

    @property
    def difference(self) -> int:
        return self.supplied - self.required


@dataclass(frozen=True)
class ReconciliationView:
    cells: List[ReconciliationCell] = field(default_factory=list)

    @property
    def total_required(self) -> int:
        return sum(cell.required for cell in self.cells)

    @property
    def total_supplied(self) -> int:
        return sum(cell.supplied for cell in self.cells)

    @property
    def verdict_counts(self) -> Dict[str, int]:
        counts = {verdict.value: 0 for verdict in Verdict}
        for cell in self.cells:
            counts[cell.verdict.value] += 1
        return counts

    @property
    def is_fulfilled(self) -> bool:
        return all(cell.verdict != Verdict.DEFICIT for cell in self.cells)

    def cell(self, color: str, size: str) -> ReconciliationCell:
        for cell in self.cells:
            if cell.color == color and cell.size == size:
                return cell
        raise KeyError((color, size))


def judge(supplied: int, required: int) -> Verdict:
    if required <= 0:
        return Verdict.UNCONSTRAINED
    if supplied < required:
        return Verdict.DEFICIT
    if supplied > required:
        return Verdict.SURPLUS
    return Verdict.EXACT


def reconcile(
    demand: Mapping[str, Mapping[str, int]],
    supply: Mapping[str, Mapping[str, int]],
) -> ReconciliationView:
    cells = []
    for color, size in iter_keys(demand, supply):
        required = demand.get(color, {}).get(size, 0)
        supplied = supply.get(color, {}).get(size, 0)
        cells.append(
            ReconciliationCell(
                color=color,
                size=size,
                supplied=supplied,
                required=required,
                verdict=judge(supplied, required),
            )
        )
    return ReconciliationView(cells=cells)
