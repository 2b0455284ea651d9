from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple


class SupplyBasis(str, Enum):
    PLANNED = "planned"
    ACTUAL = "actual"


def effective_ratios(ratios: Optional[Iterable]) -> List[Tuple[str, int]]:
    """(size, ratio) pairs that yield garments; zero ratios stay stored but produce nothing."""
    return [(r.size, int(r.ratio)) for r in ratios or [] if r.ratio and int(r.ratio) > 0]


def calculate_output(ratios: Optional[Iterable], layers: int) -> Dict[str, int]:
    output: Dict[str, int] = {}
    for size, ratio in effective_ratios(ratios):
        output[size] = output.get(size, 0) + layers * ratio
    return output


def layers_for(task, basis: SupplyBasis) -> int:
    if basis == SupplyBasis.PLANNED:
        return task.planned_layers or 0
    return task.completed_layers or 0


def task_output(ratios: Optional[Iterable], task, basis: SupplyBasis) -> Dict[str, int]:
    layers = layers_for(task, basis)
    if layers <= 0:
        return {}
    return calculate_output(ratios, layers)
