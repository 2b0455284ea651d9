from typing import Iterable, Optional

from cutrix.engine.matrix import Matrix, add_to_matrix


def demand_from_items(items: Optional[Iterable]) -> Matrix:
    demand: Matrix = {}
    for item in items or []:
        add_to_matrix(demand, item.color, {item.size: item.quantity})
    return demand


def compute_demand_matrix(order) -> Matrix:
    """Required pieces per color/size; repeated (color, size) lines are summed."""
    if order is None:
        return {}
    return demand_from_items(order.items)
