from types import SimpleNamespace

from cutrix.engine import (
    Verdict,
    compute_demand_matrix,
    compute_supply_matrices,
    reconcile,
)


def _plan(planned_layers):
    return SimpleNamespace(
        layouts=[
            SimpleNamespace(
                ratios=[SimpleNamespace(size="100", ratio=1), SimpleNamespace(size="110", ratio=1)],
                tasks=[SimpleNamespace(color="red", planned_layers=planned_layers, completed_layers=0)],
            )
        ]
    )


ORDER = SimpleNamespace(
    items=[
        SimpleNamespace(color="red", size="100", quantity=50),
        SimpleNamespace(color="red", size="110", quantity=50),
    ]
)


def test_fifty_layers_meet_the_order_exactly():
    demand = compute_demand_matrix(ORDER)
    supply = compute_supply_matrices(_plan(50)).planned
    assert demand == {"red": {"100": 50, "110": 50}}
    assert supply == {"red": {"100": 50, "110": 50}}

    view = reconcile(demand, supply)
    assert [cell.verdict for cell in view.cells] == [Verdict.EXACT, Verdict.EXACT]
    assert view.is_fulfilled


def test_thirty_layers_fall_short():
    supply = compute_supply_matrices(_plan(30)).planned
    assert supply == {"red": {"100": 30, "110": 30}}

    view = reconcile(compute_demand_matrix(ORDER), supply)
    assert [cell.verdict for cell in view.cells] == [Verdict.DEFICIT, Verdict.DEFICIT]
    assert view.cell("red", "100").difference == -20
    assert not view.is_fulfilled
    assert view.verdict_counts[Verdict.DEFICIT.value] == 2


def test_verdicts_cover_every_case():
    demand = {"red": {"S": 10, "M": 10, "L": 10}}
    supply = {"red": {"S": 5, "M": 10, "L": 12, "XL": 4}}
    view = reconcile(demand, supply)
    assert view.cell("red", "S").verdict == Verdict.DEFICIT
    assert view.cell("red", "M").verdict == Verdict.EXACT
    assert view.cell("red", "L").verdict == Verdict.SURPLUS
    assert view.cell("red", "XL").verdict == Verdict.UNCONSTRAINED
    assert view.total_required == 30
    assert view.total_supplied == 31


def test_missing_supply_counts_as_zero():
    view = reconcile({"blue": {"M": 8}}, {})
    cell = view.cell("blue", "M")
    assert cell.supplied == 0
    assert cell.verdict == Verdict.DEFICIT


def test_reconcile_is_deterministic():
    demand = {"red": {"110": 3, "100": 2}, "blue": {"S": 1}}
    supply = {"red": {"100": 2}, "green": {"M": 4}}
    assert reconcile(demand, supply) == reconcile(demand, supply)


def test_demand_against_itself_is_exact():
    demand = {"red": {"100": 50, "110": 40}, "blue": {"S": 9}}
    view = reconcile(demand, demand)
    assert all(cell.verdict == Verdict.EXACT for cell in view.cells)


def test_cells_sorted_by_color_then_size():
    demand = {"red": {"M": 1, "110": 1, "90": 1}, "blue": {"S": 1}}
    view = reconcile(demand, {})
    assert [(c.color, c.size) for c in view.cells] == [
        ("blue", "S"),
        ("red", "90"),
        ("red", "110"),
        ("red", "M"),
    ]


def test_plan_without_order_is_unconstrained():
    view = reconcile(compute_demand_matrix(None), compute_supply_matrices(_plan(50)).planned)
    assert {cell.verdict for cell in view.cells} == {Verdict.UNCONSTRAINED}
    assert view.is_fulfilled
