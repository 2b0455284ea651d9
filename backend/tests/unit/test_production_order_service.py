from datetime import datetime

import pytest

from cutrix.core.exceptions import ConflictException, EntityNotFoundException, ValidationException
from cutrix.repositories.style_repository import StyleRepository
from cutrix.schemas.production_order import ProductionOrderCreate
from cutrix.services.production_order_service import ProductionOrderService


def _payload(style_number="ST-2002", items=None):
    return ProductionOrderCreate.model_validate(
        {
            "style_number": style_number,
            "items": items or [{"color": "red", "size": "100", "quantity": 10}],
        }
    )


def test_order_number_counts_per_style_per_day(db):
    service = ProductionOrderService(db)
    first = service.create_order(_payload())
    second = service.create_order(_payload())
    other = service.create_order(_payload(style_number="ST-3003"))

    today = datetime.utcnow().strftime("%Y%m%d")
    assert first.order_number == f"PO-{today}-ST-2002-01"
    assert second.order_number == f"PO-{today}-ST-2002-02"
    assert other.order_number == f"PO-{today}-ST-3003-01"


def test_create_registers_unknown_style(db):
    order = ProductionOrderService(db).create_order(_payload(style_number="NEW-9"))
    style = StyleRepository(db).get_by_number("NEW-9")
    assert style is not None
    assert order.style_id == style.id
    assert order.style_number == "NEW-9"


def test_demand_matrix_sums_duplicate_lines(db):
    service = ProductionOrderService(db)
    order = service.create_order(_payload(items=[
        {"color": "red", "size": "M", "quantity": 10},
        {"color": "red", "size": "M", "quantity": 5},
        {"color": "blue", "size": "L", "quantity": 3},
    ]))
    demand = service.demand_matrix(order.id)
    assert demand.demand == {"red": {"M": 15}, "blue": {"L": 3}}
    assert demand.total_required == 18


def test_blank_color_rejected(db):
    with pytest.raises(ValidationException):
        ProductionOrderService(db).create_order(_payload(items=[{"color": " ", "size": "M", "quantity": 1}]))


def test_unplanned_orders(db, order, plan):
    service = ProductionOrderService(db)
    lonely = service.create_order(_payload())
    ids = [o.id for o in service.list_unplanned_orders()]
    assert lonely.id in ids
    assert order.id not in ids


def test_delete_linked_order_conflicts(db, order, plan):
    with pytest.raises(ConflictException):
        ProductionOrderService(db).delete_order(order.id)


def test_delete_unlinked_order(db, order):
    service = ProductionOrderService(db)
    service.delete_order(order.id)
    with pytest.raises(EntityNotFoundException):
        service.get_order(order.id)
