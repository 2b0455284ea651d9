"""
Shared fixtures: in-memory SQLite on a single shared connection, the FastAPI
app with ``get_db`` overridden, and a seeded style/order/plan/worker.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import cutrix.models  # noqa: F401
from cutrix.database import Base, get_db
from cutrix.main import app
from cutrix.models.production_order import OrderItem, ProductionOrder
from cutrix.models.production_plan import CuttingLayout, LayoutSizeRatio, ProductionPlan
from cutrix.models.production_task import ProductionTask
from cutrix.models.style import Style
from cutrix.models.worker import Worker
from cutrix.utils.events import configure_event_bus

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(test_engine, "connect")
def _enable_foreign_keys(dbapi_connection, _record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=test_engine)
    configure_event_bus(db_session_factory=TestingSessionLocal)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture()
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def style(db) -> Style:
    style = Style(style_number="ST-1001")
    db.add(style)
    db.commit()
    db.refresh(style)
    return style


@pytest.fixture()
def order(db, style) -> ProductionOrder:
    order = ProductionOrder(
        order_number="PO-20261019-ST-1001-01",
        style_id=style.id,
        items=[
            OrderItem(color="red", size="100", quantity=50),
            OrderItem(color="red", size="110", quantity=50),
        ],
    )
    db.add(order)
    db.commit()
    db.refresh(order)
    return order


@pytest.fixture()
def plan(db, style, order) -> ProductionPlan:
    """One layout, ratio 100:1 / 110:1, a single red task of 50 layers."""
    plan = ProductionPlan(
        plan_name="ST-1001 first cut",
        style_id=style.id,
        linked_order_id=order.id,
        layouts=[
            CuttingLayout(
                layout_name="A",
                ratios=[
                    LayoutSizeRatio(size="100", ratio=1),
                    LayoutSizeRatio(size="110", ratio=1),
                ],
                tasks=[
                    ProductionTask(
                        style_id=style.id,
                        layout_name="A",
                        color="red",
                        planned_layers=50,
                        completed_layers=0,
                    )
                ],
            )
        ],
    )
    db.add(plan)
    db.commit()
    db.refresh(plan)
    return plan


@pytest.fixture()
def task(plan) -> ProductionTask:
    return plan.layouts[0].tasks[0]


@pytest.fixture()
def worker(db) -> Worker:
    worker = Worker(name="Li Na", role="worker", is_active=True)
    db.add(worker)
    db.commit()
    db.refresh(worker)
    return worker
