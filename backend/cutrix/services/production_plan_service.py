"""
Production Plan Service — Service Layer (SRP / DIP)

Owns the plan -> layout -> (ratios, tasks) aggregate and feeds it to the
supply aggregator and reconciler for the planning screens.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from sqlalchemy.orm import Session

from cutrix.core.exceptions import ConflictException, EntityNotFoundException, ValidationException
from cutrix.engine import (
    SupplyBasis,
    compute_demand_matrix,
    compute_supply_matrices,
    matrix_total,
    reconcile,
    supply_from_layouts,
)
from cutrix.models.production_plan import CuttingLayout, LayoutSizeRatio, ProductionPlan
from cutrix.models.production_task import ProductionTask
from cutrix.repositories.production_order_repository import ProductionOrderRepository
from cutrix.repositories.production_plan_repository import ProductionPlanRepository
from cutrix.repositories.style_repository import StyleRepository
from cutrix.schemas.planning import ReconciliationResponse, SupplyMatricesResponse
from cutrix.schemas.production_plan import (
    LayoutCreate,
    PlanPreviewRequest,
    ProductionPlanCreate,
    ProductionPlanUpdate,
)
from cutrix.services.views import reconciliation_response
from cutrix.utils.events import EntityCreatedEvent, EntityDeletedEvent, EntityUpdatedEvent, get_event_bus

logger = logging.getLogger(__name__)


def validate_layouts(layouts: List[LayoutCreate]) -> None:
    if not layouts:
        raise ValidationException("A plan needs at least one cutting layout.")
    for layout in layouts:
        name = layout.layout_name.strip()
        if not name:
            raise ValidationException("Layout name is required.")
        sizes = [ratio.size.strip() for ratio in layout.ratios]
        duplicates = sorted({size for size in sizes if sizes.count(size) > 1})
        if duplicates:
            raise ValidationException(
                f"Layout '{name}' repeats size(s) {', '.join(duplicates)}.",
                details={"layout_name": name, "sizes": duplicates},
            )
        if any(ratio.ratio < 0 for ratio in layout.ratios):
            raise ValidationException(f"Layout '{name}' has a negative ratio.")
        if not any(ratio.ratio > 0 for ratio in layout.ratios):
            raise ValidationException(f"Layout '{name}' needs at least one size with a ratio above zero.")
        if not layout.tasks:
            raise ValidationException(f"Layout '{name}' needs at least one color.")
        for task in layout.tasks:
            if not task.color.strip():
                raise ValidationException(f"Layout '{name}' has a task without a color.")
            if task.planned_layers < 1:
                raise ValidationException(
                    f"Planned layers for {task.color} in layout '{name}' must be at least 1."
                )


def build_layouts(style_id: int, layouts: List[LayoutCreate]) -> List[CuttingLayout]:
    built = []
    for layout in layouts:
        name = layout.layout_name.strip()
        built.append(
            CuttingLayout(
                layout_name=name,
                description=layout.description,
                ratios=[LayoutSizeRatio(size=r.size.strip(), ratio=r.ratio) for r in layout.ratios],
                tasks=[
                    ProductionTask(
                        style_id=style_id,
                        layout_name=name,
                        color=t.color.strip(),
                        planned_layers=t.planned_layers,
                        completed_layers=0,
                    )
                    for t in layout.tasks
                ],
            )
        )
    return built


class ProductionPlanService:

    def __init__(self, db: Session):
        self._db = db
        self._repo = ProductionPlanRepository(db)
        self._order_repo = ProductionOrderRepository(db)
        self._style_repo = StyleRepository(db)
        self._bus = get_event_bus()

    def list_plans(self, query: Optional[str] = None) -> List[ProductionPlan]:
        return self._repo.list_filtered(query=query)

    def get_plan(self, plan_id: int) -> ProductionPlan:
        plan = self._repo.get_with_details(plan_id)
        if not plan:
            raise EntityNotFoundException("ProductionPlan", plan_id)
        return plan

    def get_plan_by_order(self, order_id: int) -> ProductionPlan:
        if not self._order_repo.get_by_id(order_id):
            raise EntityNotFoundException("ProductionOrder", order_id)
        plan = self._repo.get_by_order_id(order_id)
        if not plan:
            raise EntityNotFoundException("ProductionPlan", f"order:{order_id}")
        return plan

    def _check_order_link(self, order_id: Optional[int], plan_id: Optional[int] = None) -> None:
        if order_id is None:
            return
        if not self._order_repo.get_by_id(order_id):
            raise EntityNotFoundException("ProductionOrder", order_id)
        existing = self._repo.get_by_order_id(order_id)
        if existing and existing.id != plan_id:
            raise ConflictException(
                f"Order {order_id} is already planned by '{existing.plan_name}' ({existing.id}).",
                details={"plan_id": existing.id},
            )

    def create_plan(self, data: ProductionPlanCreate) -> ProductionPlan:
        if not data.plan_name.strip():
            raise ValidationException("Plan name is required.")
        if not self._style_repo.get_by_id(data.style_id):
            raise EntityNotFoundException("Style", data.style_id)
        self._check_order_link(data.linked_order_id)
        validate_layouts(data.layouts)

        plan = ProductionPlan(
            plan_name=data.plan_name.strip(),
            style_id=data.style_id,
            linked_order_id=data.linked_order_id,
            layouts=build_layouts(data.style_id, data.layouts),
        )
        result = self._repo.create(plan)
        logger.info(
            "plan_created",
            extra={"plan_id": result.id, "linked_order_id": result.linked_order_id, "layout_count": len(data.layouts)},
        )
        self._bus.publish(EntityCreatedEvent(entity_type="production_plan", entity_id=result.id))
        return self.get_plan(result.id)

    def update_plan(self, plan_id: int, data: ProductionPlanUpdate) -> ProductionPlan:
        """Replaces the plan's layouts wholesale, as long as nothing has been cut yet."""
        plan = self.get_plan(plan_id)
        if not data.plan_name.strip():
            raise ValidationException("Plan name is required.")
        validate_layouts(data.layouts)
        started = [task.id for layout in plan.layouts for task in layout.tasks if (task.completed_layers or 0) > 0]
        if started:
            raise ConflictException(
                "Layouts cannot be replaced once production has been logged against the plan.",
                details={"started_task_ids": started},
            )

        plan.plan_name = data.plan_name.strip()
        plan.layouts.clear()
        self._db.flush()
        plan.layouts.extend(build_layouts(plan.style_id, data.layouts))
        self._db.commit()
        logger.info("plan_updated", extra={"plan_id": plan_id, "layout_count": len(data.layouts)})
        self._bus.publish(EntityUpdatedEvent(
            entity_type="production_plan", entity_id=plan_id, new_values={"plan_name": plan.plan_name},
        ))
        self._db.expire_all()
        return self.get_plan(plan_id)

    def delete_plan(self, plan_id: int) -> None:
        plan = self.get_plan(plan_id)
        self._repo.delete(plan)
        logger.info("plan_deleted", extra={"plan_id": plan_id})
        self._bus.publish(EntityDeletedEvent(entity_type="production_plan", entity_id=plan_id))

    def supply_matrices(self, plan_id: int) -> SupplyMatricesResponse:
        plan = self.get_plan(plan_id)
        supply = compute_supply_matrices(plan)
        return SupplyMatricesResponse(
            plan_id=plan.id,
            planned=supply.planned,
            actual=supply.actual,
            total_planned=matrix_total(supply.planned),
            total_actual=matrix_total(supply.actual),
        )

    def reconcile_plan(self, plan_id: int, basis: SupplyBasis = SupplyBasis.PLANNED) -> ReconciliationResponse:
        plan = self.get_plan(plan_id)
        order = self._order_repo.get_with_items(plan.linked_order_id) if plan.linked_order_id else None
        # Without a backing order every cell is UNCONSTRAINED.
        demand = compute_demand_matrix(order)
        supply = compute_supply_matrices(plan).for_basis(basis)
        return reconciliation_response(
            reconcile(demand, supply), basis, plan_id=plan.id, order_id=order.id if order else None,
        )

    def preview_reconciliation(self, body: PlanPreviewRequest) -> ReconciliationResponse:
        """Reconciles unsaved layouts under the same rules as saving them; nothing is stored."""
        validate_layouts(body.layouts)
        order = None
        if body.order_id is not None:
            order = self._order_repo.get_with_items(body.order_id)
            if not order:
                raise EntityNotFoundException("ProductionOrder", body.order_id)
        basis = SupplyBasis(body.basis)
        demand = compute_demand_matrix(order)
        drafts = [
            _DraftLayout(ratios=layout.ratios, tasks=[_DraftTask(t.color, t.planned_layers) for t in layout.tasks])
            for layout in body.layouts
        ]
        supply = supply_from_layouts(drafts).for_basis(basis)
        return reconciliation_response(reconcile(demand, supply), basis, order_id=body.order_id)


@dataclass
class _DraftTask:
    color: str
    planned_layers: int
    completed_layers: int = 0


@dataclass
class _DraftLayout:
    ratios: list = field(default_factory=list)
    tasks: list = field(default_factory=list)
