"""
Event Bus — Observer Pattern (GoF)

Services publish domain events after their own transaction has committed.
Subscribers run synchronously and are best-effort: a failing handler is
logged and never rolls back or masks the publishing operation.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Type

logger = logging.getLogger(__name__)


@dataclass
class DomainEvent:
    entity_type: str
    entity_id: Optional[int]
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc), kw_only=True)

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass
class EntityCreatedEvent(DomainEvent):
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass
class EntityUpdatedEvent(DomainEvent):
    new_values: Dict[str, Any] = field(default_factory=dict)


@dataclass
class EntityDeletedEvent(DomainEvent):
    pass


@dataclass
class ProductionLogAppendedEvent(DomainEvent):
    task_id: int = 0
    plan_id: Optional[int] = None
    worker_id: Optional[int] = None
    layers_completed: int = 0
    completed_layers: int = 0


EventHandler = Callable[[DomainEvent], None]


class EventBus:
    def __init__(self):
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = {}

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def clear(self) -> None:
        self._handlers.clear()

    def publish(self, event: DomainEvent) -> None:
        for event_type, handlers in list(self._handlers.items()):
            if not isinstance(event, event_type):
                continue
            for handler in list(handlers):
                try:
                    handler(event)
                except Exception:
                    logger.exception(
                        "event_handler_failed",
                        extra={"event": event.name, "entity_type": event.entity_type, "entity_id": event.entity_id},
                    )


class LoggingHandler:
    def __call__(self, event: DomainEvent) -> None:
        logger.info(
            "domain_event",
            extra={"event": event.name, "entity_type": event.entity_type, "entity_id": event.entity_id},
        )


class PlanProgressRefreshHandler:
    """Recomputes the cached plan progress snapshot after a log append or a plan edit."""

    def __init__(self, db_session_factory):
        self._session_factory = db_session_factory

    def __call__(self, event: DomainEvent) -> None:
        plan_id = getattr(event, "plan_id", None)
        if plan_id is None and event.entity_type == "production_plan":
            plan_id = event.entity_id
        if plan_id is None:
            return
        # Imported lazily: services import this module.
        from cutrix.services.monitoring_service import MonitoringService

        db = self._session_factory()
        try:
            MonitoringService(db).refresh_plan_snapshot(plan_id)
        finally:
            db.close()


_event_bus = EventBus()


def get_event_bus() -> EventBus:
    return _event_bus


def configure_event_bus(db_session_factory) -> EventBus:
    bus = get_event_bus()
    bus.clear()
    bus.subscribe(DomainEvent, LoggingHandler())
    refresh = PlanProgressRefreshHandler(db_session_factory)
    bus.subscribe(ProductionLogAppendedEvent, refresh)
    bus.subscribe(EntityUpdatedEvent, refresh)
    return bus
