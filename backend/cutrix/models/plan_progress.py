from sqlalchemy import Column, Integer, DateTime, ForeignKey, func

from cutrix.database import Base


class PlanProgressSnapshot(Base):
    """Cached plan-level roll-up; recomputable at any time from the task rows."""

    __tablename__ = "plan_progress_snapshots"

    plan_id = Column(Integer, ForeignKey("production_plans.id", ondelete="CASCADE"), primary_key=True)
    total_planned = Column(Integer, nullable=False, default=0)
    total_completed = Column(Integer, nullable=False, default=0)
    pending_tasks = Column(Integer, nullable=False, default=0)
    progress_percent = Column(Integer, nullable=False, default=0)
    refreshed_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)
