from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    CheckConstraint,
)
from sqlalchemy.orm import relationship

from cutrix.database import Base


class ProductionTask(Base):
    __tablename__ = "production_tasks"
    __table_args__ = (
        CheckConstraint("planned_layers >= 1", name="ck_production_tasks_planned_layers_min_1"),
        CheckConstraint("completed_layers >= 0", name="ck_production_tasks_completed_layers_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    layout_id = Column(Integer, ForeignKey("cutting_layouts.id", ondelete="CASCADE"), nullable=False, index=True)
    style_id = Column(Integer, ForeignKey("styles.id"), nullable=False, index=True)
    layout_name = Column(String(255), nullable=False)
    color = Column(String(50), nullable=False)
    planned_layers = Column(Integer, nullable=False)
    completed_layers = Column(Integer, nullable=False, default=0)

    layout = relationship("CuttingLayout", back_populates="tasks")
    logs = relationship("ProductionLog", back_populates="task", passive_deletes=True)

    @property
    def plan_id(self):
        return self.layout.plan_id if self.layout else None
