from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    CheckConstraint,
    Index,
    func,
)
from sqlalchemy.orm import relationship

from cutrix.database import Base


class ProductionLog(Base):
    __tablename__ = "production_logs"
    __table_args__ = (
        CheckConstraint("layers_completed > 0", name="ck_production_logs_layers_positive"),
        CheckConstraint(
            "process_name IN ('loading', 'spreading', 'cutting', 'packing')",
            name="ck_production_logs_process_name",
        ),
        Index("ix_production_logs_task_time", "task_id", "log_time"),
    )

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(Integer, ForeignKey("production_tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    worker_id = Column(Integer, ForeignKey("workers.id"), nullable=False, index=True)
    process_name = Column(String(20), nullable=False)
    layers_completed = Column(Integer, nullable=False)
    log_time = Column(DateTime, default=func.now(), nullable=False)

    task = relationship("ProductionTask", back_populates="logs")
    worker = relationship("Worker", back_populates="logs")
