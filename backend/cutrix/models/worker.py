from sqlalchemy import Boolean, CheckConstraint, Column, Integer, String, Text
from sqlalchemy.orm import relationship

from cutrix.database import Base


class Worker(Base):
    __tablename__ = "workers"
    __table_args__ = (
        CheckConstraint("role IN ('admin', 'worker')", name="ck_workers_role"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    notes = Column(Text, nullable=True)
    role = Column(String(20), nullable=False, default="worker")
    is_active = Column(Boolean, nullable=False, default=True)
    worker_group = Column(String(100), nullable=True, index=True)

    logs = relationship("ProductionLog", back_populates="worker")
