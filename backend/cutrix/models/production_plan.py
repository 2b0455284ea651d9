from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    DateTime,
    ForeignKey,
    CheckConstraint,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from cutrix.database import Base


class ProductionPlan(Base):
    __tablename__ = "production_plans"

    id = Column(Integer, primary_key=True, index=True)
    plan_name = Column(String(255), nullable=False)
    style_id = Column(Integer, ForeignKey("styles.id"), nullable=False, index=True)
    linked_order_id = Column(
        Integer, ForeignKey("production_orders.id", ondelete="SET NULL"), nullable=True, index=True,
    )
    created_at = Column(DateTime, default=func.now(), nullable=False)

    style = relationship("Style", back_populates="plans")
    linked_order = relationship("ProductionOrder", back_populates="plans")
    layouts = relationship(
        "CuttingLayout",
        back_populates="plan",
        cascade="all, delete-orphan",
        order_by="CuttingLayout.id",
    )

    @property
    def style_number(self):
        return self.style.style_number if self.style else None


class CuttingLayout(Base):
    __tablename__ = "cutting_layouts"

    id = Column(Integer, primary_key=True, index=True)
    plan_id = Column(Integer, ForeignKey("production_plans.id", ondelete="CASCADE"), nullable=False, index=True)
    layout_name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    plan = relationship("ProductionPlan", back_populates="layouts")
    ratios = relationship(
        "LayoutSizeRatio",
        back_populates="layout",
        cascade="all, delete-orphan",
        order_by="LayoutSizeRatio.id",
    )
    tasks = relationship(
        "ProductionTask",
        back_populates="layout",
        cascade="all, delete-orphan",
        order_by="ProductionTask.id",
    )


class LayoutSizeRatio(Base):
    __tablename__ = "layout_size_ratios"
    __table_args__ = (
        UniqueConstraint("layout_id", "size", name="uq_layout_size_ratios_layout_size"),
        CheckConstraint("ratio >= 0", name="ck_layout_size_ratios_ratio_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    layout_id = Column(Integer, ForeignKey("cutting_layouts.id", ondelete="CASCADE"), nullable=False, index=True)
    size = Column(String(20), nullable=False)
    ratio = Column(Integer, nullable=False, default=0)

    layout = relationship("CuttingLayout", back_populates="ratios")
