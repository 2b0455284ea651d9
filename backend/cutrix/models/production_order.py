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


class ProductionOrder(Base):
    __tablename__ = "production_orders"
    __table_args__ = (
        Index("ix_production_orders_style_created", "style_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    order_number = Column(String(100), nullable=False, unique=True, index=True)
    style_id = Column(Integer, ForeignKey("styles.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=func.now(), nullable=False)

    style = relationship("Style", back_populates="orders")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )
    plans = relationship("ProductionPlan", back_populates="linked_order")

    @property
    def style_number(self):
        return self.style.style_number if self.style else None


class OrderItem(Base):
    __tablename__ = "order_items"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("production_orders.id", ondelete="CASCADE"), nullable=False, index=True)
    color = Column(String(50), nullable=False)
    size = Column(String(20), nullable=False)
    quantity = Column(Integer, nullable=False)

    order = relationship("ProductionOrder", back_populates="items")
