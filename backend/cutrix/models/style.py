from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from cutrix.database import Base


class Style(Base):
    __tablename__ = "styles"

    id = Column(Integer, primary_key=True, index=True)
    style_number = Column(String(100), nullable=False, unique=True, index=True)

    orders = relationship("ProductionOrder", back_populates="style")
    plans = relationship("ProductionPlan", back_populates="style")
