import enum
from sqlalchemy import Column, Integer, String, Float, Numeric, Text, JSON, DateTime, Enum as SAEnum, func
from ..db.base import Base


class UnitEnum(str, enum.Enum):
    piece = "piece"
    kg = "kg"
    liter = "liter"
    package = "package"


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    category = Column(String(64), nullable=False, index=True)
    unit = Column(SAEnum(UnitEnum, name="product_unit"), nullable=False)
    price_per_unit = Column(Numeric(10, 2), nullable=False, default=0)
    supplier = Column(String(128), nullable=False)
    alt_supplier = Column(String(128), nullable=True)
    package_size = Column(Float, nullable=False, default=1)
    image = Column(Text, nullable=False)  # data URI
    demand = Column(JSON, nullable=False, default=dict)  # {день недели: количество}
    schedule_days = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
