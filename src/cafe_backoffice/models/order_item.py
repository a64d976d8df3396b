from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from ..db.base import Base


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    # без FK: товар может быть удалён, позиция заказа остаётся
    product_id = Column(Integer, nullable=False)
    name = Column(String(128), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    unit = Column(String(16), nullable=False)
    price_at_order = Column(Numeric(10, 2), nullable=False)  # фиксируется на момент заказа
    day = Column(String(16), nullable=True)

    # связи
    order = relationship("Order", back_populates="items")
