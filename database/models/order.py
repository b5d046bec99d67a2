from sqlalchemy import BigInteger, Column, ForeignKey, Index, Numeric, text
from sqlalchemy.orm import relationship

from database.connection import Base
from database.models.column_types import DateTime2, NVarchar, SurrogateKey, current_time

# Lifecycle labels used by the seed data; the column accepts any label
ORDER_STATUSES = ("CREATED", "PAID", "DELIVERED")


class Order(Base):
    __tablename__ = "food_order"

    id = Column(SurrogateKey, primary_key=True, autoincrement=True)
    customer_id = Column(
        BigInteger,
        ForeignKey("customer.id", name="fk_order_customer"),
        nullable=False,
    )
    order_time = Column(DateTime2, nullable=False, server_default=current_time())
    status = Column(NVarchar(30))  # CREATED, PAID, DELIVERED, ...
    # Stored independently of the order items, never recomputed
    total_amount = Column(Numeric(12, 2))
    version = Column(BigInteger, nullable=False, default=0, server_default=text("0"))

    # Relationships
    customer = relationship("Customer", back_populates="orders")
    items = relationship("OrderItem", back_populates="order")
    payments = relationship("Payment", back_populates="order")

    __table_args__ = (
        Index("idx_order_customer_id", "customer_id"),
        Index("idx_order_order_time", "order_time"),
        Index("idx_order_status", "status"),
    )
