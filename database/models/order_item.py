from sqlalchemy import BigInteger, Column, ForeignKey, Integer, Numeric
from sqlalchemy.orm import relationship

from database.connection import Base
from database.models.column_types import SurrogateKey


class OrderItem(Base):
    __tablename__ = "order_item"

    id = Column(SurrogateKey, primary_key=True, autoincrement=True)
    order_id = Column(
        BigInteger,
        ForeignKey("food_order.id", name="fk_item_order"),
        nullable=False,
    )
    food_item_id = Column(
        BigInteger,
        ForeignKey("food_item.id", name="fk_item_food"),
        nullable=False,
    )
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)  # food item price at order time

    # Relationships
    order = relationship("Order", back_populates="items")
    food_item = relationship("FoodItem")
