from sqlalchemy import BigInteger, Column, Index, Numeric, text

from database.connection import Base
from database.models.column_types import SurrogateKey, NVarchar

# Conventional labels, not enforced by a constraint
CATEGORIES = ("VEG", "NON_VEG", "DRINK")


class FoodItem(Base):
    __tablename__ = "food_item"

    id = Column(SurrogateKey, primary_key=True, autoincrement=True)
    name = Column(NVarchar(150), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(NVarchar(50))  # VEG, NON_VEG, DRINK
    version = Column(BigInteger, nullable=False, default=0, server_default=text("0"))

    __table_args__ = (
        Index("idx_food_item_category", "category"),
    )

    def __repr__(self):
        return f"<FoodItem id={self.id} name={self.name!r} price={self.price}>"
