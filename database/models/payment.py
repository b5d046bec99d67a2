from sqlalchemy import BigInteger, Column, ForeignKey
from sqlalchemy.orm import relationship

from database.connection import Base
from database.models.column_types import DateTime2, SurrogateKey, NVarchar

PAYMENT_MODES = ("CARD", "UPI")


class Payment(Base):
    __tablename__ = "payment"

    id = Column(SurrogateKey, primary_key=True, autoincrement=True)
    order_id = Column(
        BigInteger,
        ForeignKey("food_order.id", name="fk_payment_order"),
        nullable=False,
    )
    payment_mode = Column(NVarchar(50))  # CARD, UPI
    payment_status = Column(NVarchar(30))
    paid_at = Column(DateTime2)

    order = relationship("Order", back_populates="payments")
