from sqlalchemy import BigInteger, Column, Index, text
from sqlalchemy.orm import relationship

from database.connection import Base
from database.models.column_types import DateTime2, NVarchar, SurrogateKey, current_time


class Customer(Base):
    __tablename__ = "customer"

    id = Column(SurrogateKey, primary_key=True, autoincrement=True)
    name = Column(NVarchar(100), nullable=False)
    email = Column(NVarchar(150), nullable=False, unique=True)
    created_at = Column(DateTime2, nullable=False, server_default=current_time())
    version = Column(BigInteger, nullable=False, default=0, server_default=text("0"))

    # Relationships
    addresses = relationship("Address", back_populates="customer")
    orders = relationship("Order", back_populates="customer")

    __table_args__ = (
        Index("idx_customer_created_at", "created_at"),
    )

    def __repr__(self):
        return f"<Customer id={self.id} email={self.email!r}>"
