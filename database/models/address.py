from sqlalchemy import BigInteger, Column, ForeignKey
from sqlalchemy.orm import relationship

from database.connection import Base
from database.models.column_types import SurrogateKey, NVarchar


class Address(Base):
    __tablename__ = "address"

    id = Column(SurrogateKey, primary_key=True, autoincrement=True)
    customer_id = Column(
        BigInteger,
        ForeignKey("customer.id", name="fk_address_customer"),
        nullable=False,
    )
    city = Column(NVarchar(100))
    country = Column(NVarchar(100))

    customer = relationship("Customer", back_populates="addresses")
