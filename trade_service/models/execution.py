from decimal import Decimal

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, SmallInteger
from sqlalchemy.orm import relationship
from trade_service.database import Base

class Execution(Base):
    __tablename__ = "execution"

    id = Column(Integer, primary_key=True, autoincrement=True)
    execution_timestamp = Column(DateTime(timezone=True), nullable=False)
    execution_status_id = Column(Integer, ForeignKey("execution_status.id"), nullable=False)
    blotter_id = Column(Integer, ForeignKey("blotter.id"))
    trade_type_id = Column(Integer, ForeignKey("trade_type.id"))
    trade_order_id = Column(Integer, ForeignKey("trade_order.id"), nullable=False, index=True)
    destination_id = Column(Integer, ForeignKey("destination.id"), nullable=False)
    quantity_ordered = Column(SmallInteger)
    quantity_placed = Column(Numeric(18, 8), nullable=False)
    quantity_filled = Column(Numeric(18, 8), nullable=False, default=0)
    limit_price = Column(Numeric(18, 8))
    version = Column(Integer, nullable=False)

    # Related entities are loaded on access
    execution_status = relationship("ExecutionStatus", lazy="select")
    blotter = relationship("Blotter", lazy="select")
    trade_type = relationship("TradeType", lazy="select")
    trade_order = relationship("TradeOrder", lazy="select")
    destination = relationship("Destination", lazy="select")

    __mapper_args__ = {"version_id_col": version}

    def __init__(self, **kwargs):
        kwargs.setdefault("quantity_filled", Decimal(0))
        kwargs.setdefault("version", 1)
        super().__init__(**kwargs)
