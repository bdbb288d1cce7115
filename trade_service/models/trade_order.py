from decimal import Decimal

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship
from trade_service.database import Base

class TradeOrder(Base):
    __tablename__ = "trade_order"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, nullable=False, index=True)
    portfolio_id = Column(String(24), nullable=False)
    order_type = Column(String(10), nullable=False)
    security_id = Column(String(24), nullable=False)
    quantity = Column(Numeric(18, 8), nullable=False)
    quantity_sent = Column(Numeric(18, 8), default=0)
    limit_price = Column(Numeric(18, 8))
    trade_timestamp = Column(DateTime(timezone=True), nullable=False)
    blotter_id = Column(Integer, ForeignKey("blotter.id"))
    submitted = Column(Boolean, default=False)
    version = Column(Integer, nullable=False)

    blotter = relationship("Blotter", lazy="select")

    __mapper_args__ = {"version_id_col": version}

    def __init__(self, **kwargs):
        kwargs.setdefault("quantity_sent", Decimal(0))
        kwargs.setdefault("submitted", False)
        kwargs.setdefault("version", 1)
        super().__init__(**kwargs)
