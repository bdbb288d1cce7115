from sqlalchemy import Column, Integer, String
from trade_service.database import Base

class TradeType(Base):
    __tablename__ = "trade_type"

    id = Column(Integer, primary_key=True, autoincrement=True)
    abbreviation = Column(String(10), nullable=False)
    description = Column(String(60), nullable=False)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def __init__(self, **kwargs):
        kwargs.setdefault("version", 1)
        super().__init__(**kwargs)
