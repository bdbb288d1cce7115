from sqlalchemy import Column, Integer, String
from trade_service.database import Base

class Blotter(Base):
    __tablename__ = "blotter"

    id = Column(Integer, primary_key=True, autoincrement=True)
    abbreviation = Column(String(20), nullable=False)
    name = Column(String(100), nullable=False)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def __init__(self, **kwargs):
        kwargs.setdefault("version", 1)
        super().__init__(**kwargs)
