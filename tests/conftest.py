import pytest
from datetime import datetime, timezone
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from trade_service.database import Base
from trade_service.models import (
    Blotter,
    Destination,
    Execution,
    ExecutionStatus,
    TradeOrder,
    TradeType,
)

# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite://"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="function")
def db():
    # Create the database tables
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()

        # Drop tables after test
        Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def seeded_db(db):
    equity = Blotter(abbreviation="EQ", name="Equity")
    fixed_income = Blotter(abbreviation="FI", name="Fixed Income")
    new = ExecutionStatus(abbreviation="NEW", description="New")
    sent = ExecutionStatus(abbreviation="SENT", description="Sent")
    buy = TradeType(abbreviation="BUY", description="Buy")
    sell = TradeType(abbreviation="SELL", description="Sell")
    merrill = Destination(abbreviation="ML", description="Merrill Lynch")
    jpm = Destination(abbreviation="JPM", description="JP Morgan")

    orders = [
        TradeOrder(
            order_id=300,
            portfolio_id="PORT1",
            order_type="BUY",
            security_id="SEC1",
            quantity=Decimal("100"),
            trade_timestamp=datetime(2025, 4, 1, 10, 30, tzinfo=timezone.utc),
            blotter=fixed_income,
        ),
        TradeOrder(
            order_id=100,
            portfolio_id="PORT2",
            order_type="SELL",
            security_id="SEC2",
            quantity=Decimal("250"),
            trade_timestamp=datetime(2025, 4, 2, 14, 15, tzinfo=timezone.utc),
            blotter=equity,
        ),
        TradeOrder(
            order_id=200,
            portfolio_id="PORT1",
            order_type="BUY",
            security_id="SEC3",
            quantity=Decimal("50"),
            trade_timestamp=datetime(2025, 4, 3, 9, 45, tzinfo=timezone.utc),
            blotter=equity,
        ),
    ]
    executions = [
        Execution(
            execution_timestamp=datetime(2025, 4, 1, 11, 0, tzinfo=timezone.utc),
            execution_status=sent,
            blotter=equity,
            trade_type=buy,
            trade_order=orders[0],
            destination=merrill,
            quantity_ordered=10,
            quantity_placed=Decimal("100"),
        ),
        Execution(
            execution_timestamp=datetime(2025, 4, 2, 15, 0, tzinfo=timezone.utc),
            execution_status=new,
            blotter=fixed_income,
            trade_type=sell,
            trade_order=orders[1],
            destination=jpm,
            quantity_ordered=20,
            quantity_placed=Decimal("250"),
        ),
    ]
    db.add_all(orders + executions)
    db.commit()

    return db
