from trade_service.models.blotter import Blotter
from trade_service.models.destination import Destination
from trade_service.models.execution import Execution
from trade_service.models.execution_status import ExecutionStatus
from trade_service.models.trade_order import TradeOrder
from trade_service.models.trade_type import TradeType

__all__ = [
    "Blotter",
    "Destination",
    "Execution",
    "ExecutionStatus",
    "TradeOrder",
    "TradeType",
]
