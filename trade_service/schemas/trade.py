from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from trade_service.utils.sorting import EntityKind, SortDirection


class BlotterResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    abbreviation: str
    name: str
    version: int


class DestinationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    abbreviation: str
    description: str
    version: int


class ExecutionStatusResponse(DestinationResponse):
    pass


class TradeTypeResponse(DestinationResponse):
    pass


class TradeOrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_id: int
    portfolio_id: str
    order_type: str
    security_id: str
    quantity: Decimal
    quantity_sent: Optional[Decimal] = None
    limit_price: Optional[Decimal] = None
    trade_timestamp: datetime
    blotter: Optional[BlotterResponse] = None
    submitted: Optional[bool] = None
    version: int


class ExecutionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    execution_timestamp: datetime
    execution_status: ExecutionStatusResponse
    blotter: Optional[BlotterResponse] = None
    trade_type: Optional[TradeTypeResponse] = None
    trade_order_id: int
    destination: DestinationResponse
    quantity_ordered: Optional[int] = None
    quantity_placed: Decimal
    quantity_filled: Decimal
    limit_price: Optional[Decimal] = None
    version: int


class SortFieldResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    direction: SortDirection


class SortOptionsResponse(BaseModel):
    entity: EntityKind
    fields: List[str]
