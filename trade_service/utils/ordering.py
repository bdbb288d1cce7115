"""
Translate a parsed sort spec into SQLAlchemy ORDER BY clauses.

Every whitelisted API field name maps to the model attribute that orders it.
Nested names (``blotter.abbreviation``) also name the relationship that has
to be joined to reach the related column.
"""

from typing import Dict, List, Optional, Tuple, Union

from sqlalchemy.orm import InstrumentedAttribute

from trade_service.exceptions import InvalidSortField
from trade_service.models import (
    Blotter,
    Destination,
    Execution,
    ExecutionStatus,
    TradeOrder,
    TradeType,
)
from trade_service.utils.sorting import EntityKind, SortDirection, SortSpec

# (relationship to join, or None for own columns; column to order by)
SortColumn = Tuple[Optional[InstrumentedAttribute], InstrumentedAttribute]

SORT_COLUMNS: Dict[EntityKind, Dict[str, SortColumn]] = {
    EntityKind.TRADE_ORDER: {
        "id": (None, TradeOrder.id),
        "orderId": (None, TradeOrder.order_id),
        "orderType": (None, TradeOrder.order_type),
        "quantity": (None, TradeOrder.quantity),
        "quantitySent": (None, TradeOrder.quantity_sent),
        "tradeTimestamp": (None, TradeOrder.trade_timestamp),
        "submitted": (None, TradeOrder.submitted),
        "blotter.abbreviation": (TradeOrder.blotter, Blotter.abbreviation),
    },
    EntityKind.EXECUTION: {
        "id": (None, Execution.id),
        "executionTimestamp": (None, Execution.execution_timestamp),
        "quantityOrdered": (None, Execution.quantity_ordered),
        "quantityPlaced": (None, Execution.quantity_placed),
        "quantityFilled": (None, Execution.quantity_filled),
        "tradeOrderId": (None, Execution.trade_order_id),
        "executionStatus.abbreviation": (Execution.execution_status, ExecutionStatus.abbreviation),
        "blotter.abbreviation": (Execution.blotter, Blotter.abbreviation),
        "tradeType.abbreviation": (Execution.trade_type, TradeType.abbreviation),
        "destination.abbreviation": (Execution.destination, Destination.abbreviation),
    },
}


def build_order_by(sort_spec: SortSpec, entity_kind: Union[EntityKind, str]):
    """
    Resolve sort fields to ORDER BY clauses.

    Returns:
        ``(joins, clauses)``: relationships to outer-join, each listed once in
        first-seen order, and the ordering clauses in sort-spec order.

    Raises:
        InvalidSortField: If a sort field has no mapped column for the entity kind.
    """
    kind = EntityKind(entity_kind)
    columns = SORT_COLUMNS[kind]
    joins: List[InstrumentedAttribute] = []
    clauses = []

    for sort_field in sort_spec:
        if sort_field.name not in columns:
            raise InvalidSortField(sort_field.name, kind.value, columns)

        relation, column = columns[sort_field.name]
        if relation is not None and not any(relation is joined for joined in joins):
            joins.append(relation)
        clauses.append(column.desc() if sort_field.direction == SortDirection.DESC else column.asc())

    return joins, clauses


def apply_sort(query, sort_spec: SortSpec, entity_kind: Union[EntityKind, str]):
    """Apply the sort spec to a ``Query`` or ``Select``; an empty spec leaves it untouched."""
    if not sort_spec:
        return query

    joins, clauses = build_order_by(sort_spec, entity_kind)
    for relation in joins:
        query = query.outerjoin(relation)

    return query.order_by(*clauses)
