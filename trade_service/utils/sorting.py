"""
Sort parameter parsing for trade service list queries.

A sort parameter is a comma-separated list of field names, each optionally
prefixed with ``-`` for descending order, e.g. ``"-tradeTimestamp,id"``.
Field names are checked against a fixed whitelist per entity kind so that
only known columns (or ``relation.field`` paths on related entities) ever
reach the query layer.
"""

from enum import Enum
from typing import FrozenSet, Iterator, List, Optional, Set, Union

from pydantic import BaseModel, ConfigDict

from trade_service.exceptions import InvalidSortField
from trade_service.logging import setup_logger

logger = setup_logger(__name__)


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class EntityKind(str, Enum):
    TRADE_ORDER = "TradeOrder"
    EXECUTION = "Execution"


class SortField(BaseModel):
    """A single sort key: field name (bare or ``relation.field``) and direction."""

    model_config = ConfigDict(frozen=True)

    name: str
    direction: SortDirection = SortDirection.ASC

    @property
    def is_nested(self) -> bool:
        return "." in self.name

    @property
    def relation(self) -> Optional[str]:
        return self.name.split(".", 1)[0] if self.is_nested else None

    @property
    def attribute(self) -> str:
        return self.name.rsplit(".", 1)[-1]


SortSpec = List[SortField]

# Valid sortable fields for TradeOrder
VALID_TRADE_ORDER_SORT_FIELDS: FrozenSet[str] = frozenset({
    "id", "orderId", "orderType", "quantity", "quantitySent",
    "tradeTimestamp", "submitted", "blotter.abbreviation",
})

# Valid sortable fields for Execution
VALID_EXECUTION_SORT_FIELDS: FrozenSet[str] = frozenset({
    "id", "executionTimestamp", "quantityOrdered", "quantityPlaced",
    "quantityFilled", "tradeOrderId", "executionStatus.abbreviation",
    "blotter.abbreviation", "tradeType.abbreviation", "destination.abbreviation",
})

_WHITELISTS = {
    EntityKind.TRADE_ORDER: VALID_TRADE_ORDER_SORT_FIELDS,
    EntityKind.EXECUTION: VALID_EXECUTION_SORT_FIELDS,
}


def _whitelist(entity_kind: Union[EntityKind, str]) -> FrozenSet[str]:
    return _WHITELISTS[EntityKind(entity_kind)]


def _tokens(sort_param: Optional[str]) -> Iterator[tuple]:
    """Yield (field_name, direction) for every non-empty token."""
    if sort_param is None or not sort_param.strip():
        return

    for token in sort_param.split(","):
        token = token.strip()
        if not token:
            continue

        if token.startswith("-"):
            field_name, direction = token[1:], SortDirection.DESC
        else:
            field_name, direction = token, SortDirection.ASC

        # A lone "-" names nothing
        if not field_name:
            continue

        yield field_name, direction


def _check(field_name: str, entity_kind: EntityKind, valid_fields: FrozenSet[str]) -> None:
    if field_name not in valid_fields:
        logger.debug(f"Rejected sort field '{field_name}' for {entity_kind.value}")
        raise InvalidSortField(field_name, entity_kind.value, valid_fields)


def parse_sort(sort_param: Optional[str], entity_kind: Union[EntityKind, str]) -> SortSpec:
    """
    Parse a sort parameter into an ordered list of sort fields.

    Args:
        sort_param: Comma-separated field names, ``-`` prefix for descending.
            ``None`` or a blank string means unsorted.
        entity_kind: Entity whose whitelist the fields are checked against.

    Returns:
        Sort fields in the order they appear in ``sort_param``. Repeated
        fields are kept as separate keys.

    Raises:
        InvalidSortField: If any field is not whitelisted for ``entity_kind``.
            Nothing is returned for the valid fields in that case.
    """
    kind = EntityKind(entity_kind)
    valid_fields = _whitelist(kind)
    sort_spec: SortSpec = []

    for field_name, direction in _tokens(sort_param):
        _check(field_name, kind, valid_fields)

        # Handle nested field sorting
        if "." in field_name:
            relation, attribute = field_name.split(".")
            field_name = f"{relation}.{attribute}"

        sort_spec.append(SortField(name=field_name, direction=direction))

    logger.debug(f"Parsed sort '{sort_param}' for {kind.value} into {len(sort_spec)} field(s)")
    return sort_spec


def validate_sort_fields(sort_param: Optional[str], entity_kind: Union[EntityKind, str]) -> None:
    """Check every field in ``sort_param`` without building a sort spec."""
    kind = EntityKind(entity_kind)
    valid_fields = _whitelist(kind)

    for field_name, _ in _tokens(sort_param):
        _check(field_name, kind, valid_fields)


def get_valid_sort_fields(entity_kind: Union[EntityKind, str]) -> Set[str]:
    """Return a copy of the whitelist; changes to it are not seen by the parser."""
    return set(_whitelist(entity_kind))


def parse_trade_order_sort(sort_param: Optional[str]) -> SortSpec:
    return parse_sort(sort_param, EntityKind.TRADE_ORDER)


def parse_execution_sort(sort_param: Optional[str]) -> SortSpec:
    return parse_sort(sort_param, EntityKind.EXECUTION)


def validate_trade_order_sort_fields(sort_param: Optional[str]) -> None:
    validate_sort_fields(sort_param, EntityKind.TRADE_ORDER)


def validate_execution_sort_fields(sort_param: Optional[str]) -> None:
    validate_sort_fields(sort_param, EntityKind.EXECUTION)


def get_valid_trade_order_sort_fields() -> Set[str]:
    return get_valid_sort_fields(EntityKind.TRADE_ORDER)


def get_valid_execution_sort_fields() -> Set[str]:
    return get_valid_sort_fields(EntityKind.EXECUTION)
