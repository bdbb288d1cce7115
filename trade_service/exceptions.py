from typing import Iterable


class TradeServiceError(Exception):
    """Base class for errors raised by the trade service package."""


class InvalidSortField(TradeServiceError, ValueError):
    """A requested sort field is not whitelisted for the entity kind."""

    def __init__(self, field: str, entity_kind: str, valid_fields: Iterable[str]):
        self.field = field
        self.entity_kind = entity_kind
        self.valid_fields = tuple(sorted(valid_fields))
        super().__init__(
            f"Invalid sort field '{field}' for {entity_kind}. "
            f"Valid fields are: {list(self.valid_fields)}"
        )
