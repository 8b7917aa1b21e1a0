from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorDetail
from .product import WriteOperation

# DynamoDB limit for BatchExecuteStatement
MAX_BATCH_STATEMENTS = 25


@dataclass(frozen=True)
class WriteStatement:
    """A parameterized PartiQL statement bound to one product."""

    operation: WriteOperation
    table_name: str
    text: str
    parameters: tuple[Any, ...]
    product_id: str


@dataclass(frozen=True)
class BatchOutcome:
    """Result of one statement in a batch execution."""

    index: int
    table_name: str | None = None
    error: ErrorDetail | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class BatchExecution:
    """Outcomes of a batch call, in submission order, plus the raw store response."""

    outcomes: list[BatchOutcome]
    raw: dict[str, Any] = field(default_factory=dict)
