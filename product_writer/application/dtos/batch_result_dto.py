from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ...domain.errors import ProductWriterError


class BatchStatus(str, Enum):
    """Terminal states of one invocation."""

    REJECTED = "rejected"
    PARTIAL_FAILURE = "partial_failure"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class ProductBatchResult:
    """Outcome of processing one request batch.

    REJECTED and FAILED carry a single error, PARTIAL_FAILURE carries one
    error per failing statement and SUCCESS carries the raw store response.
    """

    status: BatchStatus
    data: dict[str, Any] | None = None
    errors: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def rejected(cls, error: ProductWriterError) -> "ProductBatchResult":
        return cls(status=BatchStatus.REJECTED, errors=[error.to_dict()])

    @classmethod
    def failed(cls, error: ProductWriterError) -> "ProductBatchResult":
        return cls(status=BatchStatus.FAILED, errors=[error.to_dict()])

    @property
    def ok(self) -> bool:
        return self.status == BatchStatus.SUCCESS
