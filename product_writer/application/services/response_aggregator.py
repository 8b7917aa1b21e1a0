from typing import Any

import structlog

from ...domain.entities import BatchExecution, BatchOutcome, WriteStatement
from ..dtos import BatchStatus, ProductBatchResult

logger = structlog.get_logger()


def extract_errors(outcomes: list[BatchOutcome]) -> list[BatchOutcome]:
    """Return the outcomes that carry an error."""
    return [outcome for outcome in outcomes if not outcome.succeeded]


def _error_entry(outcome: BatchOutcome, statement: WriteStatement) -> dict[str, Any]:
    return {
        "description": f"Failed to write the product at index {outcome.index} with id {statement.product_id}",
        "error": outcome.error.to_dict(),
        "index": outcome.index,
        "id": statement.product_id,
        "table_name": outcome.table_name or statement.table_name,
    }


def aggregate(execution: BatchExecution, statements: list[WriteStatement]) -> ProductBatchResult:
    """
    Shape the result of a batch execution.

    Every failing outcome is listed; with no failures the raw store
    response is returned as data.
    """
    failures = extract_errors(execution.outcomes)
    if failures:
        errors = [_error_entry(outcome, statements[outcome.index]) for outcome in failures]
        for entry in errors:
            logger.error(
                entry["description"],
                error_name=entry["error"]["name"],
                error_message=entry["error"]["message"],
            )
        return ProductBatchResult(status=BatchStatus.PARTIAL_FAILURE, errors=errors)

    return ProductBatchResult(status=BatchStatus.SUCCESS, data=execution.raw)
