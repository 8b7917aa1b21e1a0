import structlog

from ...domain.entities import BatchExecution, WriteStatement
from ...domain.errors import ErrorDetail, InputError, StoreError
from ...domain.ports import ProductStore
from ...infrastructure.logging import Timer

logger = structlog.get_logger()


class BatchExecutor:
    """
    Submits all statements of a request in one batch call.

    Each statement succeeds or fails on its own; nothing is rolled back.
    """

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    def execute(self, statements: list[WriteStatement]) -> BatchExecution:
        """
        Execute the statements and return one outcome per statement.

        Raises:
            InputError: If there are no statements to submit
            StoreError: If the batch call fails or returns a mismatched outcome count
        """
        if not statements:
            raise InputError(
                "No statements to execute",
                ErrorDetail(
                    name="No products provided",
                    message="Please provide an array of products with all the required properties",
                ),
            )

        with Timer() as t:
            execution = self._store.execute_batch(statements)

        if len(execution.outcomes) != len(statements):
            raise StoreError(
                "BatchExecuteStatement",
                "OutcomeCountMismatch",
                f"Expected {len(statements)} outcomes, got {len(execution.outcomes)}",
            )

        logger.info(
            "Batch executed",
            statements=len(statements),
            failed=sum(1 for o in execution.outcomes if not o.succeeded),
            duration_ms=t.duration_ms,
        )
        return execution
