"""
Application service for writing a batch of products.

Items are validated and checked one by one; the first failure rejects
the whole batch before any write is issued. Valid batches are written
with a single batch call and failures are reported per item.
"""

from typing import Any

import structlog

from ...domain.entities import WriteOperation, WriteStatement
from ...domain.errors import ProductWriterError, RequestError, StoreError
from ...domain.ports import ProductStore
from ..dtos import ProductBatchResult
from .batch_executor import BatchExecutor
from .existence_checker import VariationExistenceChecker
from .field_validator import validate_product
from .response_aggregator import aggregate
from .statement_builder import build_statement

logger = structlog.get_logger()


def log_error(error: ProductWriterError) -> None:
    """Log a structured error before it is returned or raised."""
    logger.error(
        error.description,
        error_name=error.detail.name,
        error_message=error.detail.message,
    )


class ProductBatchService:
    """
    Validates, checks and writes one batch of products.

    The store is shared across invocations and is never mutated here.
    """

    def __init__(
        self,
        store: ProductStore,
        products_table: str,
        variations_table: str,
    ) -> None:
        self._products_table = products_table
        self._existence_checker = VariationExistenceChecker(store, variations_table)
        self._executor = BatchExecutor(store)

    def execute(self, items: list[Any], operation: WriteOperation) -> ProductBatchResult:
        """
        Process a batch of raw product items.

        Args:
            items: Raw items decoded from the request body
            operation: INSERT for new products, UPDATE for existing ones

        Returns:
            ProductBatchResult; REJECTED when an item fails validation or
            references missing variations, FAILED when the store call fails
        """
        logger.info("Processing product batch", items=len(items), operation=operation.value)

        try:
            statements = self.build_statements(items, operation)
            execution = self._executor.execute(statements)
        except RequestError as e:
            log_error(e)
            return ProductBatchResult.rejected(e)
        except StoreError as e:
            log_error(e)
            return ProductBatchResult.failed(e)

        return aggregate(execution, statements)

    def build_statements(self, items: list[Any], operation: WriteOperation) -> list[WriteStatement]:
        """
        Validate every item and build its statement.

        Raises:
            FieldValidationError: On the first item with a missing field
            MissingDependencyError: On the first item with missing variations
        """
        statements = []
        for index, item in enumerate(items):
            product = validate_product(item, index)
            self._existence_checker.check(product, index)
            statements.append(build_statement(product, operation, self._products_table))
        return statements
