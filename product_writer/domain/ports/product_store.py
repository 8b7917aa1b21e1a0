"""
Outbound port for the key-value store holding products and variations.

Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..entities import BatchExecution, WriteStatement


class ProductStore(ABC):
    """
    Outbound port for product persistence.

    This abstraction lets the application layer submit parameterized
    statements and look up records without knowing about DynamoDB.
    """

    @abstractmethod
    def execute_batch(self, statements: list[WriteStatement]) -> BatchExecution:
        """
        Submit statements in a single batch call.

        Args:
            statements: Ordered, non-empty list of statements

        Returns:
            BatchExecution with one outcome per statement, in submission order

        Raises:
            StoreError: If the batch call itself fails
        """
        ...

    @abstractmethod
    def query_by_key(self, table_name: str, key_name: str, key_value: str) -> list[dict[str, Any]]:
        """
        Query a table by partition key.

        Args:
            table_name: Table to query
            key_name: Partition key attribute name
            key_value: Partition key value

        Returns:
            Matching records, possibly empty

        Raises:
            StoreError: If the query fails
        """
        ...
