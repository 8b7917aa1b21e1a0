"""
DynamoDB implementation of the ProductStore port.

Statements are submitted with BatchExecuteStatement and lookups use
Query on the partition key. Statement parameters are serialized to
DynamoDB attribute values here so the application layer only deals
with plain Python values.
"""

from typing import Any

import boto3
import structlog
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ...domain.entities import BatchExecution, BatchOutcome, WriteStatement
from ...domain.errors import ErrorDetail, StoreError
from ...domain.ports import ProductStore

logger = structlog.get_logger()


def create_dynamodb_client(
    region_name: str,
    endpoint_url: str | None = None,
    connect_timeout: float = 5,
    read_timeout: float = 10,
    max_attempts: int = 3,
) -> Any:
    """Create a DynamoDB client with explicit timeouts."""
    config = Config(
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        retries={"max_attempts": max_attempts, "mode": "standard"},
    )
    client_kwargs: dict[str, Any] = {"region_name": region_name, "config": config}
    if endpoint_url:
        client_kwargs["endpoint_url"] = endpoint_url
    return boto3.client("dynamodb", **client_kwargs)


def _client_error(operation: str, e: ClientError | BotoCoreError) -> StoreError:
    if isinstance(e, ClientError):
        error = e.response.get("Error", {})
        return StoreError(operation, error.get("Code", "ClientError"), error.get("Message", str(e)))
    return StoreError(operation, type(e).__name__, str(e))


class DynamoDbProductStore(ProductStore):
    """
    boto3 implementation of ProductStore.

    The client is created once per process and shared by every
    invocation; this adapter keeps no per-request state.
    """

    def __init__(self, client: Any) -> None:
        """
        Initialize with a DynamoDB client.

        Args:
            client: boto3 DynamoDB low-level client
        """
        self._client = client
        self._serializer = TypeSerializer()
        self._deserializer = TypeDeserializer()

    def execute_batch(self, statements: list[WriteStatement]) -> BatchExecution:
        """Submit statements with BatchExecuteStatement."""
        request = [
            {
                "Statement": statement.text,
                "Parameters": [self._serializer.serialize(value) for value in statement.parameters],
            }
            for statement in statements
        ]

        try:
            response = self._client.batch_execute_statement(Statements=request)
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "Batch execute statement failed",
                statements=len(statements),
                error=str(e),
            )
            raise _client_error("BatchExecuteStatement", e) from e

        outcomes = [
            self._to_outcome(index, item) for index, item in enumerate(response.get("Responses", []))
        ]
        return BatchExecution(outcomes=outcomes, raw=response)

    def query_by_key(self, table_name: str, key_name: str, key_value: str) -> list[dict[str, Any]]:
        """Query a table on its partition key and return deserialized items."""
        try:
            response = self._client.query(
                TableName=table_name,
                KeyConditionExpression="#key = :value",
                ExpressionAttributeNames={"#key": key_name},
                ExpressionAttributeValues={":value": self._serializer.serialize(key_value)},
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "Query failed",
                table_name=table_name,
                key_value=key_value,
                error=str(e),
            )
            raise _client_error("Query", e) from e

        return [
            {name: self._deserializer.deserialize(value) for name, value in item.items()}
            for item in response.get("Items", [])
        ]

    @staticmethod
    def _to_outcome(index: int, item: dict[str, Any]) -> BatchOutcome:
        error = item.get("Error")
        return BatchOutcome(
            index=index,
            table_name=item.get("TableName"),
            error=ErrorDetail(
                name=error.get("Code", "UnknownError"),
                message=error.get("Message", ""),
            )
            if error
            else None,
        )
