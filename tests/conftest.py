import json
from typing import Any

import pytest

from product_writer.application.services import ProductBatchService
from product_writer.domain.entities import BatchExecution, BatchOutcome, WriteStatement
from product_writer.domain.errors import ErrorDetail
from product_writer.domain.ports import ProductStore

PRODUCTS_TABLE = "wordpress-products"
VARIATIONS_TABLE = "wordpress-product-variations"


class InMemoryProductStore(ProductStore):
    """In-memory ProductStore that records every call."""

    def __init__(
        self,
        variations: set[str] | None = None,
        failures: dict[int, ErrorDetail] | None = None,
    ) -> None:
        self.variations = set(variations or ())
        self.failures = failures or {}
        self.batches: list[list[WriteStatement]] = []
        self.queries: list[tuple[str, str, str]] = []

    def execute_batch(self, statements: list[WriteStatement]) -> BatchExecution:
        self.batches.append(list(statements))
        outcomes = [
            BatchOutcome(index=i, table_name=s.table_name, error=self.failures.get(i))
            for i, s in enumerate(statements)
        ]
        raw = {
            "Responses": [
                {"TableName": o.table_name, **({"Error": {"Code": o.error.name, "Message": o.error.message}} if o.error else {})}
                for o in outcomes
            ]
        }
        return BatchExecution(outcomes=outcomes, raw=raw)

    def query_by_key(self, table_name: str, key_name: str, key_value: str) -> list[dict[str, Any]]:
        self.queries.append((table_name, key_name, key_value))
        if key_value in self.variations:
            return [{key_name: key_value}]
        return []


@pytest.fixture
def store() -> InMemoryProductStore:
    return InMemoryProductStore(variations={"v1", "v2", "v3"})


@pytest.fixture
def service(store) -> ProductBatchService:
    return ProductBatchService(
        store=store,
        products_table=PRODUCTS_TABLE,
        variations_table=VARIATIONS_TABLE,
    )


@pytest.fixture
def product_item() -> dict:
    return {"id": "1", "slug": "a", "name": "A", "variations": ["v1"]}


def make_event(body: Any, method: str = "POST") -> dict:
    """Build an API Gateway v2 proxy event."""
    return {
        "rawPath": "/products",
        "requestContext": {"requestId": "req-123", "http": {"method": method}},
        "body": body if isinstance(body, str) or body is None else json.dumps(body),
        "isBase64Encoded": False,
    }
