import json

import pytest

from product_writer.application.services import ProductBatchService
from product_writer.domain.errors import ErrorDetail
from product_writer.presentation import ProductBatchHandler

from tests.conftest import InMemoryProductStore, make_event


@pytest.fixture
def handler(service):
    return ProductBatchHandler(service)


class TestProductBatchHandler:
    def test_empty_array_rejected_without_store_call(self, handler, store) -> None:
        response = handler.handle(make_event([], "POST"))

        body = json.loads(response["body"])
        assert response["statusCode"] == 400
        assert body["errors"][0]["error"]["name"].lower() == "no products provided"
        assert store.queries == []
        assert store.batches == []

    def test_single_insert_with_existing_variation(self, handler, store) -> None:
        response = handler.handle(
            make_event([{"id": "1", "slug": "a", "name": "A", "variations": ["v1"]}], "POST")
        )

        assert response["statusCode"] == 200
        assert len(store.batches) == 1
        (statement,) = store.batches[0]
        assert statement.text.startswith("INSERT INTO")
        assert statement.parameters[4] == statement.parameters[5]
        assert "data" in json.loads(response["body"])

    def test_missing_variation_rejected_without_write(self) -> None:
        empty_store = InMemoryProductStore()
        handler = ProductBatchHandler(ProductBatchService(empty_store, "products", "variations"))

        response = handler.handle(
            make_event([{"id": "1", "slug": "a", "name": "A", "variations": ["v1"]}], "POST")
        )

        body = json.loads(response["body"])
        assert response["statusCode"] == 400
        assert "v1" in body["errors"][0]["description"]
        assert empty_store.queries == [("variations", "id", "v1")]
        assert empty_store.batches == []

    def test_unsupported_method_rejected_before_parsing(self, handler, store) -> None:
        response = handler.handle(make_event("{not json", "DELETE"))

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["errors"][0]["error"]["name"] == "Only POST and PATCH are supported"
        assert store.batches == []

    def test_partial_failure_lists_all_errors(self, product_item) -> None:
        failure = ErrorDetail(name="ConditionalCheckFailed", message="The conditional request failed")
        store = InMemoryProductStore(variations={"v1"}, failures={0: failure, 1: failure})
        handler = ProductBatchHandler(ProductBatchService(store, "products", "variations"))
        items = [dict(product_item, id=str(i), slug=f"s{i}") for i in range(3)]

        response = handler.handle(make_event(items, "PATCH"))

        errors = json.loads(response["body"])["errors"]
        assert response["statusCode"] == 400
        assert [e["index"] for e in errors] == [0, 1]
        assert all(e["error"]["name"] == "ConditionalCheckFailed" for e in errors)

    def test_deeply_nested_body_returns_400(self, handler, store) -> None:
        response = handler.handle(make_event("[" * 200000 + "]" * 200000, "POST"))

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["errors"][0]["error"]["name"] == "Invalid JSON body"
        assert store.batches == []
