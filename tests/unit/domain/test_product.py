import pytest

from product_writer.domain.entities import BatchOutcome, Product, WriteOperation
from product_writer.domain.errors import ErrorDetail


class TestWriteOperation:
    @pytest.mark.parametrize(
        "method,expected",
        [
            ("POST", WriteOperation.INSERT),
            ("PATCH", WriteOperation.UPDATE),
            ("post", WriteOperation.INSERT),
        ],
    )
    def test_supported_methods(self, method, expected) -> None:
        assert WriteOperation.from_http_method(method) == expected

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", ""])
    def test_unsupported_methods(self, method) -> None:
        assert WriteOperation.from_http_method(method) is None


class TestProduct:
    def test_create_deduplicates_variations(self) -> None:
        product = Product.create(id="1", slug="a", name="A", variations=["v1", "v1", "v2"])

        assert product.variations == ("v1", "v2")

    def test_product_is_immutable(self) -> None:
        product = Product.create(id="1", slug="a", name="A", variations=["v1"])

        with pytest.raises(AttributeError):
            product.name = "B"


class TestBatchOutcome:
    def test_succeeded_without_error(self) -> None:
        assert BatchOutcome(index=0).succeeded is True

    def test_failed_with_error(self) -> None:
        outcome = BatchOutcome(index=0, error=ErrorDetail(name="DuplicateItem", message="exists"))

        assert outcome.succeeded is False
