import re

import pytest

from product_writer.application.services import build_statement, utc_timestamp
from product_writer.domain.entities import Product, WriteOperation

ISO_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


@pytest.fixture
def product() -> Product:
    return Product.create(id="1", slug="a", name="A", variations=["v1", "v2"])


class TestUtcTimestamp:
    def test_format(self) -> None:
        assert ISO_UTC.match(utc_timestamp())


class TestBuildStatement:
    def test_insert_statement(self, product) -> None:
        statement = build_statement(product, WriteOperation.INSERT, "products", "2024-05-01T12:00:00.000Z")

        assert statement.operation == WriteOperation.INSERT
        assert statement.table_name == "products"
        assert statement.text == (
            "INSERT INTO \"products\" VALUE {'id': ?, 'slug': ?, 'variations': ?, "
            "'name': ?, 'date_created_gmt': ?, 'date_modified_gmt': ?}"
        )
        assert statement.parameters == (
            "1",
            "a",
            {"v1", "v2"},
            "A",
            "2024-05-01T12:00:00.000Z",
            "2024-05-01T12:00:00.000Z",
        )

    def test_insert_generates_equal_dates(self, product) -> None:
        statement = build_statement(product, WriteOperation.INSERT, "products")

        created, modified = statement.parameters[4], statement.parameters[5]
        assert created == modified
        assert ISO_UTC.match(created)

    def test_update_statement_keyed_by_id_and_slug(self, product) -> None:
        statement = build_statement(product, WriteOperation.UPDATE, "products", "2024-05-01T12:00:00.000Z")

        assert statement.text == (
            "UPDATE \"products\" SET \"variations\"=?, \"name\"=?, \"date_modified_gmt\"=? "
            "WHERE \"id\"=? AND \"slug\"=?"
        )
        assert statement.parameters == ({"v1", "v2"}, "A", "2024-05-01T12:00:00.000Z", "1", "a")
        assert "date_created_gmt" not in statement.text

    def test_values_never_interpolated(self) -> None:
        product = Product.create(id="1' OR '1'='1", slug="a", name="'; DROP", variations=["v1"])

        statement = build_statement(product, WriteOperation.INSERT, "products")

        assert "DROP" not in statement.text
        assert "1' OR" not in statement.text
        assert statement.text.count("?") == len(statement.parameters)
