"""
PartiQL statement construction for product writes.

Values are always bound as positional parameters; only the table name
is part of the statement text.
"""

from datetime import UTC, datetime

from ...domain.entities import Product, WriteOperation, WriteStatement

INSERT_TEMPLATE = (
    "INSERT INTO \"{table}\" VALUE "
    "{{'id': ?, 'slug': ?, 'variations': ?, 'name': ?, "
    "'date_created_gmt': ?, 'date_modified_gmt': ?}}"
)

UPDATE_TEMPLATE = (
    "UPDATE \"{table}\" "
    "SET \"variations\"=?, \"name\"=?, \"date_modified_gmt\"=? "
    "WHERE \"id\"=? AND \"slug\"=?"
)


def utc_timestamp() -> str:
    """Current time as ISO-8601 UTC with millisecond precision, e.g. 2024-05-01T12:00:00.123Z."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_statement(
    product: Product,
    operation: WriteOperation,
    table_name: str,
    timestamp: str | None = None,
) -> WriteStatement:
    """
    Build the write statement for one validated product.

    Args:
        product: Validated product
        operation: INSERT creates the record, UPDATE modifies it by (id, slug)
        table_name: Products table
        timestamp: Write time; generated when not given

    Returns:
        WriteStatement with positional parameters
    """
    now = timestamp or utc_timestamp()
    variations = set(product.variations)

    if operation == WriteOperation.INSERT:
        return WriteStatement(
            operation=operation,
            table_name=table_name,
            text=INSERT_TEMPLATE.format(table=table_name),
            parameters=(product.id, product.slug, variations, product.name, now, now),
            product_id=product.id,
        )

    if operation == WriteOperation.UPDATE:
        return WriteStatement(
            operation=operation,
            table_name=table_name,
            text=UPDATE_TEMPLATE.format(table=table_name),
            parameters=(variations, product.name, now, product.id, product.slug),
            product_id=product.id,
        )

    raise ValueError(f"Unsupported write operation: {operation}")
