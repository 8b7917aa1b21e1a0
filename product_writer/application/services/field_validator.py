"""
Field validation for product items in a request body.

Required fields are checked in a fixed order and the first missing one
rejects the item. Items that pass are shaped through ProductDTO so that
every field has the expected type.
"""

from typing import Any

import structlog
from pydantic import ValidationError

from ...domain.entities import Product
from ...domain.errors import ErrorDetail, FieldValidationError
from ..dtos import ProductDTO

logger = structlog.get_logger()

REQUIRED_FIELDS = ("id", "slug", "variations", "name")

# What to ask the caller for when a field is missing
_FIELD_HINTS = {
    "id": "an id",
    "slug": "a slug",
    "variations": "an array of product variations IDs",
    "name": "a name",
}


def _location(index: int, product_id: Any) -> str:
    if product_id:
        return f"at index {index} with id {product_id}"
    return f"at index {index}"


def _missing_field(field: str, index: int, product_id: Any) -> FieldValidationError:
    location = _location(index, product_id)
    return FieldValidationError(
        f"No {field} for the product {location}",
        ErrorDetail(
            name=f"No {field} provided",
            message=f"Please provide {_FIELD_HINTS[field]} for the product {location}",
        ),
        field=field,
        index=index,
    )


def _invalid_field(field: str, index: int, product_id: Any, reason: str) -> FieldValidationError:
    location = _location(index, product_id)
    return FieldValidationError(
        f"Invalid {field} for the product {location}",
        ErrorDetail(
            name=f"Invalid {field} provided",
            message=f"The {field} for the product {location} is invalid: {reason}",
        ),
        field=field,
        index=index,
    )


def validate_product(item: Any, index: int) -> Product:
    """
    Validate one raw request item.

    Args:
        item: Raw item decoded from the request body
        index: Position of the item in the request array

    Returns:
        The validated Product

    Raises:
        FieldValidationError: On the first missing or invalid field
    """
    if not isinstance(item, dict):
        raise FieldValidationError(
            f"The product at index {index} is not an object",
            ErrorDetail(
                name="Invalid product provided",
                message=(
                    f"Please provide the product at index {index} as an object "
                    "with id, slug, name and variations"
                ),
            ),
            field="product",
            index=index,
        )

    product_id = item.get("id")
    for field in REQUIRED_FIELDS:
        if not item.get(field):
            raise _missing_field(field, index, product_id)

    try:
        dto = ProductDTO.model_validate(item)
    except ValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else "product"
        raise _invalid_field(field, index, product_id, first["msg"]) from e

    logger.debug("Product passed field validation", index=index, product_id=dto.id)
    return dto.to_entity()
