"""
Translation between API Gateway proxy events and the application layer.

Input errors are raised before the body is used so a rejected request
never reaches the store.
"""

import base64
import binascii
import json
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from ..application.dtos import BatchStatus, ProductBatchResult
from ..domain.entities import MAX_BATCH_STATEMENTS, WriteOperation
from ..domain.errors import ErrorDetail, InputError

PRODUCTS_HINT = "Please provide an array of products with all the required properties"


class StatusCodes(IntEnum):
    SUCCESS = 200
    ERROR = 400
    INTERNAL_ERROR = 500


_STATUS_CODES = {
    BatchStatus.SUCCESS: StatusCodes.SUCCESS,
    BatchStatus.REJECTED: StatusCodes.ERROR,
    BatchStatus.PARTIAL_FAILURE: StatusCodes.ERROR,
    BatchStatus.FAILED: StatusCodes.INTERNAL_ERROR,
}


@dataclass(frozen=True)
class ParsedRequest:
    operation: WriteOperation
    items: list[Any]


def _http_method(event: dict) -> str:
    method = ((event.get("requestContext") or {}).get("http") or {}).get("method")
    return (method or event.get("httpMethod") or "").upper()


def _decode_body(event: dict) -> str:
    body = event["body"]
    if not event.get("isBase64Encoded"):
        return body
    try:
        return base64.b64decode(body).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise InputError(
            "Validation Error in provided event",
            ErrorDetail(name="Invalid body encoding", message="The request body is not valid base64 UTF-8"),
        ) from e


def parse_event(event: dict) -> ParsedRequest:
    """
    Extract the write operation and product items from a proxy event.

    Raises:
        InputError: For a missing body, unsupported method, malformed JSON,
            a body that is not an array, or an empty or oversized array
    """
    if not event.get("body"):
        raise InputError(
            "Validation Error in provided event",
            ErrorDetail(name="No arguments provided", message=PRODUCTS_HINT),
        )

    method = _http_method(event)
    operation = WriteOperation.from_http_method(method)
    if operation is None:
        raise InputError(
            "Please provide a valid http method",
            ErrorDetail(
                name="Only POST and PATCH are supported",
                message=(
                    "Please send a POST http request to add new products "
                    "and a PATCH http request to update existing products"
                ),
            ),
        )

    try:
        items = json.loads(_decode_body(event))
    except json.JSONDecodeError as e:
        raise InputError(
            "Validation Error in provided event",
            ErrorDetail(name="Invalid JSON body", message=f"The request body is not valid JSON: {e.msg}"),
        ) from e
    except RecursionError as e:
        raise InputError(
            "Validation Error in provided event",
            ErrorDetail(name="Invalid JSON body", message="The request body is nested too deeply"),
        ) from e

    if not isinstance(items, list):
        raise InputError(
            "Validation Error in provided products",
            ErrorDetail(name="Products must be an array", message=PRODUCTS_HINT),
        )

    if not items:
        raise InputError(
            "Validation Error in provided products",
            ErrorDetail(name="No products provided", message=PRODUCTS_HINT),
        )

    if len(items) > MAX_BATCH_STATEMENTS:
        raise InputError(
            "Validation Error in provided products",
            ErrorDetail(
                name="Too many products provided",
                message=f"Please provide at most {MAX_BATCH_STATEMENTS} products per request",
            ),
        )

    return ParsedRequest(operation=operation, items=items)


def to_response(result: ProductBatchResult) -> dict:
    """Shape a batch result as an API Gateway proxy response."""
    if result.ok:
        body = {"data": result.data}
    else:
        body = {"errors": result.errors}

    return {
        "statusCode": int(_STATUS_CODES[result.status]),
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }
