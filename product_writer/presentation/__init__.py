from .handler import ProductBatchHandler
from .http import ParsedRequest, StatusCodes, parse_event, to_response

__all__ = [
    "ParsedRequest",
    "ProductBatchHandler",
    "StatusCodes",
    "parse_event",
    "to_response",
]
