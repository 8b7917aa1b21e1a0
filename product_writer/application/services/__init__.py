from .batch_executor import BatchExecutor
from .existence_checker import VariationExistenceChecker
from .field_validator import validate_product
from .product_batch_service import ProductBatchService, log_error
from .response_aggregator import aggregate, extract_errors
from .statement_builder import build_statement, utc_timestamp

__all__ = [
    "BatchExecutor",
    "ProductBatchService",
    "VariationExistenceChecker",
    "aggregate",
    "build_statement",
    "extract_errors",
    "log_error",
    "utc_timestamp",
    "validate_product",
]
