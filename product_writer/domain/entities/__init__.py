from .product import Product, WriteOperation
from .statement import MAX_BATCH_STATEMENTS, BatchExecution, BatchOutcome, WriteStatement

__all__ = [
    "MAX_BATCH_STATEMENTS",
    "BatchExecution",
    "BatchOutcome",
    "Product",
    "WriteOperation",
    "WriteStatement",
]
