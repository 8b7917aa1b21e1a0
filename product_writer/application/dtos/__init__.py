from .batch_result_dto import BatchStatus, ProductBatchResult
from .product_dto import ProductDTO

__all__ = [
    "BatchStatus",
    "ProductBatchResult",
    "ProductDTO",
]
