import structlog

from ...domain.entities import Product
from ...domain.errors import MissingDependencyError
from ...domain.ports import ProductStore

logger = structlog.get_logger()


class VariationExistenceChecker:
    """
    Confirms that every variation referenced by a product exists.

    Every declared id is queried; all ids with no matching record are
    reported together in one MissingDependencyError.
    """

    def __init__(self, store: ProductStore, table_name: str, key_name: str = "id") -> None:
        self._store = store
        self._table_name = table_name
        self._key_name = key_name

    def missing_variations(self, product: Product) -> list[str]:
        """Return the variation ids of a product that have no record, in declared order."""
        missing = []
        for variation_id in product.variations:
            records = self._store.query_by_key(self._table_name, self._key_name, variation_id)
            if not records:
                missing.append(variation_id)
        return missing

    def check(self, product: Product, index: int) -> None:
        """
        Raise if any variation of the product does not exist.

        Raises:
            MissingDependencyError: Naming every missing variation id
        """
        missing = self.missing_variations(product)
        if missing:
            logger.warning(
                "Product references missing variations",
                index=index,
                product_id=product.id,
                missing=missing,
            )
            raise MissingDependencyError(product.id, index, missing)
