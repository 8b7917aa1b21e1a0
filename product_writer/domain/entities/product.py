from dataclasses import dataclass
from enum import Enum


class WriteOperation(str, Enum):
    """Write operations supported against the products table."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"

    @classmethod
    def from_http_method(cls, method: str) -> "WriteOperation | None":
        """Map an HTTP method to its write operation, None if unsupported."""
        return _HTTP_METHODS.get(method.upper())


_HTTP_METHODS = {
    "POST": WriteOperation.INSERT,
    "PATCH": WriteOperation.UPDATE,
}


@dataclass(frozen=True)
class Product:
    """A validated product submitted in a request body.

    Variation ids keep their declared order with duplicates removed.
    """

    id: str
    slug: str
    name: str
    variations: tuple[str, ...]

    @classmethod
    def create(cls, id: str, slug: str, name: str, variations: list[str]) -> "Product":
        return cls(
            id=id,
            slug=slug,
            name=name,
            variations=tuple(dict.fromkeys(variations)),
        )
