"""
Error taxonomy for the product writer.

Configuration failures are fatal and propagate out of the handler.
Request failures (input, field validation, missing dependency) are turned
into a rejected result by the application service. Store failures wrap
errors raised by the AWS SDK.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error detail returned to callers."""

    name: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class ProductWriterError(Exception):
    """Base error carrying a short description and a structured detail."""

    def __init__(self, description: str, detail: ErrorDetail) -> None:
        super().__init__(description)
        self.description = description
        self.detail = detail

    def to_dict(self) -> dict:
        return {"description": self.description, "error": self.detail.to_dict()}


class ConfigurationError(ProductWriterError):
    """Raised when required configuration is missing."""

    def __init__(
        self,
        missing: list[str],
        description: str | None = None,
        detail: ErrorDetail | None = None,
    ) -> None:
        keys = ", ".join(missing)
        super().__init__(
            description or f"Please provide {keys} in environment variables",
            detail
            or ErrorDetail(
                name="Missing env variables",
                message=f"Please provide {keys} in environment variables",
            ),
        )
        self.missing = missing

    @classmethod
    def from_secret(cls, secret_id: str, missing: list[str], reason: str) -> "ConfigurationError":
        """Configuration error for a config secret that could not be used."""
        return cls(
            missing,
            description=f"Could not load configuration from secret {secret_id}",
            detail=ErrorDetail(name="Invalid configuration secret", message=reason),
        )


class RequestError(ProductWriterError):
    """Base for failures that reject the whole request before any write."""


class InputError(RequestError):
    """Raised for a missing or malformed request (body, method, array)."""


class FieldValidationError(RequestError):
    """Raised when a product is missing a required field."""

    def __init__(self, description: str, detail: ErrorDetail, field: str, index: int) -> None:
        super().__init__(description, detail)
        self.field = field
        self.index = index


class MissingDependencyError(RequestError):
    """Raised when a product references variations that do not exist."""

    def __init__(self, product_id: str, index: int, missing: list[str]) -> None:
        ids = ", ".join(missing)
        super().__init__(
            f"Variations {ids} for the product at index {index} with id {product_id} do not exist",
            ErrorDetail(
                name="Missing product variations",
                message=(
                    f"Please create the product variations with ids {ids} "
                    f"before adding them to the product with id {product_id}"
                ),
            ),
        )
        self.product_id = product_id
        self.index = index
        self.missing = missing


class StoreError(ProductWriterError):
    """Raised when a call to the key-value store itself fails."""

    def __init__(self, operation: str, code: str, message: str) -> None:
        super().__init__(
            f"Store call {operation} failed",
            ErrorDetail(name=code, message=message),
        )
        self.operation = operation
        self.code = code
