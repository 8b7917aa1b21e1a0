"""Lambda entry point for writing product batches."""

import structlog

from .application.services import ProductBatchService
from .config import Settings, get_settings
from .domain.ports import ProductStore
from .infrastructure.adapters import DynamoDbProductStore, create_dynamodb_client
from .infrastructure.logging import configure_logging, set_correlation_id
from .presentation import ProductBatchHandler

logger = structlog.get_logger()

# Composition root, built on the first invocation and reused while warm
_handler: ProductBatchHandler | None = None


def create_handler(settings: Settings, store: ProductStore | None = None) -> ProductBatchHandler:
    """Wire up the handler from settings (Composition Root)."""
    if store is None:
        client = create_dynamodb_client(
            region_name=settings.default_region,
            endpoint_url=settings.aws_endpoint_url,
            connect_timeout=settings.store_connect_timeout,
            read_timeout=settings.store_read_timeout,
            max_attempts=settings.store_max_attempts,
        )
        store = DynamoDbProductStore(client)

    service = ProductBatchService(
        store=store,
        products_table=settings.wordpress_products_table_name,
        variations_table=settings.wordpress_product_variations_table_name,
    )
    return ProductBatchHandler(service)


def get_handler() -> ProductBatchHandler:
    """Get or create the process-wide handler."""
    global _handler
    if _handler is None:
        settings = get_settings()
        configure_logging(settings.service_name, settings.log_level)
        _handler = create_handler(settings)
    return _handler


def handler(event: dict, context) -> dict:
    """AWS Lambda handler for API Gateway proxy integration."""
    request_id = getattr(context, "aws_request_id", None) or (event.get("requestContext") or {}).get("requestId", "")
    set_correlation_id(request_id)

    # ConfigurationError propagates; it is logged when settings are loaded
    product_handler = get_handler()

    logger.info(
        "Handler called",
        method=((event.get("requestContext") or {}).get("http") or {}).get("method"),
        path=event.get("rawPath"),
    )
    return product_handler.handle(event)
