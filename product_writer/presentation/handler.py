import structlog

from ..application.dtos import ProductBatchResult
from ..application.services import ProductBatchService, log_error
from ..domain.errors import InputError
from .http import parse_event, to_response

logger = structlog.get_logger()


class ProductBatchHandler:
    """
    Handles one API Gateway proxy event.

    Request-level failures come back as error responses; configuration
    failures are raised before a handler is ever built.
    """

    def __init__(self, service: ProductBatchService) -> None:
        self._service = service

    def handle(self, event: dict) -> dict:
        try:
            request = parse_event(event)
        except InputError as e:
            log_error(e)
            return to_response(ProductBatchResult.rejected(e))

        result = self._service.execute(request.items, request.operation)
        response = to_response(result)

        logger.info(
            "Product batch handled",
            status=result.status.value,
            status_code=response["statusCode"],
            errors=len(result.errors),
        )
        return response
