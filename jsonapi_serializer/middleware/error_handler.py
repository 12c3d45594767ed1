"""JSON:API error handling middleware."""

import logging
from typing import Any

from starlette.responses import JSONResponse

from jsonapi_serializer.core.errors import JSONAPIErrorBuilder, SerializerError
from jsonapi_serializer.schemas.resource import JSONAPIErrorDocument

logger = logging.getLogger(__name__)

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class ErrorHandlerMiddleware:
    """Convert exceptions into JSON:API error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.error_builder = JSONAPIErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except SerializerError as exc:
            logger.info("Serializer error: %s", exc)
            response = self.error_response(exc, int(exc.status))
            await response(scope, receive, send)
        except Exception as exc:  # noqa: BLE001 - last-resort handler
            logger.exception("Unhandled error while serving request")
            response = self.error_response(exc, 500)
            await response(scope, receive, send)

    def error_response(self, exc: BaseException, status_code: int) -> JSONResponse:
        document = JSONAPIErrorDocument(
            errors=[self.error_builder.from_exception(exc)]
        )
        return JSONResponse(
            document.model_dump(),
            status_code=status_code,
            media_type=JSONAPI_MEDIA_TYPE,
        )
