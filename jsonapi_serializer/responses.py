"""Starlette response rendering reference trees as JSON:API documents."""

from typing import Any

from starlette.responses import JSONResponse

from jsonapi_serializer.middleware.error_handler import JSONAPI_MEDIA_TYPE
from jsonapi_serializer.serializers.base import JSONAPISerializer


class JSONAPIResponse(JSONResponse):
    """JSONResponse that serializes its content into a JSON:API document."""

    media_type = JSONAPI_MEDIA_TYPE
    serializer_class: type[JSONAPISerializer] = JSONAPISerializer

    def render(self, content: Any) -> bytes:
        return super().render(self.serializer_class().serialize(content))
