"""Example Starlette app returning reference trees as JSON:API documents.

Run with:
    uvicorn examples.jsonapi_example_app:app --reload
"""
from __future__ import annotations

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from jsonapi_serializer import JSONAPISerializer
from jsonapi_serializer.middleware import ErrorHandlerMiddleware
from jsonapi_serializer.responses import JSONAPIResponse

USERS = {
    1: {"_type": "users", "_id": 1, "name": "Ann", "email": "ann@example.com"},
    2: {"_type": "users", "_id": 2, "name": "Bob", "email": "bob@example.com"},
}

ARTICLES = [
    {
        "_type": "articles",
        "_id": 1,
        "title": "JSON:API paints my bikeshed!",
        "body": "The shortest article. Ever.",
        "author": USERS[1],
        "comments": [
            {"_type": "comments", "_id": 5, "body": "First!", "author": USERS[2]},
            {"_type": "comments", "_id": 12, "body": "I like XML better", "author": USERS[1]},
        ],
    },
    {
        "_type": "articles",
        "_id": 2,
        "title": "Rails is Omakase",
        "author": USERS[2],
    },
]


async def list_articles(request: Request) -> Response:
    return JSONAPIResponse(ARTICLES)


async def convert(request: Request) -> Response:
    """Serialize any posted JSON tree."""
    body = await request.body()
    return Response(
        JSONAPISerializer().serialize_text(body),
        media_type="application/vnd.api+json",
    )


app = Starlette(
    routes=[
        Route("/articles", list_articles),
        Route("/serialize", convert, methods=["POST"]),
    ],
    middleware=[Middleware(ErrorHandlerMiddleware)],
)
