"""
CORS headers for the books API.

The collection endpoint advertises the full allow-list on every response; the
item endpoint only allows any origin.
"""
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

COLLECTION_PATH = "/api/books"
ITEM_PREFIX = COLLECTION_PATH + "/"

ALLOW_ORIGIN = "*"
ALLOW_METHODS = "POST, GET, OPTIONS, PUT, DELETE"
ALLOW_HEADERS = "Accept, Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization"

COLLECTION_CORS_HEADERS = {
    "Access-Control-Allow-Origin": ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": ALLOW_METHODS,
    "Access-Control-Allow-Headers": ALLOW_HEADERS,
}
ITEM_CORS_HEADERS = {
    "Access-Control-Allow-Origin": ALLOW_ORIGIN,
}


def cors_headers_for(path: str) -> dict:
    if path == COLLECTION_PATH:
        return COLLECTION_CORS_HEADERS
    if path.startswith(ITEM_PREFIX):
        return ITEM_CORS_HEADERS
    return {}


class BooksCORSMiddleware(BaseHTTPMiddleware):
    """Middleware to stamp the books CORS headers on every books response."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in cors_headers_for(request.url.path).items():
            response.headers[name] = value
        return response
