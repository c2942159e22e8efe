"""
Echo API route.

Registered without a method list: any method is echoed.
"""
from fastapi import Request, Response

MISSING_MESSAGE = "Missing message query parameter."


async def echo(request: Request) -> Response:
    """Send back the first ``message`` query value as plain text."""
    messages = request.query_params.getlist("message")
    if not messages:
        return Response(content=MISSING_MESSAGE, status_code=400)
    return Response(content=messages[0], status_code=200, headers={"Content-Type": "text/plain"})
