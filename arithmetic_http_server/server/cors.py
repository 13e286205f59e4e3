"""CORS header middleware."""
from starlette.datastructures import MutableHeaders
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class CORSHeadersMiddleware:
    """
    Pure ASGI middleware adding the CORS headers to every HTTP response.

    Unlike Starlette's CORSMiddleware, headers are sent whether or not the
    request carries an Origin header, and any OPTIONS request is answered
    here with an empty 200 instead of being routed.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for name, value in CORS_HEADERS.items():
                    headers[name] = value
            await send(message)

        if scope["method"] == "OPTIONS":
            # Preflight
            await Response(status_code=200)(scope, receive, send_with_cors)
            return

        await self.app(scope, receive, send_with_cors)
