"""Route table for the calculator HTTP server."""
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from arithmetic_http_server.server.cors import CORSHeadersMiddleware
from arithmetic_http_server.server.handler import HandlerResult, RequestHandler


def _to_response(handled: HandlerResult) -> JSONResponse:
    status_code, model = handled
    return JSONResponse(status_code=status_code, content=model.model_dump(mode="json"))


async def _read_body(request: Request) -> str:
    return (await request.body()).decode("utf-8", errors="replace")


def create_app(web_dir: Path, multiply_endpoint: bool = True) -> FastAPI:
    """
    Build the application: API routes first, then static files at ``/``.

    :param Path web_dir: Directory holding the static front end
    :param bool multiply_endpoint: Also serve ``POST /api/multiply``

    :return: Configured application
    :rtype: FastAPI
    :raises RuntimeError: If web_dir does not exist
    """
    app = FastAPI(
        title="Arithmetic HTTP Server",
        description="Add, subtract, multiply and divide over form-encoded POST requests.",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.post("/api/calculate")
    async def calculate(request: Request) -> JSONResponse:
        return _to_response(RequestHandler.calculate(await _read_body(request)))

    if multiply_endpoint:
        @app.post("/api/multiply")
        async def multiply(request: Request) -> JSONResponse:
            return _to_response(RequestHandler.multiply(await _read_body(request)))

    # Mounted last so the API routes take precedence
    app.mount("/", StaticFiles(directory=web_dir, html=True), name="web")

    app.add_middleware(CORSHeadersMiddleware)
    return app
