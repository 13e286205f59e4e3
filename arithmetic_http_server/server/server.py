"""HTTP server exposing arithmetic operations and a static front end."""
from pathlib import Path

from fastapi import FastAPI
from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress
import uvicorn

from arithmetic_http_server.common.logger import logger
from arithmetic_http_server.server.app import create_app


class ArithmeticServer(BaseModel):
    """
    HTTP listener for the calculator.

    Features:
        - ``POST /api/calculate`` for add, subtract, multiply and divide.
        - ``POST /api/multiply`` for multiplication only (can be disabled).
        - Static files served from ``web_dir`` at ``/``.
        - CORS headers on every response, OPTIONS preflight answered directly.
    """

    # Make the Pydantic instance immutable (read-only), the route table is built from it once
    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(default="127.0.0.1", description="Server host address")
    port: int = Field(default=8080, ge=1, le=65535, description="Server TCP port")
    web_dir: Path = Field(default=Path("web"), description="Directory of static files served at /")
    multiply_endpoint: bool = Field(default=True, description="Serve the multiply-only endpoint")
    log_level: str = Field(default="info", description="uvicorn log level")

    def build_app(self) -> FastAPI:
        """
        Build the application from this configuration.

        :return: Application with routes, static files and CORS middleware
        :rtype: FastAPI
        :raises RuntimeError: If web_dir does not exist
        """
        return create_app(self.web_dir, multiply_endpoint=self.multiply_endpoint)

    def start(self) -> bool:
        """
        Run the server until it is stopped.

        Steps:
            1. Build the application (fails if the web directory is missing).
            2. Bind to host and port; uvicorn exits with status 1 if binding fails.
            3. Serve requests until interrupted.

        :return: True if the server started and shut down normally
        :rtype: bool
        """
        app = self.build_app()

        logger.info(f"🖥️ Starting calculator server on http://{self.host}:{self.port}")
        logger.info(f"🖥️ Serving static files from {self.web_dir.resolve()}")

        config = uvicorn.Config(
            app=app,
            host=str(self.host),
            port=self.port,
            log_level=self.log_level,
        )
        server = uvicorn.Server(config)
        server.run()

        if not server.started:
            logger.error("🖥️❌ Failed to start server")
        return server.started
