"""
Command-line entrypoint.

Subcommands:
- ``serve``: start the HTTP server
- ``calc``: send one calculation to a running server
- ``multiply``: send one multiplication to the multiply-only endpoint
"""

import argparse
import sys
from typing import List, Optional

from pydantic import BaseModel, DirectoryPath, Field, IPvAnyAddress, ValidationError
import requests

from arithmetic_http_server.client.client import ArithmeticClient
from arithmetic_http_server.common.errors import CalculatorError
from arithmetic_http_server.common.logger import setup_logging
from arithmetic_http_server.common.models import CalculationResponse
from arithmetic_http_server.server.server import ArithmeticServer

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


class ServeArgs(BaseModel):
    """
    Pydantic model used to validate ``serve`` arguments.

    Attributes
    ----------
    host : IPvAnyAddress
        Address to bind.
    port : int
        TCP port to bind.
    web_dir : DirectoryPath
        Existing directory of static files.
    multiply_endpoint : bool
        Whether to serve ``/api/multiply``.
    verbose : bool
        Log at DEBUG level.
    """

    host: IPvAnyAddress
    port: int = Field(..., ge=1, le=65535)
    web_dir: DirectoryPath
    multiply_endpoint: bool = True
    verbose: bool = False


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with its three subcommands.

    :return: Configured parser
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="arithmetic-http-server",
        description="Arithmetic HTTP server and client",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Start the HTTP server")
    serve.add_argument("--host", default=DEFAULT_HOST, help="Address to bind")
    serve.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port to bind")
    serve.add_argument("--web-dir", default="web", help="Directory of static files served at /")
    serve.add_argument(
        "--no-multiply",
        dest="multiply_endpoint",
        action="store_false",
        help="Do not serve /api/multiply",
    )
    serve.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    calc = subparsers.add_parser("calc", help="Send a calculation to a running server")
    calc.add_argument("num1", type=float)
    calc.add_argument("operation", help="add, subtract, multiply or divide")
    calc.add_argument("num2", type=float)

    multiply = subparsers.add_parser("multiply", help="Multiply two numbers on a running server")
    multiply.add_argument("num1", type=float)
    multiply.add_argument("num2", type=float)

    for sub in (calc, multiply):
        sub.add_argument("--host", default=DEFAULT_HOST, help="Server address")
        sub.add_argument("--port", type=int, default=DEFAULT_PORT, help="Server port")

    return parser


def run_server(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    """
    Validate ``serve`` arguments and run the server.

    :return: Process exit status, non-zero if the server could not start
    :rtype: int
    """
    try:
        serve_args = ServeArgs(
            host=args.host,
            port=args.port,
            web_dir=args.web_dir,
            multiply_endpoint=args.multiply_endpoint,
            verbose=args.verbose,
        )
    except ValidationError as exc:
        parser.error(str(exc))

    setup_logging(serve_args.verbose)
    server = ArithmeticServer(
        host=serve_args.host,
        port=serve_args.port,
        web_dir=serve_args.web_dir,
        multiply_endpoint=serve_args.multiply_endpoint,
        log_level="debug" if serve_args.verbose else "info",
    )
    return 0 if server.start() else 1


def run_client(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    """
    Send one request to a running server and print the result.

    :return: Process exit status, non-zero if the server reported an error
    :rtype: int
    """
    try:
        client = ArithmeticClient(host=args.host, port=args.port)
    except ValidationError as exc:
        parser.error(str(exc))

    try:
        if args.command == "calc":
            result = client.calculate(args.num1, args.operation, args.num2)
        else:
            result = client.multiply(args.num1, args.num2)
    except CalculatorError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    except requests.RequestException as exc:
        print(f"Error: could not reach server at {client.base_url}: {exc}", file=sys.stderr)
        return 1

    # Integral results print without a fractional part, others at full precision
    print(CalculationResponse(result=result).model_dump(mode="json")["result"])
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        return run_server(args, parser)
    return run_client(args, parser)


if __name__ == "__main__":
    sys.exit(main())
