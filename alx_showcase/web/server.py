"""Launch the classifier API with uvicorn."""

import os
import sys
import socket
import argparse
from typing import Optional, Sequence

import uvicorn

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

def is_port_in_use(host: str, port: int) -> bool:
    """Check whether something already listens on ``host:port``."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        return s.connect_ex((host, port)) == 0

def find_available_port(host: str, start_port: int, max_attempts: int = 10) -> int:
    """First free port at or above ``start_port``."""
    for port in range(start_port, start_port + max_attempts):
        if not is_port_in_use(host, port):
            return port
    raise RuntimeError(f"Could not find an available port after {max_attempts} attempts")

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Host, port and weights, defaulting to HOST / PORT / ALX_SHOWCASE_WEIGHTS."""
    parser = argparse.ArgumentParser(description="Serve the ALX Showcase classifier API.")
    parser.add_argument("--host", default=os.environ.get("HOST", DEFAULT_HOST),
                        help=f"Interface to bind (default: $HOST or {DEFAULT_HOST})")
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", DEFAULT_PORT)),
                        help=f"Port to bind (default: $PORT or {DEFAULT_PORT})")
    parser.add_argument("--weights", default=os.environ.get("ALX_SHOWCASE_WEIGHTS"),
                        help="YAML file with scoring weight overrides")
    return parser.parse_args(argv)

def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    if args.weights:
        # Read by the app module when uvicorn imports it
        os.environ["ALX_SHOWCASE_WEIGHTS"] = args.weights

    try:
        port = args.port
        if is_port_in_use(args.host, port):
            print(f"Port {port} is already in use. Looking for an available port...")
            port = find_available_port(args.host, port + 1)
        print(f"Starting server on {args.host}:{port}")
        uvicorn.run("alx_showcase.web.app:app", host=args.host, port=port)
    except Exception as e:
        print(f"Error starting server: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
