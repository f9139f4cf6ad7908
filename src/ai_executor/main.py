"""Process entrypoint for the ``ai-node-executor`` script."""

import asyncio
import sys

from .config.settings import get_settings
from .http_server import run_http_server


def run() -> None:
    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    try:
        asyncio.run(run_http_server(settings))
    except KeyboardInterrupt:
        print("\nShutting down...")
        sys.exit(0)
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
