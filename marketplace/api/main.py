"""Command-line entrypoint that serves the API with uvicorn."""

from __future__ import annotations

import argparse

import uvicorn

from marketplace.api.api_config import get_api_config
from marketplace.common.settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    config = get_api_config()
    parser = argparse.ArgumentParser(description="Serve the freelance marketplace API")
    parser.add_argument("--host", default=config.host)
    parser.add_argument("--port", type=int, default=config.port)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    uvicorn.run(
        "marketplace.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=get_settings().LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
