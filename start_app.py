# start_app.py
"""Serve the catering API with uvicorn."""

from __future__ import annotations

import argparse
import os
import sys

import uvicorn
from dotenv import load_dotenv

import config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the catering quotes API")
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start with an empty catalogue instead of the demo records",
    )
    parser.add_argument(
        "--sqlite",
        metavar="PATH",
        help="Keep records in the SQLite file PATH instead of memory",
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")))
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Apply command line overrides to the environment, then start the API."""

    load_dotenv()
    args = parse_args(argv)
    if args.no_seed:
        os.environ["SEED_DEMO_DATA"] = "false"
    if args.sqlite:
        os.environ["STORAGE_BACKEND"] = "sqlalchemy"
        os.environ["DATABASE_URL"] = f"sqlite:///{args.sqlite}"

    config.get_settings.cache_clear()
    settings = config.get_settings()

    try:
        uvicorn.run(
            "catering.app.main:app",
            host=args.host,
            port=args.port,
            log_level=settings.log_level.lower(),
        )
    except ModuleNotFoundError as exc:
        missing = exc.name or str(exc)
        print(
            f"Missing dependency: {missing}. Install it with 'pip install {missing}'",
            file=sys.stderr,
        )
        raise SystemExit(1)


if __name__ == "__main__":
    main()
