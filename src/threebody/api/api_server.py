"""
Serve three-body trajectories over HTTP.

Usage::

    python -m threebody.api                                  # 127.0.0.1:8000
    python -m threebody.api --cors-origin http://localhost:5173
    python -m threebody.api --reload                         # dev mode

Logging is set up with the same handler and format as ``python -m
threebody``; uvicorn is told not to install its own so service and access
lines interleave in one stream.
"""
from __future__ import annotations

import argparse
import importlib.util
import logging
import sys
from typing import List, Optional

from threebody.logging_config import LOG_LEVELS, configure_logging

logger = logging.getLogger("threebody.api")

REQUIRED_MODULES = ("fastapi", "uvicorn", "pydantic")

API_EXTRA_HINT = "Install with: pip install -e '.[api]'"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m threebody.api",
        description="Serve sampled three-body trajectories over HTTP.",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument(
        "--cors-origin",
        action="append",
        dest="cors_origins",
        metavar="ORIGIN",
        help="Browser origin allowed to call the API; repeatable (default: any)",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=LOG_LEVELS,
        help="Log level (default: info)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes (ignores --cors-origin)",
    )
    return parser


def missing_dependencies() -> List[str]:
    """Return the API modules that cannot be imported."""
    return [name for name in REQUIRED_MODULES if importlib.util.find_spec(name) is None]


def run_server(args: argparse.Namespace) -> None:
    """Start uvicorn with the configured application."""
    missing = missing_dependencies()
    if missing:
        raise RuntimeError(f"Missing API dependencies: {', '.join(missing)}. {API_EXTRA_HINT}")

    import uvicorn

    from threebody.api.app import create_app
    from threebody.api.models import MAX_STEPS

    configure_logging(args.log_level)
    logger.info(
        "Serving on http://%s:%d/api (max %d steps per request)",
        args.host,
        args.port,
        MAX_STEPS,
    )

    if args.reload:
        # the reloader re-imports the app, so it needs an import string
        target = "threebody.api.app:create_app"
        options = {"factory": True, "reload": True}
    else:
        target = create_app(cors_origins=args.cors_origins)
        options = {}

    uvicorn.run(
        target,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        log_config=None,
        **options,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        run_server(args)
    except RuntimeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
