from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from .config import get_settings
from .logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lens Tracker command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Start the web app and JSON API.")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    mcp_parser = subparsers.add_parser("mcp", help="Start the FastMCP server.")
    mcp_parser.add_argument("--host", default="127.0.0.1")
    mcp_parser.add_argument("--port", type=int, default=8765)

    subparsers.add_parser("show", help="Print the current lens state as JSON.")

    save_parser = subparsers.add_parser("save", help="Record a new lens start date.")
    save_parser.add_argument("start_date", help="Start date in YYYY-MM-DD format.")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(get_settings())
    logging.getLogger(__name__).debug("Lens Tracker CLI running %s", args.command)

    if args.command == "serve":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "mcp":
        from .services.mcp import run_mcp_server

        run_mcp_server(host=args.host, port=args.port)
    elif args.command in ("show", "save"):
        from .api import call_api
        from .domain import LensTrackerError

        try:
            if args.command == "show":
                result = call_api("get_state")
            else:
                result = call_api("save_start_date", start_date=args.start_date)
        except LensTrackerError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        print(json.dumps(result, indent=2))
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
