"""
Command line entry point.

Usage:
    domain-watcher                      Run one check (suitable for cron)
    domain-watcher check --domains a.com,b.io
    domain-watcher serve --port 8000    Serve the HTTP API
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from typing import List, Optional, Tuple

import httpx
from pydantic import BaseModel

from .config import Settings, load_settings
from .exceptions import ConfigurationError
from .logging_config import configure_logging
from .responses import build_check_response, build_error_response
from .services import batch_service


async def _run_check(settings: Settings) -> Tuple[int, BaseModel]:
    try:
        config = settings.to_watch_config()
    except ConfigurationError as exc:
        return build_error_response(str(exc))

    async with httpx.AsyncClient() as client:
        report = await batch_service.run_domain_check(config, client)
    return build_check_response(report)


def cmd_check(settings: Settings) -> int:
    status_code, body = asyncio.run(_run_check(settings))
    print(body.model_dump_json(indent=2, exclude_none=True))
    return 0 if status_code == 200 else 1


def cmd_serve(settings: Settings, host: str, port: int) -> int:
    import uvicorn

    uvicorn.run(
        "domain_watcher.main:app",
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="domain-watcher",
        description="Check configured domains for availability and post a notice when any are free",
    )
    parser.add_argument("--log-level", metavar="LEVEL", help="Override LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command")

    check = subparsers.add_parser("check", help="Run one availability check (default)")
    check.add_argument("--domains", metavar="LIST", help="Comma-separated domains, overrides DOMAINS")

    serve = subparsers.add_parser("serve", help="Serve the HTTP API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if getattr(args, "domains", None) is not None:
        overrides["domains"] = args.domains
    try:
        settings = load_settings(**overrides)
    except ConfigurationError as exc:
        configure_logging(args.log_level or os.environ.get("LOG_LEVEL", "INFO"))
        _, body = build_error_response(str(exc))
        print(body.model_dump_json(indent=2))
        return 1
    configure_logging(settings.log_level)

    if args.command == "serve":
        return cmd_serve(settings, args.host, args.port)
    return cmd_check(settings)


if __name__ == "__main__":
    sys.exit(main())
