"""CLI entry point for viralscore."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import orjson
import uvicorn

from viralscore.config import get_settings
from viralscore.core.logging import get_logger, setup_logging
from viralscore.engine import analyze
from viralscore.report import render_report
from viralscore.review import ReviewDecision, ReviewSettings, decide

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="viralscore", description="Score social posts")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve.add_argument("--host", default="0.0.0.0", help="Bind host")
    serve.add_argument("--port", type=int, default=8000, help="Bind port")

    check = sub.add_parser("check", help="Score a post and print the report")
    check.add_argument("text", nargs="?", help="Post text (read from stdin if omitted)")
    check.add_argument("--media", action="store_true", help="Post has media attached")
    check.add_argument("--json", action="store_true", help="Print the result as JSON")

    return parser


def _check(args: argparse.Namespace) -> int:
    settings = get_settings()
    setup_logging(settings)

    # Undecodable input bytes become U+FFFD rather than aborting the check
    if args.text is not None:
        raw = args.text.encode("utf-8", errors="surrogateescape")
        text = raw.decode("utf-8", errors="replace")
    else:
        text = sys.stdin.buffer.read().decode("utf-8", errors="replace")
    result = analyze(text, args.media)

    if args.json:
        sys.stdout.write(orjson.dumps(result.model_dump(mode="json")).decode() + "\n")
    else:
        sys.stdout.write(render_report(text, result) + "\n")

    decision = decide(result, ReviewSettings.from_settings(settings))
    if decision is ReviewDecision.block:
        logger.info("Post would be blocked", score=result.score, rating=result.rating.value)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.command == "serve":
        uvicorn.run(
            "viralscore.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
        return 0

    return _check(args)


if __name__ == "__main__":
    sys.exit(main())
