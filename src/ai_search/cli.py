from __future__ import annotations

import argparse
import asyncio
import json
import sys

from .logging_utils import configure_logging
from .search import EmptyQueryError, resolve_with_source, validate_query
from .settings import get_settings


async def cmd_search(args: argparse.Namespace) -> int:
    settings = get_settings()
    cfg = settings.llm_config()
    # CLI flags win over environment and YAML
    if args.api_key:
        cfg.api_key = args.api_key
    if args.model:
        cfg.model = args.model
    if args.base_url:
        cfg.base_url = args.base_url

    try:
        query = validate_query(args.query)
    except EmptyQueryError as e:
        print(e.message, file=sys.stderr)
        return 2

    rs = await resolve_with_source(query, cfg.api_key, config=cfg)
    if args.json:
        out = {
            "query": rs.query,
            "source": rs.source,
            "results": [r.to_dict() for r in rs.results],
        }
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return 0

    for idx, r in enumerate(rs.results, start=1):
        print(f"{idx}. {r.title}\n   {r.url}\n   {r.snippet}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from .webapp.main import run

    run(host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ai-search", description="AI-generated search results")
    p.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("search", help="Resolve a query and print the results")
    s.add_argument("query", help="Search query")
    s.add_argument("--api-key", default=None, help="Provider API key (overrides OPENAI_API_KEY)")
    s.add_argument("--model", default=None, help="Model name (overrides OPENAI_MODEL)")
    s.add_argument("--base-url", default=None, help="Chat completions base URL")
    s.add_argument("--json", action="store_true", help="Print JSON including result provenance")

    sv = sub.add_parser("serve", help="Run the web UI")
    sv.add_argument("--host", default="0.0.0.0")
    sv.add_argument("--port", type=int, default=8000)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    if args.command == "search":
        return asyncio.run(cmd_search(args))
    if args.command == "serve":
        return cmd_serve(args)
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
