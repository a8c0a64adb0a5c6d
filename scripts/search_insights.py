#!/usr/bin/env python3
"""CLI runner for the keyword search across Twitter, Facebook and Google News.

Ensures project root is on sys.path before importing from the "app" package.
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on sys.path so 'app' is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.application.use_cases.search_insights import (  # noqa: E402
    PROVIDER_ORDER,
    SearchInsightsUseCase,
    SearchSession,
)
from app.core.config import settings  # noqa: E402
from app.infrastructure.adapters.bundles.search import get_search_gateway  # noqa: E402


async def run(text: str, base_url: Optional[str], drop: List[str]) -> dict:
    use_case = SearchInsightsUseCase(get_search_gateway(base_url=base_url))
    session = SearchSession(use_case)
    session.keywords = use_case.extract(text)
    for keyword in drop:
        session.remove_keyword(keyword)
    result = await session.search_keywords()
    return result.model_dump(mode="json")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Extract keywords from text and search all providers, printing JSON to stdout",
    )
    parser.add_argument("text", nargs="?", help="Input text (reads stdin when omitted)")
    parser.add_argument(
        "--base-url",
        default=None,
        help="Reach providers over HTTP at this API prefix, e.g. http://localhost:8000/api/v1",
    )
    parser.add_argument(
        "--drop",
        action="append",
        default=[],
        help="Remove an extracted keyword before searching (repeatable)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log provider activity")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format=settings.log_format,
        datefmt=settings.log_date_format,
    )

    text = args.text if args.text is not None else sys.stdin.read()
    output = asyncio.run(run(text, args.base_url, args.drop))
    print(json.dumps(output, ensure_ascii=False, indent=2))

    if output.get("error"):
        print(output["error"], file=sys.stderr)
        return 1
    counts = ", ".join(
        f"{source.value}: {len(output[source.name])}" for source in PROVIDER_ORDER
    )
    print(f"Keywords: {' '.join(output['keywords'])} ({counts})", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
