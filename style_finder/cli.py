"""
Command line entry point: extract design tokens from one or more pages.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

from .config import ScrapeConfig
from .extractor import StyleFinder
from .models import ExtractionResult


def write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def build_config(args: argparse.Namespace) -> ScrapeConfig:
    config = ScrapeConfig.from_env()
    if args.timeout is not None:
        config.timeout_ms = args.timeout
    if args.settle is not None:
        config.settle_ms = args.settle
    if args.no_block_resources:
        config.block_resources = False
    if args.headed:
        config.headless = False
    return config


def summarize(result: ExtractionResult) -> str:
    if not result.ok:
        return f"❌ {result.url}: {result.message}"
    return (
        f"✅ {result.url}: \"{result.title}\" - "
        f"{len(result.typography)} typography groups, "
        f"{len(result.colors)} colors, "
        f"{len(result.gradients)} gradients"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract typography, colors and gradients from web pages")
    parser.add_argument("urls", nargs="+", help="Page URL(s) to analyze")
    parser.add_argument("--output", "-o", help="Write JSON results to this file instead of stdout")
    parser.add_argument("--no-cache", action="store_true", help="Scrape every URL even if it was seen before")
    parser.add_argument("--timeout", type=int, help="Navigation timeout in milliseconds")
    parser.add_argument("--settle", type=int, help="Extra wait after load for dynamic content, in milliseconds")
    parser.add_argument(
        "--no-block-resources",
        action="store_true",
        help="Let images, media and fonts load (blocked by default for speed)",
    )
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    finder = StyleFinder(config=build_config(args))
    print(f"🚀 Extracting styles from {len(args.urls)} page(s)...", file=sys.stderr)
    results: List[ExtractionResult] = asyncio.run(
        finder.scrape_many(args.urls, use_cache=not args.no_cache)
    )
    for result in results:
        print(summarize(result), file=sys.stderr)

    payload: Any = [r.to_dict() for r in results]
    if len(results) == 1:
        payload = payload[0]

    if args.output:
        output_path = Path(args.output)
        write_json(output_path, payload)
        print(f"Results: {output_path}", file=sys.stderr)
    else:
        print(json.dumps(payload, ensure_ascii=False, indent=2))

    return 0 if all(r.ok for r in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
