"""Command line entry point: decode an HTML file and print the document as JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

from html2delta.config import HTML2DELTA_MAX_DEPTH, HTML2DELTA_PARSER, SUPPORTED_PARSERS
from html2delta.decoder import DecoderOptions, decode_html
from html2delta.exceptions import Html2DeltaError
from html2delta.html_utils import find_body, parse_html
from html2delta.tags import TagKind, classify_tag


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="html2delta", description="Decode HTML into a rich-text document (JSON)."
    )
    parser.add_argument("file", nargs="?", help="HTML file to decode (default: stdin)")
    parser.add_argument(
        "--parser",
        choices=SUPPORTED_PARSERS,
        default=HTML2DELTA_PARSER,
        help="BeautifulSoup tree builder",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=HTML2DELTA_MAX_DEPTH,
        help="Nesting depth past which elements are flattened",
    )
    parser.add_argument(
        "--rich-list-items",
        action="store_true",
        help="Keep inline formatting inside list items",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print tag counts by decoding kind instead of the document",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        html = load_html(args.file)
        options = DecoderOptions(
            parser=args.parser,
            max_depth=args.max_depth,
            rich_list_items=args.rich_list_items,
        )
        if args.stats:
            print(format_stats(collect_stats(html, options.parser)))
            return 0
        document = decode_html(html, options)
    except (Html2DeltaError, OSError) as exc:
        print(f"html2delta: {exc}", file=sys.stderr)
        return 1

    print(document.model_dump_json(indent=args.indent, exclude_none=True))
    return 0


def load_html(file_path: str | None) -> str:
    if file_path is None or file_path == "-":
        return sys.stdin.read()
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"HTML file not found: {path}")
    return path.read_text(encoding="utf-8")


def collect_stats(html: str, parser: str) -> dict[TagKind, Counter]:
    """Count the tags under ``<body>``, grouped by how the decoder treats them."""
    stats: dict[TagKind, Counter] = {kind: Counter() for kind in TagKind}
    body = find_body(parse_html(html, parser))
    if body is None:
        return stats
    for tag in body.find_all(True):
        stats[classify_tag(tag.name)][tag.name] += 1
    return stats


def format_stats(stats: dict[TagKind, Counter]) -> str:
    lines: list[str] = []
    for kind, counts in stats.items():
        lines.append(f"{kind.value.capitalize()}:")
        for name, count in counts.most_common():
            lines.append(f"  {name}: {count}")
    return "\n".join(lines)


if __name__ == "__main__":
    sys.exit(main())
