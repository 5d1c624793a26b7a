"""pagelang — detect the language of a saved HTML page.

Usage:
    pagelang page.html
    pagelang page.html --charset GBK
    pagelang index.html --charset UTF-8 --list --json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pagelang.languages import language_name
from pagelang.logger import configure_logging
from pagelang.pipeline.orchestrator import detect_html


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pagelang",
        description="Detect the natural language of a fetched web page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pagelang article.html --charset UTF-8
  pagelang index.html --charset UTF-8 --list
  pagelang page.html --charset GBK --json
        """,
    )
    parser.add_argument("file", help="HTML file (read as UTF-8)")
    parser.add_argument("-c", "--charset", default="",
                        help="Resolved encoding name of the page, e.g. UTF-8 or GBK")
    parser.add_argument("-l", "--list", dest="list_mode", action="store_true",
                        help="Treat the page as a listing/index page")
    parser.add_argument("--json", action="store_true",
                        help="Print the result as a JSON object")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log each cascade decision")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")

    try:
        raw_html = Path(args.file).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        print(f"pagelang: cannot read {args.file}: {exc.strerror}", file=sys.stderr)
        return 1

    result = detect_html(raw_html, charset=args.charset, list_mode=args.list_mode)

    if args.json:
        print(json.dumps({
            "language": result.language,
            "name": language_name(result.language) if result.language else None,
            "source": result.source.value if result.source else None,
        }, ensure_ascii=False))
    elif result.is_empty:
        print("unknown")
    else:
        print(f"{result.language}\t{result.source.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
