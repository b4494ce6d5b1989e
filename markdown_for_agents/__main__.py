"""CLI entry point: python -m markdown_for_agents [FILE] [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import pydantic
import yaml

from markdown_for_agents.converter import convert
from markdown_for_agents.items import ConvertResult
from markdown_for_agents.options import ConvertOptions
from markdown_for_agents.profiles import load_profile
from markdown_for_agents.walker import ConversionError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markdown_for_agents",
        description=(
            "Convert an HTML document into compact, token-efficient Markdown.\n"
            "Reads FILE (or stdin) and writes Markdown to stdout or --out."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", nargs="?", default=None, metavar="FILE",
                        help="HTML file to convert (default: read stdin)")
    parser.add_argument("--extract", action="store_true", default=False,
                        help="Strip navigation, ads and other boilerplate first")
    parser.add_argument("--deduplicate", action="store_true", default=False,
                        help="Drop repeated paragraphs from the output")
    parser.add_argument("--min-length", type=int, default=None, metavar="N",
                        help="Shortest block considered for deduplication (default: 10)")
    parser.add_argument("--base-url", default=None, metavar="URL",
                        help="Resolve relative link and image URLs against URL")
    parser.add_argument("--heading-style", choices=["atx", "setext"], default=None,
                        help="Heading syntax (default: atx)")
    parser.add_argument("--frontmatter", action="store_true", default=False,
                        help="Prepend YAML frontmatter built from the document head")
    parser.add_argument("--profile", default=None, metavar="YAML",
                        help="Load options from a YAML profile file")
    parser.add_argument("--profile-name", default=None, metavar="NAME",
                        help="Named profile inside --profile (default: the 'default' block)")
    parser.add_argument("--out", default=None, metavar="FILE",
                        help="Write Markdown to FILE instead of stdout")
    parser.add_argument("--stats", action="store_true", default=False,
                        help="Print character/word/token counts and the content hash to stderr")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: WARNING)")
    return parser


def _build_options(args: argparse.Namespace) -> ConvertOptions:
    """Start from the profile (if any) and layer the explicit flags over it."""
    base = load_profile(args.profile, args.profile_name) if args.profile else ConvertOptions()

    overrides: dict[str, Any] = {}
    if args.extract:
        overrides["extract"] = True
    if args.min_length is not None:
        overrides["deduplicate"] = {"min_length": args.min_length}
    elif args.deduplicate:
        overrides["deduplicate"] = True
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.heading_style:
        overrides["heading_style"] = args.heading_style
    if args.frontmatter:
        overrides["frontmatter"] = True

    if not overrides:
        return base
    return ConvertOptions.model_validate(
        {**{name: getattr(base, name) for name in ConvertOptions.model_fields}, **overrides},
    )


def _print_stats(result: ConvertResult) -> None:
    from rich import box
    from rich.console import Console
    from rich.table import Table

    tbl = Table(title="[bold cyan]Conversion[/bold cyan]", box=box.SIMPLE_HEAVY)
    tbl.add_column("Metric", style="bold")
    tbl.add_column("Value", justify="right", style="green")
    tbl.add_row("Characters", f"{result.token_estimate.characters:,}")
    tbl.add_row("Words", f"{result.token_estimate.words:,}")
    tbl.add_row("Tokens (est.)", f"{result.token_estimate.tokens:,}")
    tbl.add_row("Content hash", result.content_hash)
    Console(stderr=True).print(tbl)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.profile_name and not args.profile:
        print("Error: --profile-name requires --profile", file=sys.stderr)
        return 1

    try:
        options = _build_options(args)
        if args.file:
            html = Path(args.file).read_text(encoding="utf-8", errors="replace")
        else:
            html = sys.stdin.read()
        result = convert(html, options)
    except (OSError, KeyError, yaml.YAMLError, pydantic.ValidationError, ConversionError) as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.out:
        try:
            Path(args.out).write_text(result.markdown, encoding="utf-8")
        except OSError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        logger.info("Wrote %d chars to %s", len(result.markdown), args.out)
    else:
        sys.stdout.write(result.markdown)

    if args.stats:
        _print_stats(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
