from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Sequence

from .assembler import all_unique_selectors, unique_selector
from .models import SelectorOptions
from .tree_adapter import TreeAdapter

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2


def _build_logger(verbose: bool) -> logging.Logger:
    logger = logging.getLogger("uniqueselector")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if logger.handlers:
        return logger

    logger.propagate = False
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)
    return logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uniqueselector",
        description="Print a CSS selector that matches exactly the target element.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--html", type=Path, help="HTML file to parse with BeautifulSoup.")
    source.add_argument("--url", help="Page to open in headless Chromium via Playwright.")
    parser.add_argument("--target", required=True, help="CSS selector locating the element(s) to describe.")
    parser.add_argument("--all", action="store_true", help="Print every unique selector per target.")
    parser.add_argument("--selector-types", help="Comma separated, e.g. ID,Class,Tag,NthChild.")
    parser.add_argument("--ignore-attributes", help="Comma separated attribute names to skip.")
    parser.add_argument("--parser", default="html.parser", help="BeautifulSoup parser for --html.")
    parser.add_argument("--verbose", action="store_true", help="Log the selector search at debug level.")
    return parser


def _options_from_args(args: argparse.Namespace) -> SelectorOptions:
    raw: dict[str, Any] = {}
    if args.selector_types is not None:
        raw["selector_types"] = args.selector_types
    if args.ignore_attributes is not None:
        raw["attributes_to_ignore"] = args.ignore_attributes
    return SelectorOptions.from_value(raw)


def describe_targets(
    targets: Sequence[Any],
    adapter: TreeAdapter,
    options: SelectorOptions,
    *,
    show_all: bool = False,
) -> tuple[list[str], bool]:
    lines: list[str] = []
    all_found = True
    for index, target in enumerate(targets):
        if show_all:
            if index:
                lines.append("")
            selectors = all_unique_selectors(target, adapter, options)
            if not selectors:
                all_found = False
            lines.extend(selectors)
            continue

        selector = unique_selector(target, adapter, options)
        if selector is None:
            all_found = False
            continue
        lines.append(selector)
    return lines, all_found


def _run_html(args: argparse.Namespace, options: SelectorOptions, logger: logging.Logger) -> int:
    from bs4 import BeautifulSoup

    from .soup_adapter import SoupTreeAdapter

    try:
        markup = args.html.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.html, exc)
        return EXIT_USAGE

    soup = BeautifulSoup(markup, args.parser)
    adapter = SoupTreeAdapter()
    targets = adapter.query_all(soup, args.target)
    return _emit(targets, adapter, options, args, logger)


def _run_url(args: argparse.Namespace, options: SelectorOptions, logger: logging.Logger) -> int:
    try:
        from playwright.sync_api import Error as PlaywrightError, sync_playwright
    except ModuleNotFoundError as exc:
        if exc.name and exc.name.startswith("playwright"):
            raise SystemExit(
                "Playwright is not installed in this interpreter. "
                "Run `pip install playwright` and `playwright install chromium`."
            ) from exc
        raise

    from .playwright_adapter import PlaywrightTreeAdapter

    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(headless=True)
        try:
            page = browser.new_page()
            try:
                page.goto(args.url)
            except PlaywrightError as exc:
                logger.error("Cannot open %s: %s", args.url, exc)
                return EXIT_USAGE
            adapter = PlaywrightTreeAdapter(page)
            targets = adapter.query_all(page, args.target)
            return _emit(targets, adapter, options, args, logger)
        finally:
            browser.close()


def _emit(
    targets: Sequence[Any],
    adapter: TreeAdapter,
    options: SelectorOptions,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    if not targets:
        logger.error("Target selector matched no element: %s", args.target)
        return EXIT_USAGE

    logger.debug("Describing %d target element(s).", len(targets))
    lines, all_found = describe_targets(targets, adapter, options, show_all=args.all)
    for line in lines:
        print(line)
    if not all_found:
        logger.warning("At least one target has no unique selector.")
        return EXIT_NOT_FOUND
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logger = _build_logger(args.verbose)

    try:
        options = _options_from_args(args)
    except ValueError as exc:
        logger.error("%s", exc)
        return EXIT_USAGE

    if args.html is not None:
        return _run_html(args, options, logger)
    return _run_url(args, options, logger)


if __name__ == "__main__":
    raise SystemExit(main())
