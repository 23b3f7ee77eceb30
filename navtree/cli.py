"""Command-line interface for navtree."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

import yaml
from jinja2 import TemplateError
from pydantic import ValidationError

from .jinja_nav import nav_environment
from .menu import DEFAULT_CONTAINER, MenuStore, validate_menu
from .models import RenderConfig
from .renderer import NavTree

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_render_config(path: Optional[str]) -> RenderConfig:
    if not path:
        return RenderConfig()
    config_path = Path(path)
    if not config_path.exists():
        raise SystemExit(f"Render config not found: {config_path}")
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        return RenderConfig.model_validate(data)
    except (yaml.YAMLError, ValidationError) as exc:
        raise SystemExit(f"Invalid render config {config_path}: {exc}") from exc


def _load_menu(args: argparse.Namespace) -> MenuStore:
    menu_path = Path(args.menu)
    try:
        store = MenuStore.load(menu_path)
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from exc
    current = getattr(args, "current", None)
    if current:
        try:
            store = store.with_current(current, args.container)
        except KeyError as exc:
            raise SystemExit(f"Unknown current page alias: {current}") from exc
    return store


def _write_output(html: str, output: Optional[str]) -> None:
    if not output:
        print(html)
        return
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html + "\n", encoding="utf-8")
    logger.info("Wrote %s", output_path)


def _handle_render(args: argparse.Namespace) -> None:
    store = _load_menu(args)
    config = _load_render_config(args.config)

    start_item = None
    if args.start:
        start_item = store.find_by_alias(args.start, args.container)
        if start_item is None:
            raise SystemExit(f"Unknown start page alias: {args.start}")

    html = NavTree(config, menu=store, container=args.container).run(start_item)
    _write_output(html, args.output)


def _handle_page(args: argparse.Namespace) -> None:
    store = _load_menu(args)
    template_path = Path(args.template)
    if not template_path.exists():
        raise SystemExit(f"Template not found: {template_path}")

    env = nav_environment([template_path.parent], store)
    try:
        rendered = env.get_template(template_path.name).render(menu=store)
    except (TemplateError, KeyError) as exc:
        raise SystemExit(f"Failed to render {template_path}: {exc}") from exc
    _write_output(rendered, args.output)


def _handle_validate(args: argparse.Namespace) -> None:
    store = _load_menu(args)
    if args.config:
        _load_render_config(args.config)

    problems = validate_menu(store)
    if problems:
        for message in problems:
            print(message, file=sys.stderr)
        raise SystemExit(1)
    print("ok")


def _add_menu_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--menu",
        required=True,
        help="Path to the menu file (YAML or JSON).",
    )
    parser.add_argument(
        "--container",
        default=DEFAULT_CONTAINER,
        help="Menu container to render.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="navtree",
        description="Navigation tree rendering utilities",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="navtree 0.1.0",
        help="Show the navtree version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render the navigation tree as HTML.",
        description="Render nested navigation lists from a menu file.",
    )
    _add_menu_arguments(render_parser)
    render_parser.add_argument(
        "--config",
        help="Path to a YAML render config (maxDepth, itemOptions, ...).",
    )
    render_parser.add_argument(
        "--start",
        help="Alias of the page whose subpages are rendered.",
    )
    render_parser.add_argument(
        "--current",
        help="Alias of the page being viewed; its parent chain is active.",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        help="File to write; prints to stdout when omitted.",
    )
    render_parser.set_defaults(func=_handle_render)

    page_parser = subparsers.add_parser(
        "page",
        help="Render a Jinja template with nav_tree available.",
        description="Render a template; nav_tree() and menu are in its context.",
    )
    _add_menu_arguments(page_parser)
    page_parser.add_argument(
        "--template",
        required=True,
        help="Path to the Jinja template.",
    )
    page_parser.add_argument(
        "--current",
        help="Alias of the page being viewed; its parent chain is active.",
    )
    page_parser.add_argument(
        "--out",
        dest="output",
        help="File to write; prints to stdout when omitted.",
    )
    page_parser.set_defaults(func=_handle_page)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a menu file.",
        description="Check the menu for missing parents, cycles and duplicate aliases.",
    )
    _add_menu_arguments(validate_parser)
    validate_parser.add_argument(
        "--config",
        help="Optional YAML render config to validate as well.",
    )
    validate_parser.set_defaults(func=_handle_validate)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    _configure_logging(args.verbose)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":  # pragma: no cover
    main()


__all__ = ["build_parser", "main"]
