"""vulcangen command-line interface.

Usage::

    vulcangen app my-app
    vulcangen package -p blog
    vulcangen module -p blog -m comment --parts schema,resolvers
    vulcangen remove module -p blog -m comment --yes
    vulcangen list modules -p blog
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from rich.markup import escape

from vulcangen.config import Config
from vulcangen.errors import VulcanGenError
from vulcangen.generators import (
    AppGenerator,
    BaseGenerator,
    ListGenerator,
    ModuleGenerator,
    PackageGenerator,
    RemoveGenerator,
)
from vulcangen.generators.module import DEFAULT_RESOLVERS, MODULE_PARTS
from vulcangen.prompts import Prompter, parse_selection
from vulcangen.session import Session
from vulcangen.utils import console


def _add_name_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--packagename", "-p",
        dest="package_name",
        default=None,
        help="Package name (asked interactively when omitted)",
    )
    parser.add_argument(
        "--modulename", "-m",
        dest="module_name",
        default=None,
        help="Module name (asked interactively when omitted)",
    )


def _selection(allowed: Sequence[str]):
    """argparse ``type`` for a comma-separated subset of *allowed*."""

    def parse(value: str) -> list[str]:
        picked = parse_selection(value)
        unknown = [item for item in picked if item not in allowed]
        if unknown:
            raise argparse.ArgumentTypeError(
                f"unknown choice(s) {', '.join(unknown)}; pick from {', '.join(allowed)}"
            )
        return picked

    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vulcangen",
        description="vulcangen -- scaffold Vulcan.js packages and modules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  vulcangen app my-app\n"
            "  vulcangen package -p blog\n"
            "  vulcangen module -p blog -m comment\n"
            "  vulcangen remove package -p blog\n"
        ),
    )
    parser.add_argument(
        "--cwd",
        type=Path,
        default=None,
        help="Project directory (default: current directory)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every state change and lifecycle phase",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    app = sub.add_parser("app", help="Create a new app directory")
    app.add_argument("app_name", nargs="?", default=None, help="App name")

    package = sub.add_parser("package", help="Create a package")
    package.add_argument("-p", "--packagename", dest="package_name", default=None)

    module = sub.add_parser("module", help="Create a module inside a package")
    _add_name_options(module)
    module.add_argument(
        "--parts",
        dest="module_parts",
        type=_selection(MODULE_PARTS),
        default=None,
        help=f"Comma-separated module parts ({', '.join(MODULE_PARTS[1:])}); '-' for none",
    )
    module.add_argument(
        "--resolvers",
        dest="default_resolvers",
        type=_selection(DEFAULT_RESOLVERS),
        default=None,
        help="Comma-separated default resolvers (list, single, total)",
    )
    module.add_argument(
        "--create-package",
        dest="create_package",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Create the package if it does not exist",
    )

    remove = sub.add_parser("remove", help="Remove a package or a module")
    remove.add_argument("kind", choices=["package", "module"])
    _add_name_options(remove)
    remove.add_argument("--yes", "-y", action="store_true", default=None,
                        help="Do not ask for confirmation")

    listing = sub.add_parser("list", help="List packages or the modules of a package")
    listing.add_argument("kind", nargs="?", choices=["packages", "modules"], default="packages")
    listing.add_argument("-p", "--packagename", dest="package_name", default=None)

    return parser


def build_generator(
    args: argparse.Namespace,
    session: Session,
    prompter: Optional[Prompter] = None,
) -> BaseGenerator:
    """Instantiate the generator for the parsed command line."""
    options: dict[str, Any] = {
        key: value
        for key, value in vars(args).items()
        if key not in ("command", "cwd", "debug", "kind")
    }
    if args.command == "app":
        return AppGenerator(session, options=options, prompter=prompter)
    if args.command == "package":
        return PackageGenerator(session, options=options, prompter=prompter)
    if args.command == "module":
        return ModuleGenerator(session, options=options, prompter=prompter)
    if args.command == "remove":
        return RemoveGenerator(session, args.kind, options=options, prompter=prompter)
    if args.command == "list":
        return ListGenerator(session, args.kind, options=options, prompter=prompter)
    raise ValueError(f"Unknown command: {args.command}")


def run(argv: Optional[Sequence[str]] = None, prompter: Optional[Prompter] = None) -> int:
    """Parse *argv*, run the generator and return the exit status."""
    args = build_parser().parse_args(argv)

    config = Config.from_env()
    if args.cwd is not None:
        config = config.with_cwd(args.cwd)
    if args.debug:
        config.debug = True

    try:
        generator = build_generator(args, Session(config), prompter=prompter)
        return generator.run()
    except VulcanGenError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        return 1


def main() -> None:
    """CLI entry point for ``vulcangen`` and ``python -m vulcangen``."""
    sys.exit(run())


if __name__ == "__main__":
    main()
