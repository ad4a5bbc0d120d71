"""GA4 CLI — print the snippet or check the configuration.

Entry point registered as ``ga4`` in ``pyproject.toml``::

    [project.scripts]
    ga4 = "ga4.cli:main"
"""

import argparse
import sys

from ga4.config import ENV_VAR, GA4Config
from ga4.probe import ABSENT, NAVIGATION_FRAMEWORK, PRESENT, CapabilityProbe, SymbolProbe
from ga4.snippet import SnippetRenderer


def _probe_from_args(args: argparse.Namespace) -> CapabilityProbe:
    if args.navigation is None:
        return SymbolProbe()
    return PRESENT if args.navigation else ABSENT


def run_render(args: argparse.Namespace) -> None:
    """Print the snippet for ``--measurement-id`` (or the environment)."""
    if args.measurement_id is None:
        config = GA4Config.from_env()
    else:
        config = GA4Config.from_value(args.measurement_id)

    snippet = SnippetRenderer.from_config(config, probe=_probe_from_args(args)).render()
    if snippet:
        print(snippet)


def run_check(args: argparse.Namespace) -> None:
    """Report configuration and navigation detection. Exits 1 when unconfigured."""
    config = GA4Config.from_env()
    navigation = SymbolProbe().is_framework_present()

    if config.enabled:
        print(f"measurement ID: {config.measurement_id}")
    else:
        print(f"Error: {ENV_VAR} is not set; no snippet will be rendered", file=sys.stderr)
    print(f"navigation framework ({NAVIGATION_FRAMEWORK}): {'found' if navigation else 'not found'}")

    if not config.enabled:
        raise SystemExit(1)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``ga4`` command."""
    parser = argparse.ArgumentParser(
        prog="ga4",
        description="ga4 — Google Analytics 4 snippet for server-rendered pages.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- ga4 render -------------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Print the tracking snippet")
    render_parser.add_argument(
        "--measurement-id",
        default=None,
        help=f"Measurement ID (default: ${ENV_VAR})",
    )
    render_parser.add_argument(
        "--navigation",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force the soft-navigation listener on or off (default: detect)",
    )

    # -- ga4 check --------------------------------------------------------
    subparsers.add_parser("check", help="Check configuration and framework detection")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "render":
        run_render(args)
    elif args.command == "check":
        run_check(args)
