"""Command-line front door for namenormalizer.

Parses CLI options, collects candidate files, and lets the user pick which
ones to normalize. Then dispatches into the rename pass.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .errors import InvalidDirectoryError, NameNormalizerError
from .files import collect_directory, collect_from_list
from .logging_setup import configure_logging, resolve_log_file
from .naming import CaseStyle, SeparatorPolicy
from .picker import present_picker
from .rename import process_renames
from .ui_theme import available_theme_names, color_disabled_by_env, resolve_theme

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nn",
        description="Normalize filenames in the current directory.",
    )
    parser.add_argument(
        "style",
        nargs="?",
        default=None,
        choices=[style.value for style in CaseStyle],
        help="Target case style: snake, camel, or pascal.",
    )
    parser.add_argument(
        "-s",
        "--separators",
        default=None,
        choices=[policy.value for policy in SeparatorPolicy],
        help="Separator policy: commonWithDot, commonNoDot, or whitespaceOnly.",
    )
    parser.add_argument("-a", "--all", action="store_true", help="Apply to all files without prompting.")
    parser.add_argument("-l", "--list", metavar="PATH", help="Path to file containing newline-separated filenames.")
    parser.add_argument("-o", "--output", metavar="DIR", help="Output directory (default: current directory).")
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Show what would be renamed without making changes.",
    )
    parser.add_argument("-f", "--force", action="store_true", help="Allow overwriting existing files.")
    parser.add_argument(
        "--filter",
        dest="filters",
        action="append",
        default=[],
        metavar="PART",
        help="Substring to strip from names (repeatable, case-insensitive).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output in the picker.")
    parser.add_argument("--log-file", default=None, help="Write debug/info logs to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at debug level.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given style, separators, and theme as defaults.",
    )
    return parser


def _resolve_style(value: str | None) -> CaseStyle:
    if value is not None:
        return CaseStyle(value)
    return config.load_default_style() or CaseStyle.SNAKE


def _resolve_separators(value: str | None) -> SeparatorPolicy:
    if value is not None:
        return SeparatorPolicy(value)
    return config.load_default_separators() or SeparatorPolicy.COMMON_NO_DOT


def _save_defaults(args: argparse.Namespace, style: CaseStyle, separators: SeparatorPolicy) -> None:
    config.save_default_style(style)
    config.save_default_separators(separators)
    if args.theme:
        config.save_theme_name(args.theme)


def run(args: argparse.Namespace, cwd: Path) -> None:
    """Execute one normalize pass: collect, select, rename."""
    style = _resolve_style(args.style)
    separators = _resolve_separators(args.separators)
    if args.save_defaults:
        _save_defaults(args, style, separators)

    output_dir = cwd / args.output if args.output else cwd
    if not output_dir.is_dir():
        raise InvalidDirectoryError(output_dir)
    if args.list is not None:
        files = collect_from_list(Path(args.list), cwd)
    else:
        files = collect_directory(cwd)

    if not files:
        print("✗ No files to process.", file=sys.stderr)
        return

    filters = list(args.filters)
    if args.all or args.list is not None:
        selected = files
    else:
        theme = resolve_theme(
            args.theme or config.load_theme_name(),
            no_color=args.no_color or color_disabled_by_env(),
        )
        result = present_picker(
            files,
            style=style,
            separators=separators,
            initial_filters=filters,
            theme=theme,
        )
        selected = result.files
        filters = result.filters

    if not selected:
        print("✗ No files selected.", file=sys.stderr)
        return

    process_renames(
        selected,
        output_dir,
        style=style,
        separators=separators,
        filters=filters,
        dry_run=args.dry_run,
        force=args.force,
    )


def main(argv: list[str] | None = None, cwd: Path | None = None) -> None:
    """Parse CLI arguments and run one normalize pass.

    ``cwd`` is primarily for tests; when omitted the process working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    configure_logging(resolve_log_file(args.log_file), verbose=args.verbose)
    if cwd is None:
        cwd = Path.cwd()
    try:
        run(args, cwd)
    except NameNormalizerError as exc:
        logger.error("%s", exc)
        raise SystemExit(f"✗ {exc}") from exc


if __name__ == "__main__":
    main()
