"""CLI entrypoint for the codeowner command."""

from __future__ import annotations

import argparse
import sys
from importlib import metadata
from pathlib import Path

from .config import CONFIG_FILENAME, ConfigError, load_config, resolve_options
from .logging import configure_logging
from .orchestrator import Orchestrator
from .owners import OwnerValidationError

_NO_ANNOTATIONS = "no CodeOwner annotations found"


def _version() -> str:
    try:
        return metadata.version("codeowner")
    except metadata.PackageNotFoundError:
        return "0.0.0+unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeowner",
        description=(
            "Scan source files for CodeOwner annotations and print a CODEOWNERS file."
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory to scan (defaults to current directory).",
    )
    parser.add_argument(
        "--prefix",
        default=None,
        help="Annotation prefix to search for (default: CodeOwner:).",
    )
    parser.add_argument(
        "--dirowner",
        default=None,
        help="Filename for directory-level ownership (default: .codeowner).",
    )
    parser.add_argument(
        "--protect",
        default=None,
        help='Owners for the CODEOWNERS file itself (e.g. "@admin @team").',
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .codeowner.yml file (defaults to one in the scanned directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors (ignored with --verbose).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also append log records to this file.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_version()}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for codeowner."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(
            verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
        )
    except OSError as exc:
        parser.exit(1, f"codeowner: cannot open log file: {exc}\n")

    try:
        config_path = args.config if args.config is not None else Path(args.path) / CONFIG_FILENAME
        if args.config is not None and not config_path.is_file():
            raise ConfigError(f"config file not found: {config_path}")
        config = load_config(config_path)
        options = resolve_options(
            config, prefix=args.prefix, dirowner=args.dirowner, protect=args.protect
        )
    except ConfigError as exc:
        parser.exit(1, f"codeowner: invalid configuration: {exc}\n")

    try:
        result = Orchestrator().run(args.path, options)
    except OwnerValidationError as exc:
        parser.exit(1, f"codeowner: --protect: {exc}\n")
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"codeowner: {exc}\n")
    except OSError as exc:
        parser.exit(1, f"codeowner: scanning directory: {exc}\nRun with --verbose for more details.\n")

    if result.is_empty:
        print(_NO_ANNOTATIONS, file=sys.stderr)
        return
    sys.stdout.write(result.text)


if __name__ == "__main__":
    main(sys.argv[1:])
