"""CLI entrypoints for legal-licenses commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import LegalLicensesError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="legal-licenses",
        description="Generate a licenses document from Composer project dependencies.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate Licenses file from project dependencies.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root containing composer.lock (defaults to current directory).",
    )
    generate_parser.add_argument(
        "--output",
        default=None,
        help="Output file, relative to the project root (defaults to licenses.md).",
    )
    generate_parser.add_argument(
        "--include-dev",
        action="store_true",
        default=None,
        help="Also list packages from the packages-dev section.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for legal-licenses commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    orchestrator = Orchestrator()

    if args.command == "generate":
        try:
            outcome = orchestrator.run_generate(
                args.path,
                output=args.output,
                include_dev=args.include_dev,
            )
        except LegalLicensesError as exc:
            parser.exit(1, f"{exc}\n")
        print(f"Done! Wrote {outcome.dependency_count} dependencies to {_relativize(outcome.path)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
