"""CLI entrypoint: print the JSON documentation of one Go package."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import ExtractError
from .logging import configure_logging, get_logger
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gopkgdoc",
        description=(
            "Extract the exported API documentation of a Go package as JSON. "
            "With the default package_selection (last), a directory declaring "
            "several non-test packages yields only the last one in file-name "
            "order; set package_selection: strict to reject such directories."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .gopkgdoc.yml file or its directory (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write a DEBUG-level log of the run to this file.",
    )
    parser.add_argument(
        "package",
        help="Import path of the package, resolved under <root>/src for each source root.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for gopkgdoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        orchestrator = Orchestrator.from_config_path(args.config)
        output = orchestrator.run_json(args.package)
    except (ExtractError, OSError) as exc:
        parser.exit(1, f"gopkgdoc: {exc}\n")
    except Exception as exc:  # pragma: no cover
        logger.debug("Extraction failed", exc_info=True)
        parser.exit(1, f"gopkgdoc failed: {exc}\nRun with --verbose for more details.\n")

    sys.stdout.write(output + "\n")


if __name__ == "__main__":
    main(sys.argv[1:])
