"""Command-line entry point: ``vstars2vice <input.xml> <output.json>``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from vstars2vice import __version__
from vstars2vice.core.config import ConverterConfig
from vstars2vice.core.constants import STDIO_PATH
from vstars2vice.core.exceptions import ConversionError
from vstars2vice.orchestrators.video_map_pipeline import convert_video_maps

logger = logging.getLogger("vstars2vice.cli")

EXIT_FAILURE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = _ArgumentParser(
        prog="vstars2vice",
        description="Convert vSTARS facility video maps to vice JSON",
    )
    parser.add_argument("input", help="vSTARS facility XML file ('-' for stdin).")
    parser.add_argument("output", help="vice video map JSON file ('-' for stdout).")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        config = ConverterConfig.from_env()
    except ConversionError as exc:
        print(exc, file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(config.log_level)

    # Progress lines must not interleave with JSON written to stdout.
    progress = sys.stderr if args.output == STDIO_PATH else sys.stdout

    try:
        convert_video_maps(args.input, args.output, config=config, progress=progress)
    except ConversionError as exc:
        logger.debug("Conversion failed: %s", exc.to_error_dict())
        print(exc, file=sys.stderr)
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())
