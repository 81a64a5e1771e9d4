import argparse
import logging
import sys
from typing import List, Optional

from .. import __version__
from ..errors import UnmtkError
from .extract import mtk_to_directory
from .utils import STDIN, configure_logging, dir_path, input_path

LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unmtk", description="Extract the files stored in an MTK archive."
    )
    parser.add_argument(
        "input",
        type=input_path,
        default=STDIN,
        nargs="?",
        help="Archive to read, or '-' for standard input (the default)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=dir_path,
        required=True,
        metavar="DIRECTORY",
        help="Output directory, created if missing",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Print the archive header and entries, and any warnings",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        written = mtk_to_directory(args.input, args.output, args.verbose)
    except (UnmtkError, OSError) as e:
        LOG.error("%s", e)
        return 1

    LOG.debug("Extracted %d files to '%s'", len(written), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
