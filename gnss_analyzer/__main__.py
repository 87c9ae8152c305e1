"""Decode an NMEA capture and print one JSON line per GNSS fix.

Usage::

    python -m gnss_analyzer capture.nmea
    cat capture.nmea | python -m gnss_analyzer --log-level DEBUG
"""

import argparse
import logging
import sys

from gnss_analyzer.formatters import format_gnss_message
from gnss_analyzer.gnss import GNSSReader

logger = logging.getLogger("gnss_analyzer")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gnss_analyzer",
        description="Decode GGA/GSV NMEA sentences into JSON snapshots",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="NMEA capture file (default: stdin)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity on stderr (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )

    if args.path:
        stream = open(args.path, encoding="ascii", errors="replace")
    else:
        stream = sys.stdin

    with GNSSReader(stream) as gnss:
        for data in gnss:
            print(format_gnss_message(data), flush=True)

    logger.info(
        "Decoded %d sentences, %d errors",
        gnss.sentences_decoded,
        gnss.decode_errors,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
