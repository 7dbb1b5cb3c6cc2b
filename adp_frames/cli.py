import argparse
import sys

from .errors import FrameLocateError
from .locate_core import run_locate
from .logger import configure_logging


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Locate checksum-verified profiles in a SonTek ADP binary file"
    )
    parser.add_argument("adp", help="Path to SonTek ADP file")
    parser.add_argument("--max", type=int, default=None, dest="max_count",
                        help="Stop after this many profiles (negative or omitted: all)")
    parser.add_argument("--ctd", action="store_true", help="File carries CTD data (unsupported)")
    parser.add_argument("--gps", action="store_true", help="File carries GPS data (unsupported)")
    parser.add_argument("--bottom-track", action="store_true", help="File carries bottom-track data (unsupported)")
    parser.add_argument("--one-based", action="store_true", help="Print 1-based offsets")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    parser.add_argument("--log-file", default=None, help="Write log records to this file instead of stderr")
    args = parser.parse_args(argv)

    configure_logging(args.log_level, args.log_file)
    try:
        run_locate(args.adp, has_ctd=args.ctd, has_gps=args.gps, has_bottom_track=args.bottom_track,
                   max_count=args.max_count, one_based=args.one_based)
    except FrameLocateError as e:
        print(f"错误: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
