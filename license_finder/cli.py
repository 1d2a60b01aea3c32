"""
Command line entry point: `license-finder <directory>`.

Prints which known licenses appear in the tree and the main license declared by
the root LICENSE/LICENCE/COPYING file. Exits with 1 on any usage or input error.
"""

import argparse
import logging
import sys
from license_finder.core.config import LOG_LEVEL
from license_finder.services.analysis_workflow import InvalidDirectoryError, perform_scan
from license_finder.services.corpus import CorpusLoadError
from license_finder.services.report_service import render_file_verdicts, render_report

EXIT_OK = 0
EXIT_FAILURE = 1

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1 instead of 2."""

    def error(self, message):
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="license-finder",
        description="Detect the open-source licenses contained in a directory.",
    )
    parser.add_argument("directories", nargs="*", metavar="directory",
                        help="project directory to scan")
    parser.add_argument("--files", action="store_true",
                        help="also list the license found in each file")
    parser.add_argument("--log-level", default=LOG_LEVEL, type=str.upper,
                        choices=LOG_LEVELS,
                        help="logging level for diagnostics (default: %(default)s)")
    return parser


def main(argv=None) -> int:
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(e, file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_FAILURE

    if len(args.directories) != 1:
        print(f"Wrong number of arguments, got {len(args.directories)}, expected 1", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_FAILURE

    # argparse does not check defaults against choices; LOG_LEVEL may come from .env
    if args.log_level not in LOG_LEVELS:
        print(f"Invalid log level {args.log_level}, expected one of {', '.join(LOG_LEVELS)}", file=sys.stderr)
        return EXIT_FAILURE

    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    directory = args.directories[0]
    try:
        response = perform_scan(directory, include_files=args.files)
    except InvalidDirectoryError as e:
        print(e, file=sys.stderr)
        return EXIT_FAILURE
    except CorpusLoadError as e:
        print(f"Broken installation: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except OSError as e:
        print(f"Can't read {e.filename or directory}: {e.strerror or e}", file=sys.stderr)
        return EXIT_FAILURE

    sys.stdout.write(render_report(response))
    if args.files:
        sys.stdout.write(render_file_verdicts(response))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
