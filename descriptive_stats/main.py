"""
Descriptive statistics command-line entry point

Reads numbers from the command line or standard input, runs the
statistics engine and prints the result.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, TextIO

from . import config
from .exceptions import StatisticsError, statistics_error_handler
from .statistical_analysis import StatisticsEngine

logger = logging.getLogger(__name__)

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


def _parse_number(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}")


def _parse_precision(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid precision: {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='descriptive-stats',
        description='Sum, mean, median, sample standard deviation and modes of a list of numbers.'
    )
    parser.add_argument(
        'numbers', nargs='*', type=_parse_number,
        help='numbers to analyze; read from standard input when omitted'
    )
    parser.add_argument(
        '-p', '--precision', type=_parse_precision, default=config.DEFAULT_PRECISION,
        help='decimal digits kept by truncation (default: %(default)s)'
    )
    parser.add_argument('--json', action='store_true', help='print the result as JSON')
    parser.add_argument(
        '--log-level', type=str.upper, choices=LOG_LEVELS, default=config.LOG_LEVEL,
        help='logging level (default: %(default)s)'
    )
    return parser


def read_numbers(stream: TextIO, parser: argparse.ArgumentParser) -> List[float]:
    """Parse whitespace separated numbers from a text stream"""
    values = []
    for token in stream.read().split():
        try:
            values.append(_parse_number(token))
        except argparse.ArgumentTypeError as e:
            parser.error(str(e))
    return values


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    # choices are not applied to defaults taken from the environment
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level: {args.log_level!r}")

    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    numbers = args.numbers or read_numbers(stdin, parser)
    logger.info(f"Read {len(numbers)} numbers")

    try:
        result = StatisticsEngine(args.precision).compute(numbers)
    except StatisticsError as e:
        payload = statistics_error_handler(e)
        if args.json:
            print(json.dumps(payload), file=stdout)
        else:
            print(f"error: {e.message}", file=sys.stderr)
        return e.exit_code

    if args.json:
        print(result.model_dump_json(), file=stdout)
    else:
        print(result.to_text(), file=stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
