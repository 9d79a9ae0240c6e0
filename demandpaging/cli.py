#!/usr/bin/env python3
"""
Command line entry point
Runs one simulation from a bundled preset or custom parameters
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import SimulationConfig, parse_algorithm, preset
from .driver import Driver
from .errors import ConfigError, DemandPagingError
from .randsource import RandomSource
from .report import format_header, format_report, plot_stats

logger = logging.getLogger(__name__)

EXIT_FAILURE = 10


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='demandpaging',
        description='Demand paging simulator with LRU, FIFO and Random replacement')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-p", "--preset", type=int, metavar="N",
                        help="Bundled run number (1-16)")
    source.add_argument("-c", "--custom", nargs=6,
                        metavar=("M", "P", "S", "J", "N", "R"),
                        help="Machine size, page size, process size, job mix, "
                             "reference count, algorithm (lru, fifo, random)")
    parser.add_argument("-r", "--random-file", default="random-numbers.txt",
                        help="File of random integers consumed in order")
    parser.add_argument("-d", "--debug", action="store_true",
                        help="Trace every reference")
    parser.add_argument("-s", "--show-random", action="store_true",
                        help="Show every random number used")
    parser.add_argument("--plot", metavar="PATH",
                        help="Save a chart of per-process statistics")
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    if args.preset is not None:
        return preset(args.preset, debug=args.debug, show_random=args.show_random)

    *sizes, raw_algorithm = args.custom
    try:
        machine, page, proc, mix, refs = (int(v) for v in sizes)
    except ValueError:
        raise ConfigError(f"sizes, job mix and reference count must be integers: {sizes}") from None

    return SimulationConfig(
        machine_size=machine,
        page_size=page,
        process_size=proc,
        job_mix=mix,
        reference_count=refs,
        algorithm=parse_algorithm(raw_algorithm),
        debug=args.debug,
        show_random=args.show_random,
    ).validate()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stdout)

    try:
        config = config_from_args(args)
        random_source = RandomSource.from_file(args.random_file, show_random=config.show_random)
        for line in format_header(config):
            print(line)
        print()

        pager = Driver(config, random_source).run()
    except DemandPagingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print()
    for line in format_report(pager):
        print(line)

    if args.plot:
        plot_stats(pager, args.plot)
        logger.info("Saved chart to %s", args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
