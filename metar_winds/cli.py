#!/usr/bin/env python3

import sys
import json
import time
import argparse
import logging
from typing import List, Optional

from metar_winds.config import (
    DEFAULT_STATION,
    DEFAULT_INPUT_DIR,
    LOG_LEVEL,
    LOG_FORMAT,
    OUTPUT_FORMATS,
)
from metar_winds.models import Sector
from metar_winds.pipeline import WindPipeline, WindRunResult
from metar_winds.sources import DirectorySource, BulletinSourceError

logger = logging.getLogger(__name__)


def format_elapsed(seconds: float) -> str:
    """Format a duration the way a stopwatch would: 850µs, 12.5ms, 2.31s."""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.0f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


class Command:
    """Command-line interface computing the wind direction distribution."""

    def __init__(self, args):
        """
        Initialize the command interface.

        Args:
            args: Command line arguments
        """
        self.args = args
        self.source = DirectorySource(args.directory)
        self.pipeline = WindPipeline(station=args.station, max_workers=args.workers)

    def run(self) -> WindRunResult:
        """Read the bulletins, count the winds and write the report."""
        start = time.perf_counter()
        blobs = self.source.read_blobs()
        result = self.pipeline.run(blobs)
        # Report the whole run, file reading included
        result.elapsed_seconds = time.perf_counter() - start

        output_text = getattr(self, f'format_{self.args.format}')(result)
        if self.args.output:
            with open(self.args.output, 'w', encoding='utf-8') as f:
                f.write(output_text)
            logger.info(f'Results saved to {self.args.output}')
        else:
            print(output_text, end='')
        return result

    def format_human(self, result: WindRunResult) -> str:
        distribution = result.distribution
        output_lines = [str(distribution)]
        output_lines.append("")
        output_lines.append(f"=== WIND DIRECTION DISTRIBUTION ({self.pipeline.station}) ===")
        for sector in Sector:
            output_lines.append(
                f"  {sector.name:<3} {sector.label:<10} {sector.heading:>3}°  {distribution.count_for(sector)}"
            )
        output_lines.append(
            f"  {result.blob_count} files, {result.report_count} reports, "
            f"{distribution.fixed_count} fixed and {distribution.variable_count} variable winds"
        )
        dominant = distribution.dominant_sector()
        if dominant is not None:
            output_lines.append(f"  Prevailing wind: {dominant.label}")
        output_lines.append(f"Processing took {format_elapsed(result.elapsed_seconds)}")
        return '\n'.join(output_lines) + '\n'

    def format_json(self, result: WindRunResult) -> str:
        data = {
            'station': self.pipeline.station,
            'files': result.blob_count,
            'reports': result.report_count,
            'elapsed_seconds': result.elapsed_seconds,
        }
        data.update(result.distribution.to_dict())
        return json.dumps(data, indent=2) + '\n'

    def format_csv(self, result: WindRunResult) -> str:
        return result.distribution.to_dataframe().to_csv(index=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Wind direction distribution from METAR bulletin files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  metar-winds ./metarfiles
  metar-winds ./metarfiles --station EGKK --format json -o winds.json
        """
    )
    parser.add_argument('directory', help='Directory containing bulletin files', nargs='?',
                        default=DEFAULT_INPUT_DIR)
    parser.add_argument('-s', '--station', help='ICAO station to count', default=DEFAULT_STATION)
    parser.add_argument('-w', '--workers', help='Number of worker threads', type=int)
    parser.add_argument('--format', help='Output format', choices=OUTPUT_FORMATS, default='human')
    parser.add_argument('-o', '--output', help='Output file path')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format=LOG_FORMAT)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        cmd = Command(args)
        cmd.run()
    except BulletinSourceError as e:
        logger.error(str(e))
        return 1
    except ValueError as e:
        logger.error(f"Invalid arguments: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
