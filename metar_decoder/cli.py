#!/usr/bin/env python3

import sys
import argparse
import json
import logging
from typing import List, Optional

from metar_decoder import config
from metar_decoder.decoder import MetarDecoder
from metar_decoder.exceptions import MetarDecoderError
from metar_decoder.models import DecodedToken
from metar_decoder.sources import AirportTable, AvWxMetarSource

logger = logging.getLogger(__name__)


class Command:
    """Command-line interface for metar_decoder."""

    def __init__(self, args, source: Optional[AvWxMetarSource] = None):
        """
        Initialize the command interface.

        Args:
            args: Command line arguments
            source: METAR source used by the fetch command
        """
        self.args = args
        self.source = source
        airports = AirportTable.load_optional(args.airports)
        self.decoder = MetarDecoder.with_lookup(airports)

    def report_text(self) -> str:
        return ' '.join(self.args.report)

    def print_annotations(self, annotated: List[DecodedToken]):
        if self.args.format == 'json':
            print(json.dumps([token.to_dict() for token in annotated], indent=2, ensure_ascii=False))
            return
        width = max((len(token.token) for token in annotated), default=0)
        for token in annotated:
            category = token.category or '-'
            print(f'{token.token:<{width}}  {category:<22}  {token.text}')

    def run_translate(self):
        print(self.decoder.translate(self.report_text()))

    def run_annotate(self):
        self.print_annotations(self.decoder.annotate(self.report_text()))

    def run_fetch(self):
        source = self.source or AvWxMetarSource()
        for icao in self.args.report:
            record = source.fetch_latest(icao)
            logger.info(f'Fetched {record.icao} report from {record.source}')
            if self.args.format == 'json':
                result = record.to_dict()
                result['translation'] = self.decoder.translate(record.raw_text)
                print(json.dumps(result, indent=2, ensure_ascii=False))
                continue
            print(record.raw_text)
            if self.args.annotate:
                self.print_annotations(self.decoder.annotate(record.raw_text))
            else:
                print(self.decoder.translate(record.raw_text))

    def run(self) -> int:
        """Run the specified command."""
        try:
            getattr(self, f'run_{self.args.command}')()
        except MetarDecoderError as e:
            logger.error(str(e))
            return 1
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='METAR report decoder')
    parser.add_argument('command', help='Command to execute', choices=['translate', 'annotate', 'fetch'])
    parser.add_argument('report', help='Raw report text, or ICAO codes for fetch', nargs='+')
    parser.add_argument('-a', '--airports', help='Airport reference table (CSV)', default=config.AIRPORTS_FILE)
    parser.add_argument('--annotate', help='Print one line per token after fetching', action='store_true')
    parser.add_argument('--format', help='Output format', choices=['text', 'json'], default='text')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT
    )

    cmd = Command(args)
    return cmd.run()


if __name__ == '__main__':
    sys.exit(main())
