"""Command-line entry point: ``dump2h5 [-a] [-o OUTFILE] FILE|DIR...``."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from dump2h5.config import DEFAULT_OUTFILE
from dump2h5.errors import Dump2H5Error
from dump2h5.importer import BatchImporter
from dump2h5.reporting import ErrorReporter


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f'{self.prog}: {message}\n'
                     f"Try `{self.prog} --help' for more information.\n")


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog,
        description='Import dump into HDF5 data file.',
        epilog='Every input after the first is appended to OUTFILE. An OUTFILE '
               'ending in .nc or .nc4 is written as NetCDF instead of HDF5.',
    )
    parser.add_argument('inputs', nargs='+', metavar='FILE|DIR',
                        help='input file, or directory of input files')
    parser.add_argument('-a', dest='append', action='store_true',
                        help='append to output file')
    parser.add_argument('-o', dest='outfile', metavar='OUTFILE', default=DEFAULT_OUTFILE,
                        help=f'output file (default: {DEFAULT_OUTFILE})')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='print debugging messages')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    prog = os.path.basename(sys.argv[0])
    if prog in ('', '__main__.py'):
        prog = 'dump2h5'
    args = build_parser(prog).parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s %(message)s',
    )

    reporter = ErrorReporter(prog)
    importer = BatchImporter(args.outfile, append=args.append)
    try:
        importer.run(args.inputs)
    except Dump2H5Error as e:
        return reporter.fatal(e)
    return 0


if __name__ == '__main__':
    sys.exit(main())
