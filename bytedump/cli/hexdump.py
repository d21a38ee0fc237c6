""" Display file contents in hexadecimal """

import argparse
import logging
import sys
from .base import base_parser, LogSetup
from ..common import make_num, ConfigError
from ..hexdump import dump_stream
from ..plan import ReadPlan


logger = logging.getLogger('cli')

parser = argparse.ArgumentParser(description=__doc__, parents=[base_parser])
parser.add_argument(
    "file",
    metavar="file",
    nargs="?",
    help="File to dump contents of (default: stdin)",
)
parser.add_argument(
    "-l", dest="bytes_per_line", metavar="int", default="16",
    help="Bytes per line in output (default: 16)",
)
parser.add_argument(
    "-n", dest="bytes_to_read", metavar="int", default=None,
    help="Number of bytes to read (default: all)",
)
parser.add_argument(
    "-o", dest="offset", metavar="int", default="0",
    help="Byte offset at which to begin reading",
)


def parse_int(value, option):
    try:
        return make_num(value)
    except ValueError:
        raise ConfigError(
            'invalid argument to {} option: {!r}'.format(option, value))


def make_plan(args):
    """ Validate the numeric options and turn them into a read plan """
    bytes_per_line = parse_int(args.bytes_per_line, '-l')
    if args.bytes_to_read is None:
        bytes_to_read = None
    else:
        bytes_to_read = parse_int(args.bytes_to_read, '-n')
    offset = parse_int(args.offset, '-o')
    return ReadPlan.from_args(
        offset=offset, bytes_per_line=bytes_per_line,
        bytes_to_read=bytes_to_read)


def reads_stdin(args):
    return args.file is None or args.file == '-'


def open_stdin(offset):
    """ Get the binary standard input, which cannot be seeked into """
    if offset > 0:
        raise ConfigError('cannot seek into stdin')
    logger.debug('Reading from stdin')
    return getattr(sys.stdin, 'buffer', sys.stdin)


def open_file(filename, offset):
    """ Open filename for reading and position it at offset """
    try:
        f = open(filename, 'rb')
    except OSError as ex:
        raise ConfigError(
            'cannot open file {!r}: {}'.format(filename, ex.strerror or ex))
    logger.debug('Opened %s', filename)
    if offset > 0:
        try:
            f.seek(offset)
        except OSError as ex:
            f.close()
            raise ConfigError(
                'cannot seek to offset {} in {!r}: {}'.format(
                    offset, filename, ex))
        logger.debug('Seeked to offset %s', offset)
    return f


def hexdump(args=None):
    """ Display file contents in hexadecimal """
    args = parser.parse_args(args)
    with LogSetup(args):
        plan = make_plan(args)
        if reads_stdin(args):
            dump_stream(open_stdin(plan.offset), plan)
        else:
            with open_file(args.file, plan.offset) as f:
                dump_stream(f, plan)


if __name__ == "__main__":
    hexdump()
