""" Utilities to dump binary data in hex """

import io
import logging
import sys
from .common import ReadError
from .plan import ReadPlan


logger = logging.getLogger('hexdump')


def printable(byte):
    """ Ascii column representation of a single byte """
    return chr(byte) if 31 < byte < 127 else '.'


def format_line(chunk, offset, width):
    """ Format a single line of the dump.

    The hex part always has width columns, short chunks are padded with
    blanks so the ascii column lines up with the lines above it.
    An extra space separates each group of four bytes.

    For example:

        >>> format_line(b'AB', 0x10, 4)
        '000010 | 41 42       | AB\\n'

    """
    num_bytes = len(chunk)
    parts = ['{:06X} |'.format(offset)]
    for i in range(width):
        if i > 0 and i % 4 == 0:
            parts.append(' ')
        if i < num_bytes:
            parts.append(' {:02X}'.format(chunk[i]))
        else:
            parts.append('   ')
    parts.append(' | ')
    parts.extend(printable(b) for b in chunk)
    parts.append('\n')
    return ''.join(parts)


def read_chunk(stream, view):
    """ Read at most len(view) bytes from stream into view.

    Returns the number of bytes read, 0 means no more data.
    """
    if len(view) == 0:
        return 0
    if hasattr(stream, 'readinto'):
        num_bytes = stream.readinto(view)
        # Non-blocking streams give None when nothing is available
        return num_bytes or 0
    data = stream.read(len(view))
    if not data:
        return 0
    view[:len(data)] = data
    return len(data)


def dump_stream(stream, plan, out=None):
    """ Dump the stream, one line per chunk, until it ends or the plan's
    quota is used up.

    The stream must already be positioned at plan.offset. Returns the
    number of bytes dumped. Raises ReadError when the stream fails.
    """
    if out is None:
        out = sys.stdout
    logger.debug('Dumping with %s', plan)

    # One buffer for the whole run, each line is formatted before the
    # next read overwrites it.
    view = memoryview(bytearray(plan.bytes_per_line))
    total = 0
    lines = 0
    while True:
        request = plan.request_size()
        try:
            num_bytes = read_chunk(stream, view[:request])
        except OSError as ex:
            raise ReadError(
                'Error reading input at offset {}: {}'.format(
                    plan.offset, ex), plan.offset, cause=ex) from ex
        if num_bytes == 0:
            break
        out.write(
            format_line(view[:num_bytes], plan.offset, plan.bytes_per_line))
        plan.consume(num_bytes)
        total += num_bytes
        lines += 1
    logger.debug('Dumped %s bytes in %s lines', total, lines)
    return total


def hexdump(data, address=0, width=16, file=None):
    """ Hexdump of the given bytes.

    For example:

        >>> from bytedump.hexdump import hexdump
        >>> data = bytes(range(10))
        >>> hexdump(data, width=4)
        000000 | 00 01 02 03 | ....
        000004 | 04 05 06 07 | ....
        000008 | 08 09       | ..

    """
    plan = ReadPlan(offset=address, bytes_per_line=width)
    dump_stream(io.BytesIO(data), plan, out=file)
