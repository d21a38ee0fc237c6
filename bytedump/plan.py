""" Settings for a single dump run. """

from .common import ConfigError


class ReadPlan:
    """ Where to start, how wide the lines are and how much to read.

    A bytes_to_read of -1 means read until the end of the stream.
    The driver advances offset and bytes_to_read while dumping.
    """
    UNBOUNDED = -1

    def __init__(self, offset=0, bytes_per_line=16, bytes_to_read=-1):
        if bytes_per_line <= 0:
            raise ConfigError(
                'bytes per line must be positive, got {}'.format(
                    bytes_per_line))
        if offset < 0:
            raise ConfigError(
                'offset must not be negative, got {}'.format(offset))
        if bytes_to_read < 0:
            bytes_to_read = self.UNBOUNDED
        self.offset = offset
        self.bytes_per_line = bytes_per_line
        self.bytes_to_read = bytes_to_read

    @classmethod
    def from_args(cls, offset=0, bytes_per_line=16, bytes_to_read=None):
        """ Create a plan from command line values """
        if bytes_to_read is None:
            bytes_to_read = cls.UNBOUNDED
        return cls(
            offset=offset, bytes_per_line=bytes_per_line,
            bytes_to_read=bytes_to_read)

    @property
    def bounded(self):
        return self.bytes_to_read >= 0

    def request_size(self):
        """ Number of bytes to ask for in the next read """
        if not self.bounded:
            return self.bytes_per_line
        elif self.bytes_per_line < self.bytes_to_read:
            return self.bytes_per_line
        else:
            return self.bytes_to_read

    def consume(self, num_bytes):
        """ Account for num_bytes that were just dumped """
        self.offset += num_bytes
        if self.bounded:
            self.bytes_to_read -= num_bytes

    def __repr__(self):
        return 'ReadPlan(offset={}, bytes_per_line={}, bytes_to_read={})'\
            .format(self.offset, self.bytes_per_line, self.bytes_to_read)
