""" Display the contents of binary files as hexadecimal and ascii.

Example usage:

>>> from bytedump.hexdump import hexdump
>>> hexdump(b'ABC', width=4)
000000 | 41 42 43    | ABC

"""

# Define version here. Used in the command line tools and setup script:
__version_info__ = (0, 2, 0)
__version__ = '.'.join(map(str, __version_info__))
