"""
   Error handling routines
   Number parsing helpers
"""


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


def make_num(txt):
    """ Parse an integer, allowing hexadecimal and binary prefixes """
    txt = txt.strip()
    sign = 1
    if txt.startswith('-'):
        sign, txt = -1, txt[1:]
    if txt.startswith(('0x', '0X')):
        base, digits = 16, txt[2:]
    elif txt.startswith('$'):
        base, digits = 16, txt[1:]
    elif txt.startswith(('0b', '0B')):
        base, digits = 2, txt[2:]
    elif txt.startswith('%'):
        base, digits = 2, txt[1:]
    else:
        base, digits = 10, txt
    # int() would accept another sign or blanks here
    if not digits[:1].isalnum():
        raise ValueError('Invalid number: {}'.format(txt))
    value = int(digits, base)
    return sign * value


class DumpError(Exception):
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __str__(self):
        return self.msg

    def __repr__(self):
        return '"{}"'.format(self.msg)


class ConfigError(DumpError):
    """ Invalid settings, detected before any data is dumped """
    pass


class ReadError(DumpError):
    """ The input stream failed while it was being dumped """
    def __init__(self, msg, offset, cause=None):
        super().__init__(msg)
        self.offset = offset
        self.cause = cause
