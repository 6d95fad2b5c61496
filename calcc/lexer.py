import re
from collections import namedtuple

from calcc.errors import IntegerOverflowError, InvalidCharacterError

Token = namedtuple('Token', ['kind', 'value'])

INT32_MAX = 2 ** 31 - 1

TOKEN_SPEC = [
    ('NUMBER',   r'\d+'),
    ('ID',       r'[A-Za-z_]\w*'),
    ('ASSIGN',   r'='),
    ('PLUS',     r'\+'),
    ('MINUS',    r'-'),
    ('MUL',      r'\*'),
    ('DIV',      r'/'),
    ('LPAREN',   r'\('),
    ('RPAREN',   r'\)'),
    ('SEMI',     r';'),
    ('SKIP',     r'[ \t\r]+'),
    ('NEWLINE',  r'\n'),
    ('MISMATCH', r'.'),
]

# re.ASCII keeps \w and \d from matching non-latin letters and digits
TOKEN_RE = re.compile('|'.join('(?P<%s>%s)' % pair for pair in TOKEN_SPEC), re.ASCII)


def gen_tokens(code):
    line = 1
    line_start = 0
    for mo in TOKEN_RE.finditer(code):
        kind = mo.lastgroup
        value = mo.group()
        if kind == 'NUMBER':
            value = int(value)
            if value > INT32_MAX:
                raise IntegerOverflowError(mo.group())
        elif kind == 'NEWLINE':
            line += 1
            line_start = mo.end()
            continue
        elif kind == 'SKIP':
            continue
        elif kind == 'MISMATCH':
            raise InvalidCharacterError(value, line, mo.start() - line_start + 1)
        yield Token(kind, value)


def tokenize(code):
    print("Tokenizing")
    return list(gen_tokens(code))
