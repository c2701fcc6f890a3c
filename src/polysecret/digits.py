"""Positional digit strings in bases 2..36.

Digits are '0'-'9' then 'a'-'z' (either case). Values accumulate in Python
ints, so strings of any length decode without truncation.
"""

from polysecret.errors import UnsupportedBase, InvalidDigit, DigitOutOfRange

MIN_BASE = 2
MAX_BASE = 36
ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyz'


def parse_base(base) -> int:
    """Validate a base given as an int or a decimal string.

    Raises UnsupportedBase naming the raw value when it is not an integer
    in [2, 36].
    """
    if isinstance(base, bool):
        raise UnsupportedBase(base)
    if isinstance(base, int):
        b = base
    elif isinstance(base, str):
        s = base.strip()
        if not (s.isascii() and s.isdigit()):
            raise UnsupportedBase(base)
        b = int(s)
    else:
        raise UnsupportedBase(base)
    if not (MIN_BASE <= b <= MAX_BASE):
        raise UnsupportedBase(base)
    return b


def digit_value(ch: str) -> int:
    """Map one digit character to its value 0..35."""
    if len(ch) != 1 or not ch.isascii():
        raise InvalidDigit(ch)
    if '0' <= ch <= '9':
        return ord(ch) - ord('0')
    c = ch.lower()
    if 'a' <= c <= 'z':
        return ord(c) - ord('a') + 10
    raise InvalidDigit(ch)


def decode(value: str, base) -> int:
    """Decode a non-negative digit string in the given base.

    Surrounding whitespace is ignored and letters are case-insensitive.
    Raises UnsupportedBase, InvalidDigit (also for an empty string) or
    DigitOutOfRange.
    """
    b = parse_base(base)
    s = value.strip()
    if not s:
        raise InvalidDigit('')
    acc = 0
    for ch in s:
        d = digit_value(ch)
        if d >= b:
            raise DigitOutOfRange(ch, b)
        acc = acc * b + d
    return acc


def encode(n: int, base) -> str:
    """Render a non-negative int in the given base (lowercase digits)."""
    b = parse_base(base)
    if n < 0:
        raise ValueError(f"Cannot encode negative value {n}")
    if n == 0:
        return '0'
    out = []
    while n:
        n, r = divmod(n, b)
        out.append(ALPHABET[r])
    return ''.join(reversed(out))
