"""
Field Tokenizer
===============

Split one log line into fields and parse numeric field values.

Quoting follows a small RFC4180 subset:
    - comma delimits fields
    - a double quote toggles quoted mode; commas and newlines inside are literal
    - "" inside quotes is one literal quote
    - an unterminated quote runs to end of line

No whitespace trimming happens here.
"""

import math
import re
from typing import List, Optional


DELIMITER = ','
QUOTE = '"'

# Invariant-culture decimal: sign, digits with optional thousands commas,
# optional fraction, optional exponent. ASCII digits only; no nan/inf,
# no underscores.
_DECIMAL = re.compile(r'[+-]?(?:\d[\d,]*)?(?:\.\d*)?(?:[eE][+-]?\d+)?', re.ASCII)
_INTEGER = re.compile(r'[+-]?\d+', re.ASCII)

# Integer fields are 32-bit signed in the log format
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


def split_line(line: Optional[str]) -> List[str]:
    """
    Split a line into ordered field values.

    Args:
        line: Line text without its trailing newline, or None

    Returns:
        List of fields. Empty string -> [''], None -> []
    """
    if line is None:
        return []

    fields = []
    current = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        c = line[i]

        if in_quotes:
            if c == QUOTE:
                if i + 1 < n and line[i + 1] == QUOTE:
                    current.append(QUOTE)
                    i += 1
                else:
                    in_quotes = False
            else:
                current.append(c)
        elif c == DELIMITER:
            fields.append(''.join(current))
            current = []
        elif c == QUOTE:
            in_quotes = True
        else:
            current.append(c)

        i += 1

    fields.append(''.join(current))
    return fields


def parse_float(text: Optional[str]) -> Optional[float]:
    """
    Parse a finite decimal number, or return None.

    Accepts surrounding whitespace, thousands separators (1,234.5) and
    exponent notation. Locale independent.
    """
    if text is None:
        return None

    s = text.strip()
    if not _DECIMAL.fullmatch(s) or not any(ch.isdigit() for ch in s):
        return None
    if s.lstrip('+-').startswith(','):
        return None

    try:
        value = float(s.replace(',', ''))
    except ValueError:
        return None

    if not math.isfinite(value):
        return None
    return value


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse a plain 32-bit decimal integer (optional sign), or return None."""
    if text is None:
        return None

    s = text.strip()
    if not _INTEGER.fullmatch(s):
        return None

    value = int(s)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value
