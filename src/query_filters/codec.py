"""Query-string codec for filter values.

Values are written to the URL without any schema, so decoding infers the type
from the shape of the text alone. The precedence is fixed and must stay stable
for URLs that have already been shared:

    1. "null"                  -> None
    2. "true" / "false"        -> bool
    3. leading base-10 integer -> int   ("3abc" decodes to 3)
    4. "{a,b,...}"             -> frozenset of decoded word tokens
    5. anything else           -> the text itself

Strings that look like one of the reserved literals or start with digits do
not survive a round trip ("true" comes back as True). Use decode_as() with
the default's kind when a filter needs to keep such strings.
"""

import math
import re
from collections.abc import Set as AbstractSet
from decimal import Decimal

from config.logging_config import get_logger

from .exceptions import UnsupportedType
from .kinds import UNDEFINED, FilterKind

logger = get_logger("codec")

NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"
RESERVED_LITERALS = (NULL_LITERAL, TRUE_LITERAL, FALSE_LITERAL)

SET_OPEN = "{"
SET_CLOSE = "}"
SET_SEPARATOR = ","

# Whitespace and line terminators as browsers skip them before a number
_LEADING_SPACE = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]*"
_INTEGER_PREFIX = re.compile(_LEADING_SPACE + r"([+-]?[0-9]+)")
_SET_PATTERN = re.compile(r"\{((?:\w+(?:,\w+)*)?)\}", re.ASCII)

# Floats switch to exponent notation outside [1e-7, 1e21), as browsers write them
_MAX_FIXED_DIGITS = 21
_MIN_FIXED_EXPONENT = -6


def _encode_float(value: float) -> str:
    if value == 0:
        return "0"
    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    while len(digits) > 1 and digits.endswith("0"):
        digits = digits[:-1]
        exponent += 1

    prefix = "-" if sign else ""
    k = len(digits)
    # Position of the decimal point relative to the first digit
    n = k + exponent
    if k <= n <= _MAX_FIXED_DIGITS:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= _MAX_FIXED_DIGITS:
        return prefix + digits[:n] + "." + digits[n:]
    if _MIN_FIXED_EXPONENT < n <= 0:
        return prefix + "0." + "0" * -n + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{prefix}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def _encode_number(value) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return _encode_float(value)


def _encode_scalar(value) -> str:
    if value is None:
        return NULL_LITERAL
    if value is UNDEFINED:
        raise UnsupportedType(value, "Undefined values have no query-string form")
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if isinstance(value, (int, float)):
        return _encode_number(value)
    if isinstance(value, str):
        return value
    raise UnsupportedType(value)


def encode(value) -> str:
    """
    Encode a filter value as query-string text.

    Args:
        value: Number, string, boolean, None, or a set of those.

    Returns:
        Text form of the value. Sets are written as "{a,b}" in iteration order.

    Raises:
        UnsupportedType: For UNDEFINED, nested sets and any other type.
    """
    if isinstance(value, AbstractSet):
        parts = []
        for element in value:
            if isinstance(element, AbstractSet):
                raise UnsupportedType(
                    element, "Nested sets are not supported as filter values"
                )
            parts.append(_encode_scalar(element))
        return SET_OPEN + SET_SEPARATOR.join(parts) + SET_CLOSE
    return _encode_scalar(value)


def parse_integer_prefix(text: str):
    """
    Parse the leading base-10 integer of a string.

    Leading whitespace (including non-breaking spaces and a byte order mark)
    and a single sign are accepted; parsing stops at the first non-digit
    character.

    Returns:
        The integer, or None if the text does not start with one. Digit runs
        too long for int conversion come back as a float, possibly infinite.
    """
    match = _INTEGER_PREFIX.match(text)
    if match is None:
        return None
    digits = match.group(1)
    try:
        return int(digits)
    except ValueError:
        return float(digits)


def parse_set(text: str):
    """
    Parse "{a,b,...}" into a frozenset of decoded tokens.

    Tokens are limited to ASCII word characters, so sets cannot nest and
    elements cannot contain commas or braces.

    Returns:
        A frozenset, or None if the text is not a serialized set.
    """
    match = _SET_PATTERN.fullmatch(text)
    if match is None:
        return None
    body = match.group(1)
    if body == "":
        return frozenset()
    return frozenset(decode(token) for token in body.split(SET_SEPARATOR))


def decode(text: str):
    """
    Decode query-string text into a filter value.

    Never raises: text that matches no other rule comes back unchanged.
    """
    if text == NULL_LITERAL:
        return None
    if text == TRUE_LITERAL:
        return True
    if text == FALSE_LITERAL:
        return False

    number = parse_integer_prefix(text)
    if number is not None:
        if _INTEGER_PREFIX.fullmatch(text) is None:
            logger.debug(f"Lenient integer decode: {text!r} -> {number}")
        return number

    parsed_set = parse_set(text)
    if parsed_set is not None:
        return parsed_set

    if text.startswith(SET_OPEN) and text.endswith(SET_CLOSE):
        logger.debug(f"Malformed set text kept as string: {text!r}")
    return text


def decode_as(text: str, kind: FilterKind):
    """
    Decode text using the expected kind of the filter.

    String filters keep their raw text, so values such as "true", "null" or
    "42" are not reinterpreted. Every other kind uses the schema-less decode().
    """
    if kind == FilterKind.STRING:
        return text
    return decode(text)
