"""
Parsers for the small literal grammars used in markup attributes.

Dimensions: ``auto``, ``<number>pt`` or ``<number>%``.
Colors: ``#rrggbb`` hex literals.
"""

import re

from ..errors import (
    InvalidLiteral, MalformedDigits, MalformedNumber, MissingPrefix,
    MissingUnit, WrongLength,
)
from ..model.style import AUTO, Color, Dimension

_WHITESPACE = re.compile(r'\s+')
_HEX_PAIR = re.compile(r'[0-9a-fA-F]{2}')
_FLOAT = re.compile(r'[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?')

DIMENSION_UNITS = {
    'pt': Dimension.point,
    '%': Dimension.percent,
}


def parse_number(text: str) -> float:
    """
    Parse a bare decimal number.

    Only plain decimal notation is accepted; ``nan``, ``inf`` and the other
    spellings ``float()`` tolerates are rejected.

    Args:
        text: Number literal

    Returns:
        float: The parsed value

    Raises:
        MalformedNumber: If the text is not a decimal number
    """
    stripped = text.strip()
    if not _FLOAT.fullmatch(stripped):
        raise MalformedNumber(text)
    return float(stripped)


def parse_dimension(text: str) -> Dimension:
    """
    Parse a dimension literal.

    Whitespace anywhere in the literal is ignored. The number may carry a
    single leading minus sign.

    Args:
        text: Dimension literal such as ``"auto"``, ``"320pt"`` or ``"50%"``

    Returns:
        Dimension: The parsed dimension

    Raises:
        MissingUnit: If the literal has no unit suffix
        MalformedNumber: If the numeric part is not a number
        InvalidLiteral: If the unit suffix is unknown
    """
    if text == 'auto':
        return AUTO

    compact = _WHITESPACE.sub('', text)
    start = 1 if compact.startswith('-') else 0
    boundary = None
    for index in range(start, len(compact)):
        char = compact[index]
        if not (char.isascii() and char.isdigit()) and char != '.':
            boundary = index
            break

    if boundary is None:
        raise MissingUnit(text)

    mantissa, unit = compact[:boundary], compact[boundary:]
    factory = DIMENSION_UNITS.get(unit)
    if factory is None:
        raise InvalidLiteral(text, message="Invalid dimension literal")

    try:
        value = float(mantissa)
    except ValueError:
        raise MalformedNumber(text) from None
    return factory(value)


def parse_color(text: str) -> Color:
    """
    Parse a ``#rrggbb`` color literal.

    Args:
        text: Color literal

    Returns:
        Color: Fully opaque color

    Raises:
        MissingPrefix: If the literal does not start with ``#``
        WrongLength: If there are not exactly six digits
        MalformedDigits: If a digit pair is not hexadecimal
    """
    if not text.startswith('#'):
        raise MissingPrefix(text)
    digits = text[1:]
    if len(digits) != 6:
        raise WrongLength(text)

    channels = []
    for offset in (0, 2, 4):
        pair = digits[offset:offset + 2]
        if not _HEX_PAIR.fullmatch(pair):
            raise MalformedDigits(text)
        channels.append(int(pair, 16))

    red, green, blue = channels
    return Color(red, green, blue, 255)
