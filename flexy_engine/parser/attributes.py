"""
Typed access to the attributes of a markup tag.

Absent attributes read as ``None``. Attributes that are present but
malformed always raise; they are never replaced by a default.
"""

import re
from typing import Any, Callable, Mapping, Optional, TypeVar

from ..errors import (
    InvalidEnumValue, InvalidLiteral, MalformedBoolean, MalformedNumber,
)
from ..model.style import Color, Dimension
from .literals import parse_color, parse_dimension, parse_number

T = TypeVar('T')

_INTEGER = re.compile(r'[+-]?[0-9]+')
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

BOOLEAN_VALUES = {
    'true': True,
    'false': False,
}


def parse_bool(text: str) -> bool:
    try:
        return BOOLEAN_VALUES[text]
    except KeyError:
        raise MalformedBoolean(text) from None


def parse_int(text: str) -> int:
    """Parse a signed 32-bit integer literal."""
    if not _INTEGER.fullmatch(text):
        raise MalformedNumber(text)
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise MalformedNumber(text, message="Integer out of range")
    return value


class AttributeReader:
    """Reads typed values out of a tag's attribute mapping."""

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None, tag: Optional[str] = None):
        """
        Initialize the reader.

        Args:
            attributes: Attribute mapping as produced by the markup tokenizer
            tag: Name of the tag the attributes belong to, used in errors
        """
        self.attributes = attributes or {}
        self.tag = tag

    def __contains__(self, name: str) -> bool:
        return name in self.attributes

    def get_str(self, name: str) -> Optional[str]:
        value = self.attributes.get(name)
        if value is None:
            return None
        # The tokenizer splits multi-valued attributes such as "class" into lists
        if isinstance(value, (list, tuple)):
            return ' '.join(value)
        return str(value)

    def get_bool(self, name: str) -> Optional[bool]:
        return self._read(name, parse_bool)

    def get_int(self, name: str) -> Optional[int]:
        return self._read(name, parse_int)

    def get_float(self, name: str) -> Optional[float]:
        return self._read(name, parse_number)

    def get_color(self, name: str) -> Optional[Color]:
        return self._read(name, parse_color)

    def get_dimension(self, name: str) -> Optional[Dimension]:
        return self._read(name, parse_dimension)

    def get_enum(self, name: str, table: Mapping[str, T]) -> Optional[T]:
        """
        Read a keyword attribute through a fixed string table.

        Raises:
            InvalidEnumValue: If the value is not a key of the table
        """
        raw = self.get_str(name)
        if raw is None:
            return None
        try:
            return table[raw]
        except KeyError:
            raise InvalidEnumValue(name, raw, attribute=name, tag=self.tag) from None

    def _read(self, name: str, parse: Callable[[str], T]) -> Optional[T]:
        raw = self.get_str(name)
        if raw is None:
            return None
        try:
            return parse(raw)
        except InvalidLiteral as e:
            e.attribute = name
            e.tag = e.tag or self.tag
            raise
