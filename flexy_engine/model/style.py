"""
Style values used by the layout engine.

The integer values of the enums are the tags used by the host object model,
so they can be passed across the host boundary unchanged.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, NamedTuple, Tuple

from ..errors import InvalidHostValue


class PositionType(IntEnum):
    """Positioning scheme of a node."""
    RELATIVE = 0
    ABSOLUTE = 1


class FlexDirection(IntEnum):
    """Main axis of a flex container."""
    ROW = 0
    COLUMN = 1
    ROW_REVERSE = 2
    COLUMN_REVERSE = 3


class FlexWrap(IntEnum):
    """Line wrapping of a flex container."""
    NO_WRAP = 0
    WRAP = 1
    WRAP_REVERSE = 2


class FlexAlign(IntEnum):
    """Alignment values shared by align-items, align-content and justify-content."""
    INHERIT = 0
    STRETCH = 1
    START = 2
    CENTER = 3
    END = 4
    SPACE_BETWEEN = 5
    SPACE_AROUND = 6
    BASELINE = 7


class DimensionUnit(IntEnum):
    """Unit tag of a dimension."""
    AUTO = 0
    POINT = 1
    PERCENT = 2


class Vector2(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Dimension:
    """
    A sized value: auto, an absolute number of points or a percentage.

    Use the ``auto``, ``point`` and ``percent`` constructors rather than
    building instances by hand.
    """

    unit: DimensionUnit = DimensionUnit.AUTO
    value: float = 0.0

    @classmethod
    def auto(cls) -> 'Dimension':
        return cls(DimensionUnit.AUTO, 0.0)

    @classmethod
    def point(cls, value: float) -> 'Dimension':
        return cls(DimensionUnit.POINT, float(value))

    @classmethod
    def percent(cls, value: float) -> 'Dimension':
        return cls(DimensionUnit.PERCENT, float(value))

    @property
    def is_auto(self) -> bool:
        return self.unit == DimensionUnit.AUTO

    def to_host(self) -> Tuple[float, int]:
        """
        Convert to the ``(value, unit_tag)`` pair understood by the host.

        Returns:
            Tuple[float, int]: Value and integer unit tag
        """
        if self.is_auto:
            return 0.0, int(DimensionUnit.AUTO)
        return self.value, int(self.unit)

    @classmethod
    def from_host(cls, dim: Any) -> 'Dimension':
        """
        Decode a host dimension object.

        Args:
            dim: ``None`` (meaning auto) or an object with ``get_value()`` and
                ``get_unit()`` accessors

        Returns:
            Dimension: The decoded dimension
        """
        if dim is None:
            return AUTO
        raw_unit = dim.get_unit()
        try:
            unit = DimensionUnit(int(raw_unit))
        except (TypeError, ValueError):
            raise InvalidHostValue('get_unit', raw_unit) from None
        if unit == DimensionUnit.AUTO:
            return AUTO
        return cls(unit, float(dim.get_value()))

    def __str__(self) -> str:
        if self.unit == DimensionUnit.POINT:
            return f"{self.value:g}pt"
        if self.unit == DimensionUnit.PERCENT:
            return f"{self.value:g}%"
        return "auto"


AUTO = Dimension.auto()


def _host_enum(enum_cls, style: Any, getter: str):
    value = getattr(style, getter)()
    try:
        return enum_cls(int(value))
    except (TypeError, ValueError):
        raise InvalidHostValue(getter, value) from None


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self):
        for channel in (self.red, self.green, self.blue, self.alpha):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass(frozen=True)
class Edges:
    """Per-side values (margin, padding or position offsets)."""

    left: Any = 0.0
    right: Any = 0.0
    top: Any = 0.0
    bottom: Any = 0.0

    @classmethod
    def uniform(cls, value: Any) -> 'Edges':
        return cls(value, value, value, value)


@dataclass(frozen=True)
class Layout:
    """
    Complete style record of one node.

    A freshly constructed Layout holds the defaults for every field; there is
    no partially initialized state.
    """

    position_type: PositionType = PositionType.RELATIVE
    flex_direction: FlexDirection = FlexDirection.ROW
    flex_wrap: FlexWrap = FlexWrap.NO_WRAP
    align_items: FlexAlign = FlexAlign.STRETCH
    align_content: FlexAlign = FlexAlign.STRETCH
    justify_content: FlexAlign = FlexAlign.INHERIT
    width: Dimension = AUTO
    height: Dimension = AUTO
    inset: Edges = field(default_factory=lambda: Edges.uniform(AUTO))
    margin: Edges = field(default_factory=Edges)
    padding: Edges = field(default_factory=Edges)
    flex_grow: float = 0.0

    @classmethod
    def from_style(cls, style: Any) -> 'Layout':
        """
        Read a host style object into a Layout record.

        Args:
            style: Object implementing the host style accessors
                (see ``flexy_engine.host.HostStyle``)

        Returns:
            Layout: The style record

        Raises:
            InvalidHostValue: If a getter returns a tag outside its enum
        """
        return cls(
            position_type=_host_enum(PositionType, style, 'get_position_type'),
            flex_direction=_host_enum(FlexDirection, style, 'get_flex_direction'),
            flex_wrap=_host_enum(FlexWrap, style, 'get_flex_wrap'),
            align_items=_host_enum(FlexAlign, style, 'get_align_items'),
            align_content=_host_enum(FlexAlign, style, 'get_align_content'),
            justify_content=_host_enum(FlexAlign, style, 'get_justify_content'),
            width=Dimension.from_host(style.get_width()),
            height=Dimension.from_host(style.get_height()),
            inset=Edges(
                Dimension.from_host(style.get_left()),
                Dimension.from_host(style.get_right()),
                Dimension.from_host(style.get_top()),
                Dimension.from_host(style.get_bottom()),
            ),
            margin=Edges(
                float(style.get_margin_left()),
                float(style.get_margin_right()),
                float(style.get_margin_top()),
                float(style.get_margin_bottom()),
            ),
            padding=Edges(
                float(style.get_padding_left()),
                float(style.get_padding_right()),
                float(style.get_padding_top()),
                float(style.get_padding_bottom()),
            ),
            flex_grow=float(style.get_flex_grow()),
        )

    def to_dict(self) -> dict:
        """Plain representation used for debugging output."""
        return {
            'position': self.position_type.name.lower(),
            'flex-direction': self.flex_direction.name.lower(),
            'flex-wrap': self.flex_wrap.name.lower(),
            'align-items': self.align_items.name.lower(),
            'align-content': self.align_content.name.lower(),
            'justify-content': self.justify_content.name.lower(),
            'width': str(self.width),
            'height': str(self.height),
            'inset': [str(self.inset.left), str(self.inset.right),
                      str(self.inset.top), str(self.inset.bottom)],
            'margin': [self.margin.left, self.margin.right, self.margin.top, self.margin.bottom],
            'padding': [self.padding.left, self.padding.right, self.padding.top, self.padding.bottom],
            'flex-grow': self.flex_grow,
        }


@dataclass(frozen=True)
class Geometry:
    """Absolute position and size of a node, relative to the root origin."""

    x: float
    y: float
    width: float
    height: float

    @property
    def position(self) -> Vector2:
        return Vector2(self.x, self.y)

    @property
    def size(self) -> Vector2:
        return Vector2(self.width, self.height)
