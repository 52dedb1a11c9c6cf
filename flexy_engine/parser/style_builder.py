"""
Builds Layout records from markup attributes.
"""

from typing import Any, Mapping, Union

from ..model.style import Edges, FlexAlign, FlexDirection, FlexWrap, Layout, PositionType
from .attributes import AttributeReader

POSITION_TYPES = {
    'relative': PositionType.RELATIVE,
    'absolute': PositionType.ABSOLUTE,
}

FLEX_WRAPS = {
    'no-wrap': FlexWrap.NO_WRAP,
    'wrap': FlexWrap.WRAP,
    'wrap-reverse': FlexWrap.WRAP_REVERSE,
}

FLEX_DIRECTIONS = {
    'row': FlexDirection.ROW,
    'column': FlexDirection.COLUMN,
    'row-reverse': FlexDirection.ROW_REVERSE,
    'column-reverse': FlexDirection.COLUMN_REVERSE,
}

FLEX_ALIGNS = {
    'inherit': FlexAlign.INHERIT,
    'stretch': FlexAlign.STRETCH,
    'start': FlexAlign.START,
    'center': FlexAlign.CENTER,
    'end': FlexAlign.END,
    'space-between': FlexAlign.SPACE_BETWEEN,
    'space-around': FlexAlign.SPACE_AROUND,
    'baseline': FlexAlign.BASELINE,
}

# attribute name -> (Layout field, string table)
KEYWORD_ATTRIBUTES = {
    'position': ('position_type', POSITION_TYPES),
    'flex-wrap': ('flex_wrap', FLEX_WRAPS),
    'flex-direction': ('flex_direction', FLEX_DIRECTIONS),
    'align-items': ('align_items', FLEX_ALIGNS),
    'align-content': ('align_content', FLEX_ALIGNS),
    'justify-content': ('justify_content', FLEX_ALIGNS),
}

DIMENSION_ATTRIBUTES = {
    'width': 'width',
    'height': 'height',
}

INSET_ATTRIBUTES = ('left', 'right', 'top', 'bottom')

# Every attribute name the builder understands
LAYOUT_ATTRIBUTES = frozenset(
    list(KEYWORD_ATTRIBUTES) + list(DIMENSION_ATTRIBUTES) + list(INSET_ATTRIBUTES)
    + ['padding', 'margin', 'flex-grow']
)


def build_layout(attributes: Union[AttributeReader, Mapping[str, Any]]) -> Layout:
    """
    Fold the layout attributes present on a tag over the Layout defaults.

    Args:
        attributes: Attribute mapping or a reader over one

    Returns:
        Layout: Fully populated style record

    Raises:
        InvalidLiteral: On the first malformed attribute value
    """
    reader = attributes if isinstance(attributes, AttributeReader) else AttributeReader(attributes)
    changes = {}

    for name, (field_name, table) in KEYWORD_ATTRIBUTES.items():
        value = reader.get_enum(name, table)
        if value is not None:
            changes[field_name] = value

    for name, field_name in DIMENSION_ATTRIBUTES.items():
        value = reader.get_dimension(name)
        if value is not None:
            changes[field_name] = value

    if any(name in reader for name in INSET_ATTRIBUTES):
        defaults = Layout().inset
        changes['inset'] = Edges(*(
            reader.get_dimension(name) or getattr(defaults, name) for name in INSET_ATTRIBUTES
        ))

    padding = reader.get_float('padding')
    if padding is not None:
        changes['padding'] = Edges.uniform(padding)

    margin = reader.get_float('margin')
    if margin is not None:
        changes['margin'] = Edges.uniform(margin)

    flex_grow = reader.get_float('flex-grow')
    if flex_grow is not None:
        changes['flex_grow'] = flex_grow

    return Layout(**changes)
