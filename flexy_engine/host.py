"""
Capabilities the engine consumes from the host UI object model.

The bridge code only ever calls the operations declared here. Host objects do
not have to inherit from these classes; anything providing the same methods
works.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Tuple

from .model.style import Vector2

WidgetHandle = Any


class HostDimension(ABC):
    """A host dimension value: a float and a unit tag (0 auto, 1 point, 2 percent)."""

    @abstractmethod
    def get_value(self) -> float:
        ...

    @abstractmethod
    def get_unit(self) -> int:
        ...


class HostStyle(ABC):
    """Read accessors of a host style object."""

    @abstractmethod
    def get_position_type(self) -> int: ...

    @abstractmethod
    def get_flex_direction(self) -> int: ...

    @abstractmethod
    def get_flex_wrap(self) -> int: ...

    @abstractmethod
    def get_align_items(self) -> int: ...

    @abstractmethod
    def get_align_content(self) -> int: ...

    @abstractmethod
    def get_justify_content(self) -> int: ...

    # Dimension getters return None for auto
    @abstractmethod
    def get_width(self) -> Optional[HostDimension]: ...

    @abstractmethod
    def get_height(self) -> Optional[HostDimension]: ...

    @abstractmethod
    def get_left(self) -> Optional[HostDimension]: ...

    @abstractmethod
    def get_right(self) -> Optional[HostDimension]: ...

    @abstractmethod
    def get_top(self) -> Optional[HostDimension]: ...

    @abstractmethod
    def get_bottom(self) -> Optional[HostDimension]: ...

    @abstractmethod
    def get_margin_left(self) -> float: ...

    @abstractmethod
    def get_margin_right(self) -> float: ...

    @abstractmethod
    def get_margin_top(self) -> float: ...

    @abstractmethod
    def get_margin_bottom(self) -> float: ...

    @abstractmethod
    def get_padding_left(self) -> float: ...

    @abstractmethod
    def get_padding_right(self) -> float: ...

    @abstractmethod
    def get_padding_top(self) -> float: ...

    @abstractmethod
    def get_padding_bottom(self) -> float: ...

    @abstractmethod
    def get_flex_grow(self) -> float: ...


class HostElement(ABC):
    """A node of a live host UI tree."""

    @abstractmethod
    def get_layout(self) -> HostStyle:
        """Return the node's style object."""

    @abstractmethod
    def get_children(self) -> Sequence['HostElement']:
        """Return the child nodes in order."""

    @abstractmethod
    def render(self, position: Vector2, size: Vector2) -> WidgetHandle:
        """Materialize the node as a widget at an absolute position and size."""


class HostWidget(ABC):
    """A host widget that can report its size and adopt child widgets."""

    @abstractmethod
    def get_size(self) -> Tuple[float, float]:
        ...

    @abstractmethod
    def add_child_widget(self, widget: WidgetHandle) -> None:
        ...


class WidgetFactory(ABC):
    """
    Creates host widgets for elements parsed from markup.

    Markup elements are plain values and cannot render themselves, so the host
    supplies one factory method per element kind.
    """

    @abstractmethod
    def create_box(self, element, position: Vector2, size: Vector2) -> WidgetHandle:
        ...

    @abstractmethod
    def create_text(self, element, position: Vector2, size: Vector2) -> WidgetHandle:
        ...

    @abstractmethod
    def create_image(self, element, position: Vector2, size: Vector2) -> WidgetHandle:
        ...
