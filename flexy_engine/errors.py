"""
Exception hierarchy for the Flexy engine.

Every failure in the parse / build / solve / render pipeline is raised as a
subclass of FlexyError and aborts the whole call.
"""

from typing import Optional


class FlexyError(Exception):
    """Base class for all errors raised by the engine."""


class ParseError(FlexyError):
    """Markup could not be turned into an element tree."""


class EmptyDocument(ParseError):
    """The markup document has no content node."""

    def __init__(self, message: str = "Markup document has no content node"):
        super().__init__(message)


class MultipleRoots(ParseError):
    """The markup document has more than one top-level content node."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Markup document must have exactly one root node, found {count}")


class UnexpectedTag(ParseError):
    """A tag outside of the supported vocabulary was found."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Unexpected tag: <{tag}>")


class SelfClosingTag(ParseError):
    """A non-void tag was written as ``<tag/>``, which html5lib leaves open."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(
            f"Self-closing <{tag}/> is not supported by the html5lib tree builder; "
            f"write <{tag}></{tag}> instead"
        )


class InvalidLiteral(ParseError):
    """
    A literal (dimension, color, number, boolean or enum value) is malformed.

    Attributes:
        literal: The offending text
        attribute: Name of the attribute the literal was read from, if any
        tag: Name of the tag carrying the attribute, if any
    """

    reason = "Invalid literal"

    def __init__(self, literal: Optional[str] = None, message: Optional[str] = None,
                 attribute: Optional[str] = None, tag: Optional[str] = None):
        self.literal = literal
        self.attribute = attribute
        self.tag = tag
        self.message = message or self.reason
        super().__init__(self.message)

    def __str__(self) -> str:
        text = self.message
        if self.literal is not None:
            text = f"{text}: {self.literal!r}"
        if self.attribute:
            text = f"{text} (attribute '{self.attribute}'"
            text += f" on <{self.tag}>)" if self.tag else ")"
        elif self.tag:
            text = f"{text} (in <{self.tag}>)"
        return text


LiteralError = InvalidLiteral


class MissingUnit(InvalidLiteral):
    reason = "Missing unit"


class MalformedNumber(InvalidLiteral):
    reason = "Malformed number"


class MalformedBoolean(InvalidLiteral):
    reason = "Malformed boolean"


class InvalidEnumValue(InvalidLiteral):
    """A keyword attribute holds a value outside its fixed table."""

    reason = "Invalid enum value"

    def __init__(self, field: str, literal: Optional[str] = None, **kwargs):
        self.field = field
        kwargs.setdefault("message", f"Invalid {field} value")
        super().__init__(literal, **kwargs)


class InvalidColor(InvalidLiteral):
    reason = "Invalid color literal"


class MissingPrefix(InvalidColor):
    reason = "Color literal must start with '#'"


class WrongLength(InvalidColor):
    reason = "Only full 6-digit hex color literals are allowed"


class MalformedDigits(InvalidColor):
    reason = "Malformed hex digits in color literal"


class TemplateError(FlexyError):
    """A named template could not be loaded."""


class TemplateNotFound(TemplateError, FileNotFoundError):
    """No template file exists under the requested name."""

    def __init__(self, name: str, path: str):
        self.name = name
        self.path = path
        super().__init__(f"Template '{name}' not found at {path}")


class InvalidHostValue(FlexyError):
    """A host style getter returned a tag outside its enum."""

    def __init__(self, getter: str, value):
        self.getter = getter
        self.value = value
        super().__init__(f"Host style {getter}() returned an unknown value: {value!r}")


class LayoutSolverError(FlexyError):
    """The layout engine failed; no partial layout is produced."""


class RenderError(FlexyError):
    """An element could not be materialized as a widget."""
