"""
Loading of named markup templates from the templates directory.
"""

import logging
import os
from typing import Optional

from .errors import TemplateError, TemplateNotFound
from .model.elements import Element
from .parser.markup_parser import MarkupParser

logger = logging.getLogger(__name__)


class TemplateLoader:
    """Resolves template names to files and parses them."""

    def __init__(self, directory: str, extension: str = '.html',
                 parser: Optional[MarkupParser] = None):
        """
        Initialize the template loader.

        Args:
            directory: Directory holding the template files
            extension: File extension appended to template names
            parser: Markup parser to use (a default one if omitted)
        """
        self.directory = os.path.expanduser(directory)
        self.extension = extension
        self.parser = parser or MarkupParser()

    def path_for(self, name: str) -> str:
        """
        Get the file path of a template.

        Args:
            name: Template name, without extension

        Returns:
            str: Absolute path of the template file

        Raises:
            TemplateError: If the name is empty or escapes the templates directory
        """
        if not name or name != os.path.basename(name) or name in ('.', '..'):
            raise TemplateError(f"Invalid template name: {name!r}")
        filename = name if name.endswith(self.extension) else f"{name}{self.extension}"
        return os.path.abspath(os.path.join(self.directory, filename))

    def load(self, name: str) -> Element:
        """
        Load and parse a named template.

        Args:
            name: Template name

        Returns:
            Element: Root of the parsed element tree

        Raises:
            TemplateNotFound: If no such template file exists
            TemplateError: If the file cannot be read
            ParseError: If the template markup is invalid
        """
        path = self.path_for(name)
        if not os.path.isfile(path):
            raise TemplateNotFound(name, path)

        try:
            with open(path, 'r', encoding='utf-8') as f:
                markup = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateError(f"Cannot read template '{name}': {e}") from e

        logger.debug(f"Loaded template '{name}' from {path}")
        return self.parser.parse(markup)
