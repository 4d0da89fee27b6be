"""
Abstract parser interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..errors import ParseError


class ParserInterface(ABC):
    """Abstract interface for parsers."""

    @abstractmethod
    def parse(self, source_code: str, file_path: Optional[str] = None) -> Any:
        """
        Parse source code into the typed nodes the rules work on.

        Args:
            source_code: The source code to parse
            file_path: Reported in the ParseError when parsing fails

        Returns:
            Parsed tree

        Raises:
            ParseError: The source is not well-formed
        """

    def validate(self, source_code: str) -> bool:
        """
        Validate that source code is valid.

        Args:
            source_code: The source code to validate

        Returns:
            True if valid, False otherwise
        """
        try:
            self.parse(source_code)
            return True
        except ParseError:
            return False
