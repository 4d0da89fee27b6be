"""Parser module for JS/JSX and CSS sources."""

from .parser_interface import ParserInterface
from .jsx_parser import JSXParser
from .css_parser import CSSParser

__all__ = ["ParserInterface", "JSXParser", "CSSParser"]
