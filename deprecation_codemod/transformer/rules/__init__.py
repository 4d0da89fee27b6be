"""Matching rules for the JS and CSS transforms."""

from .import_rules import ImportBinding, ImportRules, SymbolTable
from .template_rules import Match, TemplateRules
from .literal_rules import LiteralRules
from .selector_rules import SelectorMatch, SelectorRules

__all__ = [
    "ImportBinding",
    "ImportRules",
    "SymbolTable",
    "Match",
    "TemplateRules",
    "LiteralRules",
    "SelectorMatch",
    "SelectorRules",
]
