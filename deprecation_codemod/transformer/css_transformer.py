"""
CSS transform.

A small plugin pipeline in the shape of postcss: a ``CssProcessor`` parses a
stylesheet once, hands every style rule to each plugin, collects the edits
they return and prints the result.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..generator.source_printer import Edit, SourcePrinter
from ..nodes import CssRule
from ..parser.css_parser import CSSParser
from .deprecations import ALERT_CLASSES, Codemod
from .result import TransformResult, TransformStatus
from .rules.selector_rules import SelectorRules
from ..utils.logger import get_logger

logger = get_logger(__name__)


class CssPlugin(ABC):
    """A rule-rewriting pass for ``CssProcessor``."""

    name = "css-plugin"

    @abstractmethod
    def rule(self, rule: CssRule, source: str) -> List[Edit]:
        """Return the edits this plugin makes to ``rule``."""


class DeprecatedClassesPlugin(CssPlugin):
    """Replaces deprecated class selectors with their replacement selectors."""

    def __init__(self, codemod: Codemod = ALERT_CLASSES):
        self.codemod = codemod
        self.name = f"replace-deprecated-{codemod.name}"
        self.selector_rules = SelectorRules(codemod)

    def rule(self, rule: CssRule, source: str) -> List[Edit]:
        return self.selector_rules.find_edits(rule, source)


class CssProcessor:
    """Runs CSS plugins over a stylesheet."""

    def __init__(self, plugins: Sequence[CssPlugin], parser: Optional[CSSParser] = None):
        self.plugins = list(plugins)
        self.parser = parser or CSSParser()
        self.printer = SourcePrinter()

    def process(self, css: str, file_path: Optional[str] = None) -> TransformResult:
        """
        Parse ``css``, apply every plugin to every style rule and print.

        Raises:
            ParseError: The stylesheet contains a syntax error
        """
        sheet = self.parser.parse(css, file_path)

        edits: List[Edit] = []
        for rule in sheet.rules:
            for plugin in self.plugins:
                edits.extend(plugin.rule(rule, sheet.source))

        if not edits:
            return TransformResult.unchanged(css)

        output = self.printer.print(css, edits)
        logger.info(f"{file_path or '<source>'}: rewrote {len(edits)} deprecated selectors")
        return TransformResult(
            source=css,
            output=output,
            status=TransformStatus.CHANGED,
            edit_count=len(edits),
        )


def css_transform(
    css: str,
    codemod: Codemod = ALERT_CLASSES,
    file_path: Optional[str] = None,
) -> TransformResult:
    return CssProcessor([DeprecatedClassesPlugin(codemod)]).process(css, file_path)
