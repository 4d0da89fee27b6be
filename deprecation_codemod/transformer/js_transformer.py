"""
JS transform: migrates deprecated classes-object keys in JS/JSX sources.

Two passes share one parse:
- the classes-object pass rewrites `&.${xClasses.oldKey}` template slots;
  it does nothing unless the file imports the tracked export,
- the selector-literal pass rewrites string literals ending with the
  deprecated selector.
Edits are collected first and printed together, so a file is either fully
rewritten or returned untouched.
"""

from typing import Any, Dict, Optional, Union

from ..config import TransformOptions
from ..generator.source_printer import SourcePrinter
from ..parser.jsx_parser import JSXParser
from ..parser.parser_interface import ParserInterface
from .deprecations import ALERT_CLASSES, Codemod
from .result import TransformResult, TransformStatus
from .rules.import_rules import ImportRules
from .rules.literal_rules import LiteralRules
from .rules.template_rules import TemplateRules
from ..utils.logger import get_logger

logger = get_logger(__name__)

OptionsArg = Union[TransformOptions, Dict[str, Any], None]


class JSTransformer:
    """Transforms JS/JSX source text for one codemod."""

    def __init__(self, codemod: Codemod = ALERT_CLASSES, parser: Optional[ParserInterface] = None):
        self.codemod = codemod
        self.parser = parser or JSXParser()
        self.import_rules = ImportRules(codemod)
        self.template_rules = TemplateRules(codemod)
        self.literal_rules = LiteralRules(codemod)
        self.printer = SourcePrinter()

    def transform(
        self,
        source: str,
        options: OptionsArg = None,
        file_path: Optional[str] = None,
    ) -> TransformResult:
        """
        Rewrite deprecated class references in ``source``.

        Args:
            source: JS/JSX source text
            options: TransformOptions or the ``{"printOptions": {...}}`` mapping
            file_path: Used in error messages only

        Returns:
            TransformResult; ``status`` is UNCHANGED when nothing matched

        Raises:
            ParseError: The source is not valid JS/JSX
        """
        options = TransformOptions.coerce(options)
        module = self.parser.parse(source, file_path)

        edits = []
        symbols = self.import_rules.collect(module)
        if symbols.has_tracked():
            edits.extend(self.template_rules.find_edits(module, symbols))
        else:
            logger.debug(
                f"{file_path or '<source>'}: no import of {self.codemod.export_name}, "
                "skipping classes-object pass"
            )
        edits.extend(self.literal_rules.find_edits(module, options.print_options))

        if not edits:
            return TransformResult.unchanged(source)

        output = self.printer.print(source, edits)
        logger.info(f"{file_path or '<source>'}: rewrote {len(edits)} deprecated class references")
        return TransformResult(
            source=source,
            output=output,
            status=TransformStatus.CHANGED,
            edit_count=len(edits),
        )


def js_transform(
    source: str,
    options: OptionsArg = None,
    codemod: Codemod = ALERT_CLASSES,
) -> str:
    """Transform ``source`` and return the output text (the input if unchanged)."""
    return JSTransformer(codemod).transform(source, options).output
