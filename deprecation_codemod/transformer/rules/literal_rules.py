"""
Rules for rewriting deprecated selectors spelled out in string literals.

    sx={{ '&.MuiAlert-standardSuccess': { ... } }}

The literal must end with the nesting prefix plus the deprecated class, so a
longer class name (``&.MuiAlert-standardSuccessDark``) never matches.
These literals do not reference the classes object, so no import is needed.
"""

from typing import List, Optional

from ...config import PrintOptions
from ...generator.source_printer import Edit
from ...nodes import JsModule, Span, StringLiteral
from ..deprecations import Codemod
from ...utils.logger import get_logger
from ...utils.string_utils import detect_quote, quote_string, replace_suffix, requote

logger = get_logger(__name__)


class LiteralRules:
    """Selector string literal rewrite."""

    def __init__(self, codemod: Codemod):
        self.codemod = codemod

    def find_edits(self, module: JsModule, print_options: PrintOptions) -> List[Edit]:
        edits = []
        for literal in module.string_literals:
            new_value = self.rewrite_value(literal.value)
            if new_value is None:
                continue

            span = self._literal_span(module.source, literal)
            if span is None:
                continue

            text = self._rewrite_raw(literal, print_options)
            if text is None:
                if literal.in_jsx_attribute:
                    logger.debug(f"Skipping attribute {literal.raw}: selector is not spelled literally")
                    continue
                text = quote_string(new_value, self._quote(literal, print_options))
            edits.append(Edit(span, text))
        return edits

    def rewrite_value(self, value: str) -> Optional[str]:
        prefix = self.codemod.nesting_prefix
        for entry in self.codemod.deprecations:
            rewritten = replace_suffix(
                value, prefix + entry.old_selector_token, prefix + entry.new_selector_token
            )
            if rewritten is not None:
                return rewritten
        return None

    def _quote(self, literal: StringLiteral, print_options: PrintOptions) -> str:
        # JSX attribute strings have no escapes, so their quote never changes
        if print_options.quote_char and not literal.in_jsx_attribute:
            return print_options.quote_char
        return detect_quote(literal.raw)

    def _rewrite_raw(self, literal: StringLiteral, print_options: PrintOptions) -> Optional[str]:
        """Rewrite the literal as written, keeping its escape sequences."""
        body = literal.raw[1:-1]
        new_body = self.rewrite_value(body)
        if new_body is None:
            return None

        quote = self._quote(literal, print_options)
        if quote == detect_quote(literal.raw):
            return f"{quote}{new_body}{quote}"
        return requote(new_body, quote)

    def _literal_span(self, source: str, literal: StringLiteral) -> Optional[Span]:
        text = literal.span.text(source)
        if text == literal.raw:
            return literal.span
        offset = text.find(literal.raw)
        if offset < 0:
            logger.debug(f"Skipping literal {literal.raw}: not found at its reported range")
            return None
        start = literal.span.start + offset
        return Span(start, start + len(literal.raw))
