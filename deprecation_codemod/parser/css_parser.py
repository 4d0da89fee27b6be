"""
CSS parser using tinycss2.

Style rules are collected from the top level, from rule-list at-rules
(``@media``, ``@supports``, ...) and from nested style rules. Each selector
is tokenized into typed components carrying spans in the original text, so
rewrites can be spliced in without reserializing anything else.
"""

import re
from typing import Any, List, Optional, Tuple

import tinycss2
from tinycss2 import ast as css_ast

from .parser_interface import ParserInterface
from ..errors import ParseError
from ..nodes import (
    AttributeSelector,
    ClassSelector,
    Combinator,
    CssRule,
    IdSelector,
    NestingSelector,
    OtherToken,
    PseudoSelector,
    SelectorComponent,
    SelectorSeparator,
    Span,
    Stylesheet,
    TypeSelector,
)
from ..utils.logger import get_logger

logger = get_logger(__name__)

# tinycss2 normalizes all of these to "\n" before counting lines
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n|\f")

RULE_LIST_AT_RULES = {"media", "supports", "document", "layer", "container", "scope"}
COMBINATOR_CHARS = {">", "+", "~"}


class LineIndex:
    """Maps tinycss2 (line, column) positions to offsets in the raw text."""

    def __init__(self, source: str):
        self._line_starts = [0] + [m.end() for m in LINE_BREAK_RE.finditer(source)]

    def offset(self, node: Any) -> int:
        return self._line_starts[node.source_line - 1] + node.source_column - 1


class CSSParser(ParserInterface):
    """Parses a stylesheet into a ``Stylesheet`` of tokenized rules."""

    def parse(self, source_code: str, file_path: Optional[str] = None) -> Stylesheet:
        nodes = tinycss2.parse_stylesheet(
            source_code, skip_comments=False, skip_whitespace=False
        )
        index = LineIndex(source_code)
        sheet = Stylesheet(source=source_code)
        self._collect_rules(nodes, index, sheet, (), file_path)
        logger.debug(f"Parsed {len(sheet.rules)} style rules from {file_path or '<source>'}")
        return sheet

    # -------------------------------------------------------------------------
    # Rules
    # -------------------------------------------------------------------------
    def _collect_rules(
        self,
        nodes: List[Any],
        index: LineIndex,
        sheet: Stylesheet,
        at_rules: Tuple[str, ...],
        file_path: Optional[str],
    ) -> None:
        for node in nodes:
            if isinstance(node, css_ast.ParseError):
                raise ParseError(
                    f"{node.message} (line {node.source_line}, column {node.source_column})",
                    file_path,
                )

            if isinstance(node, css_ast.QualifiedRule):
                sheet.rules.append(
                    CssRule(
                        selector_text=tinycss2.serialize(node.prelude).strip(),
                        components=self.tokenize_selector(node.prelude, index),
                        line=node.source_line,
                        column=node.source_column,
                        at_rules=at_rules,
                    )
                )
                if any(isinstance(t, css_ast.CurlyBracketsBlock) for t in node.content):
                    nested = tinycss2.parse_blocks_contents(
                        node.content, skip_comments=False, skip_whitespace=False
                    )
                    self._collect_rules(nested, index, sheet, at_rules, file_path)

            elif isinstance(node, css_ast.AtRule):
                if node.content is None or node.lower_at_keyword not in RULE_LIST_AT_RULES:
                    continue
                children = tinycss2.parse_rule_list(
                    node.content, skip_comments=False, skip_whitespace=False
                )
                self._collect_rules(
                    children, index, sheet, at_rules + (node.lower_at_keyword,), file_path
                )

    # -------------------------------------------------------------------------
    # Selectors
    # -------------------------------------------------------------------------
    def tokenize_selector(self, tokens: List[Any], index: LineIndex) -> List[SelectorComponent]:
        """Split selector tokens into simple selectors and combinators."""
        components: List[SelectorComponent] = []
        position = 0

        while position < len(tokens):
            token = tokens[position]
            start = index.offset(token)
            following = tokens[position + 1] if position + 1 < len(tokens) else None

            if isinstance(token, css_ast.LiteralToken) and token.value == ".":
                if isinstance(following, css_ast.IdentToken) and index.offset(following) == start + 1:
                    end = start + 1 + len(following.serialize())
                    components.append(ClassSelector(following.value, Span(start, end)))
                    position += 2
                    continue
                components.append(OtherToken(Span(start, start + 1)))

            elif isinstance(token, css_ast.LiteralToken) and token.value == ":":
                consumed = self._pseudo(tokens, position, index, components)
                position += consumed
                continue

            elif isinstance(token, css_ast.LiteralToken) and token.value == "&":
                components.append(NestingSelector(Span(start, start + 1)))

            elif isinstance(token, css_ast.LiteralToken) and token.value == "*":
                components.append(TypeSelector("*", Span(start, start + 1)))

            elif isinstance(token, css_ast.LiteralToken) and token.value in COMBINATOR_CHARS:
                components.append(Combinator(token.value, Span(start, start + 1)))

            elif isinstance(token, css_ast.LiteralToken) and token.value == ",":
                components.append(SelectorSeparator(Span(start, start + 1)))

            elif isinstance(token, css_ast.WhitespaceToken):
                components.append(Combinator(" ", Span(start, start + len(token.value))))

            elif isinstance(token, css_ast.IdentToken):
                components.append(TypeSelector(token.value, _token_span(token, start)))

            elif isinstance(token, css_ast.HashToken):
                components.append(IdSelector(token.value, _token_span(token, start)))

            elif isinstance(token, css_ast.SquareBracketsBlock):
                components.append(AttributeSelector(_token_span(token, start)))

            else:
                components.append(OtherToken(_token_span(token, start)))

            position += 1

        return components

    def _pseudo(
        self,
        tokens: List[Any],
        position: int,
        index: LineIndex,
        components: List[SelectorComponent],
    ) -> int:
        """Consume ``:name``, ``::name`` or ``:name(...)``; returns tokens used."""
        start = index.offset(tokens[position])
        cursor = position + 1
        if cursor < len(tokens) and _is_literal(tokens[cursor], ":"):
            cursor += 1

        target = tokens[cursor] if cursor < len(tokens) else None
        if isinstance(target, css_ast.IdentToken):
            end = index.offset(target) + len(target.serialize())
            components.append(PseudoSelector(target.value, Span(start, end)))
            return cursor + 1 - position

        if isinstance(target, css_ast.FunctionBlock):
            end = index.offset(target) + len(target.serialize())
            components.append(
                PseudoSelector(
                    target.name,
                    Span(start, end),
                    arguments=self.tokenize_selector(target.arguments, index),
                )
            )
            return cursor + 1 - position

        components.append(OtherToken(Span(start, start + 1)))
        return 1


def _is_literal(token: Any, value: str) -> bool:
    return isinstance(token, css_ast.LiteralToken) and token.value == value


def _token_span(token: Any, start: int) -> Span:
    return Span(start, start + len(token.serialize()))
