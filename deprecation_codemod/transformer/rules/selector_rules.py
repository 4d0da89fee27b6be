"""
Rules for rewriting deprecated class tokens in CSS selectors.

Matching happens on tokenized ``ClassSelector`` components, never on the raw
selector string, so ``.Foo-message2`` is not mistaken for ``.Foo-message``.
Pseudo-class arguments (``:not(.Foo-message)``) are searched too.
"""

from dataclasses import dataclass
from typing import Iterator, List

from ...generator.source_printer import Edit
from ...nodes import (
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
    TypeSelector,
)
from ..deprecations import Codemod, DeprecationEntry
from ...utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class SelectorMatch:
    rule: CssRule
    selector: ClassSelector
    entry: DeprecationEntry

    @property
    def selector_text(self) -> str:
        return self.rule.selector_text

    @property
    def matched_token(self) -> str:
        return self.entry.old_selector_token


def iter_class_selectors(components: List[SelectorComponent]) -> Iterator[ClassSelector]:
    for component in components:
        if isinstance(component, ClassSelector):
            yield component
        elif isinstance(component, PseudoSelector):
            yield from iter_class_selectors(component.arguments)
        elif isinstance(
            component,
            (
                TypeSelector,
                IdSelector,
                AttributeSelector,
                NestingSelector,
                Combinator,
                SelectorSeparator,
                OtherToken,
            ),
        ):
            continue
        else:
            raise TypeError(f"Unhandled selector component: {component!r}")


class SelectorRules:
    """Class token lookup and replacement."""

    def __init__(self, codemod: Codemod):
        self.codemod = codemod

    def find_matches(self, rule: CssRule) -> List[SelectorMatch]:
        matches = []
        for selector in iter_class_selectors(rule.components):
            entry = self.codemod.deprecations.lookup_class_name(selector.name)
            if entry is not None:
                matches.append(SelectorMatch(rule=rule, selector=selector, entry=entry))
        return matches

    def find_edits(self, rule: CssRule, source: str) -> List[Edit]:
        edits = []
        for match in self.find_matches(rule):
            if match.selector.span.text(source) != match.matched_token:
                # escaped identifiers are left alone
                logger.debug(f"Skipping escaped class {match.selector.span.text(source)!r}")
                continue
            edits.append(Edit(match.selector.span, match.entry.new_selector_token))
        return edits
