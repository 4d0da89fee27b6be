"""
Rules for rewriting deprecated class keys interpolated into template literals.

Matches the nested-selector idiom

    `&.${alertClasses.standardSuccess}`

and turns the marker plus the interpolation into plain selector text:

    `&.MuiAlert-standard.MuiAlert-colorSuccess`

A site is rewritten only when every check passes:
- the object is a tracked import binding,
- the member expression sits directly in a ``${...}`` slot,
- the template text before the slot ends with the marker,
- the property is a deprecated class key.
Failing sites are skipped one by one; scanning always continues.
"""

from dataclasses import dataclass
from typing import List, Optional

from ...generator.source_printer import Edit
from ...nodes import JsModule, MemberExpression, OtherContext, Span, TemplateSlot
from ..deprecations import Codemod, DeprecationEntry
from .import_rules import SymbolTable
from ...utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Match:
    """A rewrite site inside a template literal."""

    member: MemberExpression
    slot: TemplateSlot
    preceding_text: str
    entry: DeprecationEntry

    @property
    def matched_key(self) -> str:
        return self.entry.old_class_key


class TemplateRules:
    """Parent type check, template element check and class key lookup."""

    def __init__(self, codemod: Codemod):
        self.codemod = codemod

    def find_matches(self, module: JsModule, symbols: SymbolTable) -> List[Match]:
        matches = []
        for member in module.member_expressions:
            if not member.object_name or not symbols.is_tracked(member.object_name):
                continue
            match = self._match(member)
            if match is not None:
                matches.append(match)
        return matches

    def find_edits(self, module: JsModule, symbols: SymbolTable) -> List[Edit]:
        edits = []
        for match in self.find_matches(module, symbols):
            span = self._slot_span(module.source, match.member.span)
            if span is None:
                logger.debug(
                    f"Skipping {match.member.object_name}.{match.matched_key}: "
                    "interpolation is not a plain ${...} slot"
                )
                continue
            replacement = self.codemod.nesting_prefix + match.entry.new_selector_token
            edits.append(Edit(span, replacement))
        return edits

    # -------------------------------------------------------------------------
    def _match(self, member: MemberExpression) -> Optional[Match]:
        context = member.context
        if isinstance(context, OtherContext):
            logger.debug(f"Skipping {member.object_name}.{member.property_name} inside {context.parent_type}")
            return None

        if not isinstance(context, TemplateSlot):
            return None

        preceding_text = context.preceding_chunk.raw
        if not preceding_text.endswith(self.codemod.marker):
            return None

        if member.property_name is None:
            return None
        entry = self.codemod.deprecations.lookup_class_key(member.property_name)
        if entry is None:
            return None

        return Match(member=member, slot=context, preceding_text=preceding_text, entry=entry)

    def _slot_span(self, source: str, member_span: Span) -> Optional[Span]:
        """
        Span from the start of the marker to the closing brace of the slot.

        Returns None when anything other than whitespace separates the member
        expression from ``${`` and ``}`` (parentheses, comments).
        """
        before = member_span.start - 1
        while before >= 0 and source[before].isspace():
            before -= 1
        if before < 1 or source[before - 1:before + 1] != "${":
            return None
        dollar = before - 1

        after = member_span.end
        while after < len(source) and source[after].isspace():
            after += 1
        if after >= len(source) or source[after] != "}":
            return None

        start = dollar - len(self.codemod.marker)
        if source[start:dollar] != self.codemod.marker:
            return None
        return Span(start, after + 1)
