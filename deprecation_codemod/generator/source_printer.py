"""
Source printer.

Rewrites are expressed as edits against spans of the original text and
spliced in one pass. Text outside the edited spans is copied through
unchanged, so an untouched file prints byte-identical to its input.
"""

from dataclasses import dataclass
from typing import Iterable, List

from ..nodes import Span
from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Edit:
    """Replace ``source[span.start:span.end]`` with ``text``."""

    span: Span
    text: str


class SourcePrinter:
    """Applies a set of non-overlapping edits to a source string."""

    def print(self, source: str, edits: Iterable[Edit]) -> str:
        ordered: List[Edit] = sorted(edits, key=lambda e: (e.span.start, e.span.end))
        if not ordered:
            return source

        parts: List[str] = []
        cursor = 0
        for edit in ordered:
            if edit.span.start < cursor:
                raise ValueError(
                    f"Overlapping edits at offset {edit.span.start} (previous edit ends at {cursor})"
                )
            parts.append(source[cursor:edit.span.start])
            parts.append(edit.text)
            cursor = edit.span.end
        parts.append(source[cursor:])

        logger.debug(f"Applied {len(ordered)} edits")
        return "".join(parts)
