"""Outcome of running one transform over one source."""

from dataclasses import dataclass
from enum import Enum


class TransformStatus(str, Enum):
    CHANGED = "changed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class TransformResult:
    source: str
    output: str
    status: TransformStatus
    edit_count: int = 0

    @property
    def changed(self) -> bool:
        return self.status is TransformStatus.CHANGED

    @property
    def css(self) -> str:
        """postcss-style accessor for the output text."""
        return self.output

    @classmethod
    def unchanged(cls, source: str) -> "TransformResult":
        return cls(source=source, output=source, status=TransformStatus.UNCHANGED)
