"""
Typed node variants the rules match on.

The parsers lower esprima / tinycss2 output into these classes so that the
rules dispatch on node kinds instead of poking at ``type`` strings. Only the
kinds a rule can act on get a variant; everything else is represented by
``OtherContext`` / ``OtherToken`` and explicitly ignored.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, end)`` in the original source."""

    start: int
    end: int

    def text(self, source: str) -> str:
        return source[self.start:self.end]


# ---------------------------------------------------------------------------
# JavaScript
# ---------------------------------------------------------------------------

@dataclass
class ImportSpecifier:
    """``imported as local`` inside ``import { ... }``."""

    imported_name: str
    local_name: str


@dataclass
class ImportDeclaration:
    source_module: str
    specifiers: List[ImportSpecifier]


@dataclass
class TemplateChunk:
    """A quasi: literal text between the interpolations of a template."""

    raw: str


@dataclass
class TemplateLiteral:
    chunks: List[TemplateChunk]


@dataclass
class TemplateSlot:
    """Context of an expression sitting directly in ``${...}``."""

    template: TemplateLiteral
    index: int

    @property
    def preceding_chunk(self) -> TemplateChunk:
        return self.template.chunks[self.index]


@dataclass
class OtherContext:
    """Any other syntactic position; ``parent_type`` is the esprima type."""

    parent_type: str


ExpressionContext = Union[TemplateSlot, OtherContext]


@dataclass
class MemberExpression:
    """
    ``object.property``.

    ``object_name`` is set only when the object is a plain identifier and
    ``property_name`` only for non-computed access.
    """

    object_name: Optional[str]
    property_name: Optional[str]
    span: Span
    context: ExpressionContext


@dataclass
class StringLiteral:
    value: str
    raw: str
    span: Span
    in_jsx_attribute: bool = False


JsNode = Union[ImportDeclaration, TemplateLiteral, MemberExpression, StringLiteral]


@dataclass
class JsModule:
    """Everything the JS rules need from one parsed file."""

    source: str
    imports: List[ImportDeclaration] = field(default_factory=list)
    member_expressions: List[MemberExpression] = field(default_factory=list)
    string_literals: List[StringLiteral] = field(default_factory=list)


# ---------------------------------------------------------------------------
# CSS
# ---------------------------------------------------------------------------

@dataclass
class TypeSelector:
    name: str
    span: Span


@dataclass
class ClassSelector:
    """``.name``; the span covers the dot and the identifier."""

    name: str
    span: Span


@dataclass
class IdSelector:
    name: str
    span: Span


@dataclass
class PseudoSelector:
    """``:hover``, ``::before`` or ``:not(...)`` with its parsed arguments."""

    name: str
    span: Span
    arguments: List["SelectorComponent"] = field(default_factory=list)


@dataclass
class AttributeSelector:
    span: Span


@dataclass
class NestingSelector:
    span: Span


@dataclass
class Combinator:
    """Descendant (whitespace), ``>``, ``+`` or ``~``."""

    value: str
    span: Span


@dataclass
class SelectorSeparator:
    span: Span


@dataclass
class OtherToken:
    span: Span


SelectorComponent = Union[
    TypeSelector,
    ClassSelector,
    IdSelector,
    PseudoSelector,
    AttributeSelector,
    NestingSelector,
    Combinator,
    SelectorSeparator,
    OtherToken,
]


@dataclass
class CssRule:
    """A style rule: its selector text and the tokenized selector."""

    selector_text: str
    components: List[SelectorComponent]
    line: int
    column: int
    at_rules: Tuple[str, ...] = ()


@dataclass
class Stylesheet:
    source: str
    rules: List[CssRule] = field(default_factory=list)
