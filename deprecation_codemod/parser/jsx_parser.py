"""
JSX parser using esprima.

Parses a module with ranges enabled and lowers the esprima tree into the
typed nodes in ``nodes``:
- top-level import declarations,
- every member expression together with its syntactic context,
- every string literal.
Nothing else is kept; the rules never need it.
"""

from typing import Any, List, Optional, Tuple

import esprima
from esprima.error_handler import Error as EsprimaError

from .parser_interface import ParserInterface
from ..errors import ParseError
from ..nodes import (
    ExpressionContext,
    ImportDeclaration,
    ImportSpecifier,
    JsModule,
    MemberExpression,
    OtherContext,
    Span,
    StringLiteral,
    TemplateChunk,
    TemplateLiteral,
    TemplateSlot,
)
from ..utils.logger import get_logger

logger = get_logger(__name__)

SKIP_KEYS = {"type", "range", "loc"}


def _span(node: Any) -> Span:
    start, end = node.range
    return Span(start, end)


def _template_raw(quasi: Any) -> str:
    value = quasi.value
    if isinstance(value, dict):
        return value.get("raw") or ""
    return getattr(value, "raw", None) or ""


def _identifier_name(node: Any) -> Optional[str]:
    if node is not None and getattr(node, "type", None) == "Identifier":
        return node.name
    return None


class JSXParser(ParserInterface):
    """Parses JS/JSX modules into a ``JsModule``."""

    def parse(self, source_code: str, file_path: Optional[str] = None) -> JsModule:
        try:
            program = esprima.parseModule(source_code, jsx=True, range=True)
        except EsprimaError as e:
            logger.debug(f"JSX parsing failed for {file_path or '<source>'}: {e}")
            raise ParseError(str(e), file_path) from e

        module = JsModule(source=source_code)

        for statement in program.body:
            if statement.type == "ImportDeclaration":
                module.imports.append(self._lower_import(statement))

        self._walk(program, OtherContext("Program"), module)
        return module

    # -------------------------------------------------------------------------
    # Lowering
    # -------------------------------------------------------------------------
    def _lower_import(self, node: Any) -> ImportDeclaration:
        specifiers = []
        for specifier in node.specifiers:
            # default and namespace imports never bind a named export
            if specifier.type != "ImportSpecifier":
                continue
            specifiers.append(
                ImportSpecifier(
                    imported_name=specifier.imported.name,
                    local_name=specifier.local.name,
                )
            )
        return ImportDeclaration(
            source_module=node.source.value,
            specifiers=specifiers,
        )

    def _walk(self, root: Any, root_context: ExpressionContext, module: JsModule) -> None:
        """Pre-order walk using an explicit stack of (node, context) pairs."""
        stack: List[Tuple[Any, ExpressionContext]] = [(root, root_context)]

        while stack:
            node, context = stack.pop()
            if isinstance(node, list):
                stack.extend((item, context) for item in reversed(node))
                continue

            node_type = getattr(node, "type", None)
            if not isinstance(node_type, str) or not hasattr(node, "__dict__"):
                continue

            template = None
            if node_type == "TemplateLiteral":
                template = TemplateLiteral(
                    chunks=[TemplateChunk(raw=_template_raw(q)) for q in node.quasis]
                )
            elif node_type == "MemberExpression":
                module.member_expressions.append(
                    MemberExpression(
                        object_name=_identifier_name(node.object),
                        property_name=None if node.computed else _identifier_name(node.property),
                        span=_span(node),
                        context=context,
                    )
                )
            elif node_type == "Literal" and isinstance(node.value, str):
                module.string_literals.append(
                    StringLiteral(
                        value=node.value,
                        raw=node.raw,
                        span=_span(node),
                        in_jsx_attribute=(
                            isinstance(context, OtherContext)
                            and context.parent_type == "JSXAttribute"
                        ),
                    )
                )

            children: List[Tuple[Any, ExpressionContext]] = []
            for key, value in node.__dict__.items():
                if key in SKIP_KEYS or value is None:
                    continue
                if template is not None and key == "expressions":
                    children.extend(
                        (expression, TemplateSlot(template, index))
                        for index, expression in enumerate(value)
                    )
                    continue
                children.append((value, OtherContext(node_type)))
            stack.extend(reversed(children))
