"""Tests for lowering esprima / tinycss2 output into typed nodes."""

from deprecation_codemod.nodes import (
    AttributeSelector,
    ClassSelector,
    Combinator,
    IdSelector,
    NestingSelector,
    OtherContext,
    PseudoSelector,
    SelectorSeparator,
    TemplateSlot,
    TypeSelector,
)
from deprecation_codemod.parser import CSSParser, JSXParser


class TestJSXParser:
    def test_imports_keep_aliases(self):
        module = JSXParser().parse(
            "import Alert, { alertClasses as classes, AlertTitle } from '@mui/material/Alert';"
        )
        assert len(module.imports) == 1
        declaration = module.imports[0]
        assert declaration.source_module == "@mui/material/Alert"
        assert [(s.imported_name, s.local_name) for s in declaration.specifiers] == [
            ("alertClasses", "classes"),
            ("AlertTitle", "AlertTitle"),
        ]

    def test_member_expression_contexts(self):
        source = "const a = x.one;\n`&.${x.two} ${x.three}`;\n"
        module = JSXParser().parse(source)
        by_name = {m.property_name: m for m in module.member_expressions}

        assert isinstance(by_name["one"].context, OtherContext)
        assert by_name["one"].context.parent_type == "VariableDeclarator"

        two = by_name["two"].context
        assert isinstance(two, TemplateSlot)
        assert two.index == 0
        assert two.preceding_chunk.raw == "&."

        three = by_name["three"].context
        assert isinstance(three, TemplateSlot)
        assert three.index == 1
        assert three.preceding_chunk.raw == " "

    def test_member_expression_span(self):
        source = "`&.${x.two}`;"
        member = JSXParser().parse(source).member_expressions[0]
        assert member.span.text(source) == "x.two"
        assert member.object_name == "x"

    def test_string_literals(self):
        source = "const a = 'one';\nconst el = <div title=\"two\" />;\n"
        literals = JSXParser().parse(source).string_literals
        assert [(l.value, l.in_jsx_attribute) for l in literals] == [("one", False), ("two", True)]

    def test_validate(self):
        parser = JSXParser()
        assert parser.validate("const a = 1;")
        assert not parser.validate("const = ;")


class TestCSSParser:
    def test_selector_components(self):
        sheet = CSSParser().parse("div.a > #b, [c]:hover &{}")
        kinds = [type(c) for c in sheet.rules[0].components]
        assert kinds == [
            TypeSelector,
            ClassSelector,
            Combinator,
            Combinator,
            Combinator,
            IdSelector,
            SelectorSeparator,
            Combinator,
            AttributeSelector,
            PseudoSelector,
            Combinator,
            NestingSelector,
        ]

    def test_class_selector_span(self):
        css = "a .b-c:not(.d){}"
        components = CSSParser().parse(css).rules[0].components
        classes = [c for c in components if isinstance(c, ClassSelector)]
        assert [(c.name, c.span.text(css)) for c in classes] == [("b-c", ".b-c")]

        pseudo = [c for c in components if isinstance(c, PseudoSelector)][0]
        assert pseudo.name == "not"
        assert pseudo.span.text(css) == ":not(.d)"
        assert pseudo.arguments[0].span.text(css) == ".d"

    def test_rules_record_enclosing_at_rules(self):
        sheet = CSSParser().parse(".a {}\n@media print { @supports (display: grid) { .b {} } }\n")
        assert [(r.selector_text, r.at_rules) for r in sheet.rules] == [
            (".a", ()),
            (".b", ("media", "supports")),
        ]

    def test_non_rule_at_rules_are_skipped(self):
        sheet = CSSParser().parse("@font-face { font-family: x; }\n@keyframes k { from { top: 0; } }\n")
        assert sheet.rules == []
