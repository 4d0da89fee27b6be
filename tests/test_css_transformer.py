"""Tests for the CSS deprecated classes plugin."""

import pytest

from deprecation_codemod import (
    Codemod,
    CssProcessor,
    DeprecatedClassesPlugin,
    DeprecationEntry,
    DeprecationMap,
    ParseError,
    TransformStatus,
    css_transform,
)

FOO_CLASSES = Codemod(
    name="foo-classes",
    module_paths=("lib/Foo",),
    export_name="fooClasses",
    deprecations=DeprecationMap(
        [DeprecationEntry.from_class_keys("Foo", "message", ["content"])]
    ),
)


@pytest.fixture
def processor():
    return CssProcessor([DeprecatedClassesPlugin()])


@pytest.fixture
def foo_processor():
    return CssProcessor([DeprecatedClassesPlugin(FOO_CLASSES)])


class TestFixtures:
    def test_transforms_classes_as_needed(self, processor, read):
        actual = processor.process(read("actual.css"))
        assert actual.css == read("expected.css")
        assert actual.status is TransformStatus.CHANGED

    def test_is_idempotent(self, processor, read):
        expected = read("expected.css")
        result = processor.process(expected)
        assert result.css == expected
        assert result.status is TransformStatus.UNCHANGED


class TestTokenMatching:
    def test_longer_class_name_is_not_matched(self, foo_processor):
        css = ".Foo-message2 { color: red; }\n.Foo-messages, .Foo-message-x { color: red; }\n"
        assert foo_processor.process(css).css == css

    def test_exact_class_is_replaced(self, foo_processor):
        css = ".Foo-message2, .Foo-message { color: red; }\n"
        assert foo_processor.process(css).css == ".Foo-message2, .Foo-content { color: red; }\n"

    def test_type_and_id_selectors_with_same_name_are_ignored(self, foo_processor):
        css = "Foo-message, #Foo-message, [class=Foo-message] { color: red; }\n"
        assert foo_processor.process(css).css == css

    def test_declaration_values_are_ignored(self, foo_processor):
        css = '.a::after { content: ".Foo-message"; }\n'
        assert foo_processor.process(css).css == css

    def test_compound_and_combinators(self, foo_processor):
        css = "div.Foo-message:hover > span ~ .Foo-message::before { color: red; }\n"
        expected = "div.Foo-content:hover > span ~ .Foo-content::before { color: red; }\n"
        assert foo_processor.process(css).css == expected

    def test_pseudo_class_arguments(self, foo_processor):
        css = ".Foo-root:not(.Foo-message) { color: red; }\n"
        expected = ".Foo-root:not(.Foo-content) { color: red; }\n"
        assert foo_processor.process(css).css == expected

    def test_rules_inside_media(self, foo_processor):
        css = "@media print {\n  .Foo-message { display: none; }\n}\n"
        expected = "@media print {\n  .Foo-content { display: none; }\n}\n"
        assert foo_processor.process(css).css == expected

    def test_nested_rules(self, foo_processor):
        css = ".Foo-root {\n  color: red;\n  &.Foo-message { color: blue; }\n}\n"
        expected = ".Foo-root {\n  color: red;\n  &.Foo-content { color: blue; }\n}\n"
        assert foo_processor.process(css).css == expected


class TestFormatting:
    def test_comments_and_whitespace_are_preserved(self, foo_processor):
        css = "/* header */\n.Foo-message   /* c */ >   .x{color:red}\n\n\n"
        expected = "/* header */\n.Foo-content   /* c */ >   .x{color:red}\n\n\n"
        assert foo_processor.process(css).css == expected

    def test_crlf_line_endings_are_preserved(self, foo_processor):
        css = ".a {\r\n  color: red;\r\n}\r\n\r\n.Foo-message {\r\n  color: blue;\r\n}\r\n"
        expected = css.replace(".Foo-message", ".Foo-content")
        assert foo_processor.process(css).css == expected

    def test_untouched_stylesheet(self, processor):
        css = ".MuiAlert-root { color: red; }\n"
        result = processor.process(css)
        assert result.css == css
        assert result.status is TransformStatus.UNCHANGED


class TestErrors:
    def test_parse_error_names_the_file(self):
        with pytest.raises(ParseError) as excinfo:
            css_transform(".a { color: red; }\n.MuiAlert-filledInfo", file_path="styles/alert.css")
        assert excinfo.value.file_path == "styles/alert.css"
