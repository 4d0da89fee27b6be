import pytest

from deprecation_codemod.generator import Edit, SourcePrinter
from deprecation_codemod.nodes import Span


def test_no_edits_returns_source():
    source = "const a = 1;\r\n"
    assert SourcePrinter().print(source, []) == source


def test_edits_are_applied_in_source_order():
    source = "aaa bbb ccc"
    edits = [Edit(Span(8, 11), "Z"), Edit(Span(0, 3), "X")]
    assert SourcePrinter().print(source, edits) == "X bbb Z"


def test_overlapping_edits_are_rejected():
    with pytest.raises(ValueError):
        SourcePrinter().print("abcdef", [Edit(Span(0, 3), "x"), Edit(Span(2, 4), "y")])
