"""Sanity checks on the alert-classes fixtures themselves."""


def test_js_fixtures_differ(read):
    assert read("actual.js") != read("expected.js")


def test_css_fixtures_differ(read):
    assert read("actual.css") != read("expected.css")


def test_fixtures_exercise_every_deprecated_key(read):
    actual_js = read("actual.js")
    actual_css = read("actual.css")
    for variant in ("standard", "outlined", "filled"):
        for color in ("Success", "Info", "Warning", "Error"):
            assert f"alertClasses.{variant}{color}" in actual_js
            assert f".MuiAlert-{variant}{color}" in actual_css
