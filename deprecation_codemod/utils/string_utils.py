"""
String utility functions.
"""

from typing import Optional

QUOTE_CHARS = {
    "single": "'",
    "double": '"',
}


def detect_quote(raw: str) -> str:
    """Return the quote character a raw string literal was written with."""
    if raw[:1] in ("'", '"'):
        return raw[0]
    return "'"


def quote_string(value: str, quote: str) -> str:
    """Serialize ``value`` as a JS string literal using ``quote``."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace(quote, "\\" + quote)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"{quote}{escaped}{quote}"


def replace_suffix(text: str, suffix: str, replacement: str) -> Optional[str]:
    """Swap a trailing ``suffix`` for ``replacement``; None if absent."""
    if not suffix or not text.endswith(suffix):
        return None
    return text[: len(text) - len(suffix)] + replacement


def requote(body: str, quote: str) -> str:
    """
    Wrap the raw body of a JS string literal in ``quote``.

    Existing escape sequences are copied through untouched; only bare
    occurrences of the new quote character get a backslash.
    """
    out = []
    position = 0
    while position < len(body):
        char = body[position]
        if char == "\\":
            out.append(body[position:position + 2])
            position += 2
            continue
        out.append("\\" + char if char == quote else char)
        position += 1
    return f"{quote}{''.join(out)}{quote}"
