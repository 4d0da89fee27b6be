"""
Transform options.

Options can be built directly or from the jscodeshift-style mapping
``{"printOptions": {"quote": "single", "trailingComma": True}}``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from .errors import InvalidOptionsError
from .utils.string_utils import QUOTE_CHARS

AUTO_QUOTE = "auto"


@dataclass(frozen=True)
class PrintOptions:
    """
    How rewritten nodes are printed.

    ``quote`` picks the quote character of rewritten string literals; None
    or ``"auto"`` keeps the quote the literal was written with.
    ``trailing_comma`` is accepted for compatibility with jscodeshift
    callers; no rewrite emits a list, so it never affects output.
    """

    quote: Optional[str] = None
    trailing_comma: bool = False

    def __post_init__(self):
        if self.quote not in (None, AUTO_QUOTE) and self.quote not in QUOTE_CHARS:
            raise InvalidOptionsError(
                f"Unsupported quote style '{self.quote}' (expected 'single' or 'double')"
            )

    @property
    def quote_char(self) -> Optional[str]:
        return QUOTE_CHARS.get(self.quote) if self.quote else None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PrintOptions":
        data = data or {}
        return cls(
            quote=data.get("quote"),
            trailing_comma=bool(data.get("trailingComma", data.get("trailing_comma", False))),
        )


@dataclass(frozen=True)
class TransformOptions:
    print_options: PrintOptions = field(default_factory=PrintOptions)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "TransformOptions":
        data = data or {}
        print_options = data.get("printOptions", data.get("print_options"))
        if isinstance(print_options, PrintOptions):
            return cls(print_options=print_options)
        return cls(print_options=PrintOptions.from_dict(print_options))

    @classmethod
    def coerce(
        cls, value: Union["TransformOptions", Dict[str, Any], None]
    ) -> "TransformOptions":
        if isinstance(value, TransformOptions):
            return value
        return cls.from_dict(value)
