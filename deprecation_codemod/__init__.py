"""Codemods that migrate deprecated component class names in JS/JSX and CSS."""

from .config import PrintOptions, TransformOptions
from .errors import CodemodError, ParseError, UnknownCodemodError
from .transformer import (
    ALERT_CLASSES,
    Codemod,
    CssProcessor,
    DeprecatedClassesPlugin,
    DeprecationEntry,
    DeprecationMap,
    JSTransformer,
    TransformResult,
    TransformStatus,
    available_codemods,
    css_transform,
    get_codemod,
    js_transform,
)

__version__ = "0.1.0"

__all__ = [
    "PrintOptions",
    "TransformOptions",
    "CodemodError",
    "ParseError",
    "UnknownCodemodError",
    "ALERT_CLASSES",
    "Codemod",
    "CssProcessor",
    "DeprecatedClassesPlugin",
    "DeprecationEntry",
    "DeprecationMap",
    "JSTransformer",
    "TransformResult",
    "TransformStatus",
    "available_codemods",
    "css_transform",
    "get_codemod",
    "js_transform",
]
