"""Transforms that migrate deprecated class references."""

from .deprecations import (
    ALERT_CLASSES,
    Codemod,
    DeprecationEntry,
    DeprecationMap,
    available_codemods,
    get_codemod,
)
from .result import TransformResult, TransformStatus
from .js_transformer import JSTransformer, js_transform
from .css_transformer import CssPlugin, CssProcessor, DeprecatedClassesPlugin, css_transform

__all__ = [
    "ALERT_CLASSES",
    "Codemod",
    "DeprecationEntry",
    "DeprecationMap",
    "available_codemods",
    "get_codemod",
    "TransformResult",
    "TransformStatus",
    "JSTransformer",
    "js_transform",
    "CssPlugin",
    "CssProcessor",
    "DeprecatedClassesPlugin",
    "css_transform",
]
