"""
Rules for resolving which local names refer to a deprecated classes object.

Only top-level ``import { <export> } from '<module>'`` declarations count.
Aliased imports (``import { alertClasses as classes }``) track the alias.
"""

from dataclasses import dataclass
from typing import Dict, List

from ...nodes import JsModule
from ..deprecations import Codemod
from ...utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ImportBinding:
    source_module: str
    imported_name: str
    local_name: str


class SymbolTable:
    """Per-file map of imported local names to "is the tracked classes object"."""

    def __init__(self):
        self._symbols: Dict[str, bool] = {}

    def bind(self, local_name: str, tracked: bool) -> None:
        self._symbols[local_name] = tracked

    def is_tracked(self, local_name: str) -> bool:
        return self._symbols.get(local_name, False)

    def tracked_names(self) -> List[str]:
        return [name for name, tracked in self._symbols.items() if tracked]

    def has_tracked(self) -> bool:
        return any(self._symbols.values())


class ImportRules:
    """Import specifier check."""

    def __init__(self, codemod: Codemod):
        self.codemod = codemod

    def bindings(self, module: JsModule) -> List[ImportBinding]:
        return [
            ImportBinding(
                source_module=declaration.source_module,
                imported_name=specifier.imported_name,
                local_name=specifier.local_name,
            )
            for declaration in module.imports
            for specifier in declaration.specifiers
        ]

    def is_tracked(self, binding: ImportBinding) -> bool:
        return (
            binding.source_module in self.codemod.module_paths
            and binding.imported_name == self.codemod.export_name
        )

    def collect(self, module: JsModule) -> SymbolTable:
        symbols = SymbolTable()
        for binding in self.bindings(module):
            symbols.bind(binding.local_name, self.is_tracked(binding))

        if symbols.has_tracked():
            logger.debug(f"Tracking {', '.join(symbols.tracked_names())} for {self.codemod.name}")
        return symbols
