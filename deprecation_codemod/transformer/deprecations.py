"""
Deprecated class tables and the codemod registry.

A deprecation pairs the old JS property name on a component's classes object
(``alertClasses.standardSuccess``) with the generated CSS class it stands for
(``.MuiAlert-standardSuccess``), and both with their replacements. JS keys and
CSS tokens are derived from the same class-name prefix so they cannot drift.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..errors import UnknownCodemodError


@dataclass(frozen=True)
class DeprecationEntry:
    """One old -> new class mapping, in both its JS and CSS spellings."""

    old_class_key: str
    new_class_keys: Tuple[str, ...]
    old_selector_token: str
    new_selector_token: str

    @classmethod
    def from_class_keys(
        cls, class_prefix: str, old_key: str, new_keys: Iterable[str]
    ) -> "DeprecationEntry":
        new_keys = tuple(new_keys)
        return cls(
            old_class_key=old_key,
            new_class_keys=new_keys,
            old_selector_token=f".{class_prefix}-{old_key}",
            new_selector_token="".join(f".{class_prefix}-{key}" for key in new_keys),
        )

    @property
    def old_class_name(self) -> str:
        return self.old_selector_token[1:]

    @property
    def new_class_names(self) -> List[str]:
        return [name for name in self.new_selector_token.split(".") if name]


class DeprecationMap:
    """Immutable, ordered lookup table of deprecated classes."""

    def __init__(self, entries: Iterable[DeprecationEntry]):
        self._entries: Tuple[DeprecationEntry, ...] = tuple(entries)
        self._by_class_key: Dict[str, DeprecationEntry] = {}
        self._by_class_name: Dict[str, DeprecationEntry] = {}

        for entry in self._entries:
            if entry.old_class_key in self._by_class_key:
                raise ValueError(f"Duplicate class key: {entry.old_class_key}")
            if entry.old_class_name in self._by_class_name:
                raise ValueError(f"Duplicate selector token: {entry.old_selector_token}")
            self._by_class_key[entry.old_class_key] = entry
            self._by_class_name[entry.old_class_name] = entry

    def __iter__(self) -> Iterator[DeprecationEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup_class_key(self, class_key: str) -> Optional[DeprecationEntry]:
        """Exact match on a JS property name of the classes object."""
        return self._by_class_key.get(class_key)

    def lookup_class_name(self, class_name: str) -> Optional[DeprecationEntry]:
        """Exact match on a CSS class name (without the leading dot)."""
        return self._by_class_name.get(class_name)

    def check_invariants(self) -> List[str]:
        """
        Report authoring mistakes that would break idempotence.

        A replacement key or class name must never itself be deprecated,
        otherwise a second run would rewrite the output again.

        Returns:
            Human readable problems; empty when the table is sound.
        """
        problems = []
        for entry in self._entries:
            if not entry.new_class_keys:
                problems.append(f"{entry.old_class_key}: no replacement keys")
            for key in entry.new_class_keys:
                if key in self._by_class_key:
                    problems.append(
                        f"{entry.old_class_key}: replacement key '{key}' is itself deprecated"
                    )
            for name in entry.new_class_names:
                if name in self._by_class_name:
                    problems.append(
                        f"{entry.old_selector_token}: replacement class '.{name}' is itself deprecated"
                    )
        return problems


@dataclass(frozen=True)
class Codemod:
    """
    A named migration.

    Attributes:
        name: Name used on the command line (``alert-classes``)
        module_paths: Modules the classes object may be imported from
        export_name: Name of the classes object export (``alertClasses``)
        deprecations: The classes renamed by this migration
        nesting_prefix: Selector prefix of the nested-selector idiom; the
            template marker is this prefix followed by a dot (``&.``)
    """

    name: str
    module_paths: Tuple[str, ...]
    export_name: str
    deprecations: DeprecationMap
    nesting_prefix: str = "&"

    @property
    def marker(self) -> str:
        return f"{self.nesting_prefix}."


# ---------------------------------------------------------------------------
# Alert: variant + color classes split into separate variant/color classes
# ---------------------------------------------------------------------------

ALERT_VARIANTS = ("standard", "outlined", "filled")
ALERT_COLORS = ("Success", "Info", "Warning", "Error")

ALERT_DEPRECATIONS = DeprecationMap(
    DeprecationEntry.from_class_keys(
        "MuiAlert", f"{variant}{color}", (variant, f"color{color}")
    )
    for variant in ALERT_VARIANTS
    for color in ALERT_COLORS
)

ALERT_CLASSES = Codemod(
    name="alert-classes",
    module_paths=("@mui/material/Alert",),
    export_name="alertClasses",
    deprecations=ALERT_DEPRECATIONS,
)

CODEMODS: Dict[str, Codemod] = {
    codemod.name: codemod for codemod in (ALERT_CLASSES,)
}


def available_codemods() -> List[str]:
    return sorted(CODEMODS)


def get_codemod(name: str) -> Codemod:
    """Look up a registered codemod by name."""
    try:
        return CODEMODS[name]
    except KeyError:
        raise UnknownCodemodError(name, available_codemods()) from None
