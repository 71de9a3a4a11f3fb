"""Default filter template.

The template is fixed when a filter session is created. It defines which keys
exist, the default value of each key, and the kind used when decoding the
key's query parameter in typed mode.
"""

from collections.abc import Mapping, Set as AbstractSet
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, Tuple

from .kinds import FilterKind, kind_of


@dataclass(frozen=True)
class TemplateEntry:
    """One filter key with its default value and kind."""

    key: str
    default: Any
    kind: FilterKind


def _freeze(value):
    if isinstance(value, AbstractSet) and not isinstance(value, frozenset):
        return frozenset(value)
    return value


class DefaultTemplate(Mapping):
    """
    Immutable, ordered mapping of filter key to default value.

    Every default is validated on construction, so a session can never start
    with a value the codec cannot handle.

    Raises:
        UnsupportedType: If any default value is of an unsupported kind.
    """

    def __init__(self, defaults: Mapping[str, Any]):
        entries = []
        for key, value in defaults.items():
            kind = kind_of(value)
            entries.append(TemplateEntry(key=key, default=_freeze(value), kind=kind))
        self._entries: Tuple[TemplateEntry, ...] = tuple(entries)
        self._by_key: Dict[str, TemplateEntry] = {e.key: e for e in self._entries}

    @classmethod
    def coerce(cls, defaults) -> "DefaultTemplate":
        """Return defaults unchanged if already a template, else build one."""
        if isinstance(defaults, cls):
            return defaults
        return cls(defaults)

    @property
    def entries(self) -> Tuple[TemplateEntry, ...]:
        return self._entries

    def kind(self, key: str) -> FilterKind:
        return self._by_key[key].kind

    def as_dict(self) -> Mapping[str, Any]:
        """Read-only view of key -> default."""
        return MappingProxyType({e.key: e.default for e in self._entries})

    def __getitem__(self, key: str) -> Any:
        return self._by_key[key].default

    def __iter__(self) -> Iterator[str]:
        return (e.key for e in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        items = ", ".join(f"{e.key}={e.default!r}" for e in self._entries)
        return f"DefaultTemplate({items})"
