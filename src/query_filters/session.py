"""Filter session: current filter values plus the set of user-touched keys.

A session is created from a default template and, optionally, a snapshot of
the current query parameters. Each mutation installs a new read-only snapshot
of the filter values, so a caller holding an older snapshot can detect a
change with a simple identity check.

Usage:
    session = FilterSession({"name": "", "age": 0})
    session.update("age", 5)
    session.is_active("age")      # True
    session.active_count()        # 1
    session.reset_one("age")
"""

from types import MappingProxyType
from typing import Any, FrozenSet, Mapping

from config.logging_config import get_logger

from .exceptions import UnknownKey
from .extractor import extract_filters
from .template import DefaultTemplate

logger = get_logger("session")


class FilterSession:
    """
    Owns the filter state and active keys for one filter UI.

    Sessions never share their active key set; create one per independent
    set of filters.
    """

    def __init__(self, template, params=None, typed: bool = False):
        """
        Args:
            template: DefaultTemplate or mapping of key -> default value.
            params: Optional query parameter snapshot (anything with get()).
            typed: Decode parameters using each key's default kind.

        Raises:
            UnsupportedType: If the template holds an unsupported default.
        """
        self._template = DefaultTemplate.coerce(template)
        self._typed = typed
        filters, active = extract_filters(
            self._template, params if params is not None else {}, typed=typed
        )
        self._filters: Mapping[str, Any] = filters
        self._active = set(active)

    @property
    def template(self) -> DefaultTemplate:
        return self._template

    @property
    def typed(self) -> bool:
        return self._typed

    @property
    def defaults(self) -> Mapping[str, Any]:
        return self._template.as_dict()

    @property
    def filters(self) -> Mapping[str, Any]:
        """Current filter snapshot (read-only, replaced on every mutation)."""
        return self._filters

    @property
    def active_keys(self) -> FrozenSet[str]:
        return frozenset(self._active)

    def _check_key(self, key: str) -> None:
        if key not in self._template:
            logger.warning(f"Rejected mutation of unknown filter key {key!r}")
            raise UnknownKey(key)

    def _replace(self, key: str, value: Any) -> None:
        filters = dict(self._filters)
        filters[key] = value
        self._filters = MappingProxyType(filters)

    def update(self, key: str, value: Any) -> None:
        """
        Set a filter value and mark the filter active.

        The value is not checked against the default's kind; an unsupported
        value only fails later when it is encoded.

        Raises:
            UnknownKey: If the key is not in the template.
        """
        self._check_key(key)
        self._replace(key, value)
        self._active.add(key)

    def reset_one(self, key: str) -> None:
        """
        Restore one filter to its default and mark it inactive.

        Raises:
            UnknownKey: If the key is not in the template.
        """
        self._check_key(key)
        self._replace(key, self._template[key])
        self._active.discard(key)

    def reset_all(self) -> None:
        """Restore every filter to its default and clear the active keys."""
        self._filters = MappingProxyType(dict(self._template.as_dict()))
        self._active.clear()

    def is_active(self, key: str) -> bool:
        return key in self._active

    def active_count(self) -> int:
        return len(self._active)

    def resync(self, params) -> None:
        """
        Rebuild filter state and active keys from a query parameter snapshot.

        Used when the parameters change outside the session, e.g. browser
        navigation. Local edits that were not applied are discarded.
        """
        filters, active = extract_filters(self._template, params, typed=self._typed)
        self._filters = filters
        self._active = set(active)
        logger.info(f"Resynced filters from parameters ({len(self._active)} active)")

    def __repr__(self) -> str:
        return (
            f"FilterSession(filters={dict(self._filters)!r}, "
            f"active={sorted(self._active)!r})"
        )
