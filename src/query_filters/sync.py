"""Synchronisation between a filter session and the URL query parameters.

The session is the source of truth while the user edits filters; apply()
writes it to the parameters. When the parameters change from outside
(browser navigation, a pasted link), refresh() rebuilds the session from them.
"""

from types import MappingProxyType
from typing import Any, Mapping

from config.logging_config import get_logger

from .codec import encode
from .extractor import extract_filters
from .params import QueryParamStore
from .session import FilterSession

logger = get_logger("sync")

_UNSEEN = object()


class QuerySync:
    """Writes a FilterSession to a QueryParamStore and reads applied filters back."""

    def __init__(self, session: FilterSession, params: QueryParamStore):
        self.session = session
        self.params = params
        self._seen_version = params.version
        self._applied_version = _UNSEEN
        self._applied: Mapping[str, Any] = MappingProxyType({})

    def apply(self) -> None:
        """
        Write active filters to the parameters and remove inactive ones.

        Parameters outside the template are left untouched. Every value is
        encoded before anything is written, so a failure leaves the
        parameters as they were.

        Raises:
            UnsupportedType: If an active filter holds a value with no text form.
        """
        params = self.params.to_dict()
        active = self.session.active_keys

        for key, value in self.session.filters.items():
            if key in active:
                params[key] = encode(value)
            else:
                params.pop(key, None)

        self.params.replace(params)
        self._seen_version = self.params.version
        logger.info(f"Applied {len(active)} active filter(s) to query parameters")

    def refresh(self) -> bool:
        """
        Resync the session if the parameters changed since the last apply/refresh.

        Returns:
            True if the session was rebuilt from the parameters.
        """
        version = self.params.version
        if version == self._seen_version:
            return False
        self._seen_version = version
        self.session.resync(self.params)
        return True

    @property
    def applied_filters(self) -> Mapping[str, Any]:
        """
        Filters currently encoded in the parameters, keyed by active filter.

        Recomputed only when the parameters' version changes.
        """
        version = self.params.version
        if version != self._applied_version:
            filters, active = extract_filters(
                self.session.template, self.params, typed=self.session.typed
            )
            self._applied = MappingProxyType(
                {key: value for key, value in filters.items() if key in active}
            )
            self._applied_version = version
        return self._applied
