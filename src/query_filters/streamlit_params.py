"""Query parameter store backed by Streamlit's st.query_params."""

from typing import Dict, Mapping, Optional, Tuple

import streamlit as st

from .params import QueryParamStore


class StreamlitQueryParams(QueryParamStore):
    """
    Adapter over the browser URL of a running Streamlit app.

    The version token is the tuple of current items, so a change made by the
    browser (back/forward, pasted link) is observed on the next rerun.
    """

    def __init__(self, query_params=None):
        """
        Args:
            query_params: Object with the st.query_params interface.
                Defaults to st.query_params.
        """
        self._query_params = query_params if query_params is not None else st.query_params

    def to_dict(self) -> Dict[str, str]:
        return dict(self._query_params.to_dict())

    def replace(self, params: Mapping[str, str]) -> None:
        self._query_params.from_dict(dict(params))

    @property
    def version(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self.to_dict().items())

    def get(self, key: str) -> Optional[str]:
        return self._query_params.get(key)

    def set(self, key: str, text: str) -> None:
        self._query_params[key] = text

    def delete(self, key: str) -> None:
        if key in self._query_params:
            del self._query_params[key]
