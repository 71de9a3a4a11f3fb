"""Query parameter stores.

The filter session treats the URL query string as an external ordered
str -> str mapping. Each commit produces a new version token, which lets
readers tell whether the parameters changed since they last looked.
"""

from abc import ABC, abstractmethod
from typing import Dict, Hashable, Iterator, Mapping, Optional
from urllib.parse import parse_qsl, urlencode


class QueryParamStore(ABC):
    """Ordered mapping of query parameter name to text."""

    @abstractmethod
    def to_dict(self) -> Dict[str, str]:
        """Snapshot of all parameters, in order."""

    @abstractmethod
    def replace(self, params: Mapping[str, str]) -> None:
        """Replace every parameter with the given mapping in one commit."""

    @property
    @abstractmethod
    def version(self) -> Hashable:
        """Token that changes whenever the parameters change."""

    def get(self, key: str) -> Optional[str]:
        return self.to_dict().get(key)

    def set(self, key: str, text: str) -> None:
        params = self.to_dict()
        params[key] = text
        self.replace(params)

    def delete(self, key: str) -> None:
        params = self.to_dict()
        if key in params:
            del params[key]
            self.replace(params)

    def __contains__(self, key: object) -> bool:
        return key in self.to_dict()

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_dict())

    def __len__(self) -> int:
        return len(self.to_dict())


class MemoryQueryParams(QueryParamStore):
    """
    In-memory parameter store.

    Used in tests and anywhere the query string is handled by hand, e.g. when
    building shareable links on a server.
    """

    def __init__(self, params: Optional[Mapping[str, str]] = None):
        self._params: Dict[str, str] = dict(params or {})
        self._version = 0

    @classmethod
    def from_query_string(cls, query_string: str) -> "MemoryQueryParams":
        """
        Parse a URL query string ("a=1&b=%7Bx%2Cy%7D").

        A leading "?" is ignored. Repeated keys keep their last value.
        """
        pairs = parse_qsl(query_string.lstrip("?"), keep_blank_values=True)
        return cls(dict(pairs))

    def to_query_string(self) -> str:
        return urlencode(self._params)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._params)

    def replace(self, params: Mapping[str, str]) -> None:
        self._params = dict(params)
        self._version += 1

    @property
    def version(self) -> int:
        return self._version

    def get(self, key: str) -> Optional[str]:
        return self._params.get(key)

    def __repr__(self) -> str:
        return f"MemoryQueryParams({self._params!r}, version={self._version})"
