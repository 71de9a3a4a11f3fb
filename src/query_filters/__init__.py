"""URL-synchronised filter sessions.

Keeps a set of named filter values, tracks which of them the user has touched,
and mirrors the touched ones into URL query parameters.
"""

from .exceptions import FilterError, UnsupportedType, UnknownKey
from .kinds import UNDEFINED, FilterKind, kind_of, is_supported
from .codec import encode, decode, decode_as
from .template import DefaultTemplate, TemplateEntry
from .extractor import extract_filters
from .session import FilterSession
from .params import QueryParamStore, MemoryQueryParams
from .sync import QuerySync
from .frame import filter_frame

__all__ = [
    # Errors
    "FilterError",
    "UnsupportedType",
    "UnknownKey",
    # Kinds
    "UNDEFINED",
    "FilterKind",
    "kind_of",
    "is_supported",
    # Codec
    "encode",
    "decode",
    "decode_as",
    # Template and extraction
    "DefaultTemplate",
    "TemplateEntry",
    "extract_filters",
    # Session and sync
    "FilterSession",
    "QueryParamStore",
    "MemoryQueryParams",
    "QuerySync",
    "filter_frame",
]
