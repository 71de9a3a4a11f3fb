"""Supported filter value kinds.

Filter values are limited to a small universe of scalars plus one level of
sets of scalars:

    number     int or float (bool is excluded even though it subclasses int)
    string     str
    boolean    bool
    null       None
    undefined  the UNDEFINED sentinel
    set        any collections.abc.Set whose elements are scalars
"""

from collections.abc import Set as AbstractSet
from enum import Enum

from .exceptions import UnsupportedType


class _Undefined:
    """Marker for a filter that has no value at all (distinct from None)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


class FilterKind(str, Enum):
    """Kind of a filter value."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"
    UNDEFINED = "undefined"
    SET = "set"


SCALAR_KINDS = frozenset(
    {
        FilterKind.NUMBER,
        FilterKind.STRING,
        FilterKind.BOOLEAN,
        FilterKind.NULL,
        FilterKind.UNDEFINED,
    }
)


def scalar_kind_of(value) -> FilterKind:
    """
    Get the kind of a scalar value.

    Raises:
        UnsupportedType: If the value is a set or any other unsupported type.
    """
    if value is UNDEFINED:
        return FilterKind.UNDEFINED
    if value is None:
        return FilterKind.NULL
    # bool before int: True is an int too
    if isinstance(value, bool):
        return FilterKind.BOOLEAN
    if isinstance(value, (int, float)):
        return FilterKind.NUMBER
    if isinstance(value, str):
        return FilterKind.STRING
    raise UnsupportedType(value)


def kind_of(value) -> FilterKind:
    """
    Get the kind of any supported filter value.

    Args:
        value: Candidate filter value.

    Returns:
        The FilterKind of the value.

    Raises:
        UnsupportedType: If the value, or an element of a set value, is not supported.
    """
    if isinstance(value, AbstractSet):
        for element in value:
            if isinstance(element, AbstractSet):
                raise UnsupportedType(
                    element, "Nested sets are not supported as filter values"
                )
            scalar_kind_of(element)
        return FilterKind.SET
    return scalar_kind_of(value)


def is_supported(value) -> bool:
    """Check whether a value belongs to the supported kind universe."""
    try:
        kind_of(value)
    except UnsupportedType:
        return False
    return True
