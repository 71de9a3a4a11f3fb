"""Exceptions raised by the filter session core."""


class FilterError(Exception):
    """Base class for filter session errors."""

    pass


class UnsupportedType(FilterError, TypeError):
    """Raised when a value of an unsupported kind is encoded or used as a default."""

    def __init__(self, value, message: str = None):
        self.value = value
        if message is None:
            message = (
                f"Serialization for values of type {type(value).__name__!r} is not supported. "
                "Supported types are: number, string, boolean, null, undefined or set"
            )
        super().__init__(message)


class UnknownKey(FilterError, KeyError):
    """Raised when a mutation names a key that is not part of the default template."""

    def __init__(self, key):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown filter key: {self.key!r}"
