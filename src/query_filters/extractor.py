"""Initial filter state from query parameters."""

from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Tuple

from config.logging_config import get_logger

from .codec import decode, decode_as
from .template import DefaultTemplate

logger = get_logger("extractor")


def extract_filters(
    template,
    params,
    typed: bool = False,
) -> Tuple[Mapping[str, Any], FrozenSet[str]]:
    """
    Build the filter state and active keys from a query parameter snapshot.

    A key whose parameter is present is decoded and marked active; every other
    key keeps its default and stays inactive.

    Args:
        template: DefaultTemplate or plain mapping of key -> default value.
        params: Anything with a get(key) returning the text or None.
        typed: Decode using each key's default kind instead of the text shape.

    Returns:
        Tuple of (read-only filter mapping, frozenset of active keys).

    Raises:
        UnsupportedType: If the template holds an unsupported default.
    """
    template = DefaultTemplate.coerce(template)

    filters = {}
    active = set()

    for entry in template.entries:
        text = params.get(entry.key)
        if text is not None:
            filters[entry.key] = decode_as(text, entry.kind) if typed else decode(text)
            active.add(entry.key)
        else:
            filters[entry.key] = entry.default

    if active:
        logger.debug(f"Extracted {len(active)} active filter(s): {sorted(active)}")

    return MappingProxyType(filters), frozenset(active)
