"""Shared pydantic configuration for observation models."""

from typing import Any, Mapping

from pydantic import ConfigDict


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


# Observations are immutable once created and accept either naming style
OBSERVATION_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


def lookup_field(entry: Mapping[str, Any], *names: str) -> Any:
    """Return the first non-None value among snake_case names or their camelCase forms."""
    for name in names:
        for key in (name, to_camel(name)):
            if entry.get(key) is not None:
                return entry[key]
    return None
