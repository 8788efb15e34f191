"""Query-string and request-body helpers for the endpoint bindings."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode


def build_query(params: Mapping[str, Any]) -> str:
    """Return ``?k=v&...`` for the set parameters, or ``""`` if none are.

    Unset (None), empty and zero values are left out so the API applies
    its own defaults.
    """
    pairs = [(key, str(value)) for key, value in params.items() if value]
    query = urlencode(pairs)
    return f"?{query}" if query else ""


def drop_unset(body: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of a JSON body without its None-valued optional fields."""
    return {key: value for key, value in body.items() if value is not None}
