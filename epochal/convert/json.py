"""JSON serialization and deserialization for Instants.

This module provides functions for converting Instants to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert an Instant to a JSON-serializable dict.
    from_json: Create an Instant from a JSON dict.

The JSON format carries the exact canonical counters alongside an
RFC 3339 rendering for readability:

    {"_type": "Instant", "value": "2017-01-01T00:00:00.000Z",
     "seconds": 13127702400, "milliseconds": 0,
     "source": "system", "utc_offset": 0}

Examples:
    >>> from epochal.convert import from_json, from_unix, to_json

    >>> data = to_json(from_unix(1483228800))
    >>> data["value"]
    '2017-01-01T00:00:00.000Z'

    >>> from_json(data).unix()
    1483228800
"""

from __future__ import annotations

from typing import Any

from epochal.core.instant import Instant
from epochal.errors import ParseError, TimezoneError, ValidationError
from epochal.units.source import Source


def to_json(value: Instant) -> dict[str, Any]:
    """Convert an Instant to a JSON-serializable dictionary.

    Args:
        value: The Instant to convert.

    Returns:
        A JSON-serializable dictionary with type information.

    Raises:
        TypeError: If value is not an Instant.
    """
    if not isinstance(value, Instant):
        raise TypeError(f"expected Instant, got {type(value).__name__}")

    return {
        "_type": "Instant",
        "value": value.rfc3339(),
        "seconds": value.seconds,
        "milliseconds": value.milliseconds,
        "source": value.source.value,
        "utc_offset": value.utc_offset,
    }


def from_json(data: dict[str, Any]) -> Instant:
    """Create an Instant from a JSON dictionary.

    The exact counters are preferred; when they are absent the RFC 3339
    ``value`` field is parsed instead.

    Args:
        data: A dictionary produced by to_json.

    Returns:
        The Instant described by the data.

    Raises:
        ParseError: If the data is missing required fields or has invalid values.
        TypeError: If `_type` is not "Instant".
    """
    from epochal.format.rfc3339 import parse_rfc3339

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data")
    if type_name != "Instant":
        raise TypeError(f"unknown temporal type: {type_name!r}")

    try:
        source = Source(data.get("source", Source.SYSTEM.value))
    except ValueError as exc:
        raise ParseError(f"unknown source: {data.get('source')!r}") from exc

    seconds = data.get("seconds")
    if seconds is None:
        value = data.get("value")
        if not value:
            raise ParseError("missing 'seconds' or 'value' field for Instant")
        return parse_rfc3339(value, source=source)

    try:
        return Instant(
            seconds,
            data.get("milliseconds", 0),
            source=source,
            utc_offset=data.get("utc_offset", 0),
        )
    except (ValidationError, TimezoneError) as exc:
        raise ParseError(f"invalid Instant data: {exc}") from exc


__all__ = ["to_json", "from_json"]
