"""Common type aliases for the codebase."""

from __future__ import annotations

from pydantic import JsonValue

# JSON keys are always strings, values can be any JSON-serializable type
type JSONValue = JsonValue
"""Type alias for JSON values."""

type JSONObject = dict[str, JSONValue]
"""Type alias for JSON objects (dictionaries with string keys)."""

type JSONArray = list[JSONValue]
"""Type alias for JSON arrays."""
