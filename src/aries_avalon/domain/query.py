"""Lucene query construction for Solr lookups."""

from __future__ import annotations

import re

_PHRASE_SPECIALS = re.compile(r'([\\"])')


def escape_phrase(value: str) -> str:
    """Escape ``value`` for use inside a double-quoted Lucene phrase.

    Inside a phrase only the backslash and the double quote are special.
    """
    return _PHRASE_SPECIALS.sub(r"\\\1", value)


def field_equals(field: str, value: str) -> str:
    """Build an exact-match phrase query, e.g. ``id:"abc123"``."""
    return f'{field}:"{escape_phrase(value)}"'
