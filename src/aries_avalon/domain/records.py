"""Avalon index records and their classification.

A Solr document is loosely typed (every field is optional and multi-valued
fields come back as lists). :func:`classify_record` turns it into an
:class:`IndexRecord` whose :class:`RecordKind` decides how the Aries
response is derived.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from aries_avalon.platform.types import JSONObject, JSONValue

ID_FIELD = "id"
MODEL_FIELD = "has_model_ssim"
ALTERNATE_ID_FIELD = "identifier_ssim"
PARENT_FIELD = "isPartOf_ssim"
FILE_LOCATION_FIELD = "file_location_ssi"
DERIVATIVE_FILE_FIELD = "derivativeFile_ssi"
DERIVED_FROM_FIELD = "isDerivationOf_ssim"

CONTAINER_MODEL = "MediaObject"

RECORD_FIELDS: list[str] = [
    ID_FIELD,
    MODEL_FIELD,
    ALTERNATE_ID_FIELD,
    PARENT_FIELD,
    FILE_LOCATION_FIELD,
    DERIVATIVE_FILE_FIELD,
]


class RecordKind(StrEnum):
    """How a record sits in the Avalon object hierarchy."""

    CONTAINER = "container"  # media object
    MEMBER = "member"  # master file / section of a media object
    OTHER = "other"


@dataclass(frozen=True)
class IndexRecord:
    """A single Avalon Solr document, classified."""

    id: str
    kind: RecordKind
    model: list[str] = field(default_factory=list)
    alternate_ids: list[str] = field(default_factory=list)
    parent_ids: list[str] = field(default_factory=list)
    file_location: str | None = None
    derivative_file: str | None = None

    @property
    def parent_id(self) -> str | None:
        """The containing media object (first parent reference)."""
        return self.parent_ids[0] if self.parent_ids else None


def _as_str_list(value: JSONValue) -> list[str]:
    if value is None:
        return []
    if isinstance(value, list):
        return [str(v) for v in value if v is not None and str(v) != ""]
    text = str(value)
    return [text] if text else []


def _as_optional_str(value: JSONValue) -> str | None:
    """Single-valued string field; empty strings count as absent."""
    if isinstance(value, list):
        value = value[0] if value else None
    if value is None:
        return None
    text = str(value)
    return text or None


def classify_record(doc: JSONObject) -> IndexRecord:
    """Parse and classify a Solr document.

    :param doc: Raw document from ``response.docs``.
    :returns: Classified record.
    :raises ValueError: If the document has no ``id``.
    """
    record_id = _as_optional_str(doc.get(ID_FIELD))
    if record_id is None:
        raise ValueError("Solr document has no id")

    model = _as_str_list(doc.get(MODEL_FIELD))
    parent_ids = _as_str_list(doc.get(PARENT_FIELD))

    if model and model[0] == CONTAINER_MODEL:
        kind = RecordKind.CONTAINER
    elif parent_ids:
        kind = RecordKind.MEMBER
    else:
        kind = RecordKind.OTHER

    return IndexRecord(
        id=record_id,
        kind=kind,
        model=model,
        alternate_ids=_as_str_list(doc.get(ALTERNATE_ID_FIELD)),
        parent_ids=parent_ids,
        file_location=_as_optional_str(doc.get(FILE_LOCATION_FIELD)),
        derivative_file=_as_optional_str(doc.get(DERIVATIVE_FILE_FIELD)),
    )
