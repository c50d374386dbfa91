"""Aries identifier resolution against the Avalon Solr index.

Search strategy:

1. ``id:"<identifier>"``
2. only if (1) found nothing, ``identifier_ssim:"<identifier>"``

Zero hits after both queries is a :class:`NotFoundError`; more than one hit is
an :class:`AmbiguousIdentifierError`; transport and parse failures surface as
:class:`SolrError`. Exactly one hit is classified and turned into a
:class:`ResolutionResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from structlog.contextvars import bound_contextvars

from aries_avalon.domain.avalon_urls import AvalonURLs
from aries_avalon.domain.query import field_equals
from aries_avalon.domain.records import (
    ALTERNATE_ID_FIELD,
    DERIVATIVE_FILE_FIELD,
    DERIVED_FROM_FIELD,
    ID_FIELD,
    RECORD_FIELDS,
    IndexRecord,
    RecordKind,
    classify_record,
)
from aries_avalon.integrations.solr.client import SolrClient
from aries_avalon.integrations.solr.models import SolrQueryResult
from aries_avalon.platform.errors import (
    AmbiguousIdentifierError,
    NotFoundError,
    SolrError,
    ValidationError,
)
from aries_avalon.platform.logging import get_logger
from aries_avalon.platform.types import JSONObject

logger = get_logger(__name__)

SOLR_PROTOCOL = "solr"

# Page size for the derivative listing of a master file.
DERIVATIVE_ROWS = 100


@dataclass(frozen=True)
class ServiceURL:
    """A URL that can be queried for the record, and how to talk to it."""

    url: str
    protocol: str


@dataclass
class ResolutionResult:
    """Everything Aries knows about where a resolved record lives."""

    identifiers: list[str] = field(default_factory=list)
    service_urls: list[ServiceURL] = field(default_factory=list)
    access_urls: list[str] = field(default_factory=list)
    admin_urls: list[str] = field(default_factory=list)
    metadata_urls: list[str] = field(default_factory=list)
    master_files: list[str] = field(default_factory=list)
    derivative_files: list[str] = field(default_factory=list)


class AriesResolver:
    """Resolve identifiers to Avalon records."""

    def __init__(self, solr: SolrClient, urls: AvalonURLs) -> None:
        self.solr = solr
        self.urls = urls

    async def resolve(self, identifier: str) -> ResolutionResult:
        """Resolve ``identifier`` to a single Avalon record.

        The identifier is bound to the log context for the whole lookup.

        :raises ValidationError: If the identifier is blank.
        :raises NotFoundError: If no record matches.
        :raises AmbiguousIdentifierError: If more than one record matches.
        :raises SolrError: If a required Solr query fails.
        """
        with bound_contextvars(identifier=identifier):
            if not identifier.strip():
                logger.info("Blank identifier rejected")
                raise ValidationError("Identifier is required")
            try:
                return await self._resolve(identifier)
            except SolrError as e:
                logger.error("Lookup failed upstream", query=e.query, error=e.detail)
                raise

    async def _resolve(self, identifier: str) -> ResolutionResult:
        hits = await self._find(identifier)
        if hits.num_found == 0:
            logger.info("Identifier had no hits")
            raise NotFoundError(f"{identifier} not found")
        if hits.num_found > 1:
            logger.warning(
                "Identifier matched more than one record",
                num_found=hits.num_found,
                query=hits.url,
            )
            raise AmbiguousIdentifierError(identifier, hits.url, hits.num_found)
        if not hits.docs:
            raise SolrError(
                f"Solr reported one hit for {identifier} but returned no documents",
                query=hits.url,
            )

        try:
            record = classify_record(hits.docs[0])
        except ValueError as e:
            raise SolrError(str(e), query=hits.url) from e

        logger.info("Identifier resolved", record_id=record.id, kind=record.kind.value)
        return await self._derive(record, hits.url)

    async def _find(self, identifier: str) -> SolrQueryResult:
        """Primary id query, falling back to the alternate identifier field."""
        fl = ",".join(RECORD_FIELDS)
        hits = await self.solr.select(
            {"q": field_equals(ID_FIELD, identifier), "fl": fl, "indent": "true"}
        )
        if hits.num_found > 0:
            return hits

        logger.debug("No id match, trying alternate identifiers")
        return await self.solr.select(
            {
                "q": field_equals(ALTERNATE_ID_FIELD, identifier),
                "fl": fl,
                "indent": "true",
            }
        )

    async def _derive(self, record: IndexRecord, query_url: str) -> ResolutionResult:
        out = ResolutionResult(
            identifiers=[record.id, *record.alternate_ids],
            service_urls=[ServiceURL(url=query_url, protocol=SOLR_PROTOCOL)],
        )
        if record.file_location:
            out.master_files.append(record.file_location)

        match record.kind:
            case RecordKind.CONTAINER:
                out.metadata_urls.append(self.urls.media_object_metadata(record.id))
                out.access_urls.append(self.urls.media_object(record.id))
                out.admin_urls.append(self.urls.media_object_edit(record.id))
            case RecordKind.MEMBER:
                parent_id = record.parent_id
                assert parent_id is not None
                out.access_urls.append(self.urls.section(parent_id, record.id))
                out.admin_urls.append(self.urls.section_edit(parent_id, record.id))
                out.derivative_files.extend(await self._derivative_files(record.id))
            case RecordKind.OTHER:
                logger.info(
                    "Record is neither a media object nor a section",
                    record_id=record.id,
                    model=record.model,
                )
        return out

    async def _derivative_files(self, record_id: str) -> list[str]:
        """Derivative file locations for a master file; empty if Solr fails.

        Pages through the derivative query ``DERIVATIVE_ROWS`` at a time until
        ``numFound`` documents have been read.
        """
        params: dict[str, str | int] = {
            "q": field_equals(DERIVED_FROM_FIELD, record_id),
            "fl": f"{ID_FIELD},{DERIVATIVE_FILE_FIELD}",
            "rows": DERIVATIVE_ROWS,
        }
        files: list[str] = []
        start = 0
        while True:
            page = await self.solr.select_or_none({**params, "start": start})
            if page is None:
                return []
            files.extend(_derivative_paths(page.docs))
            start += len(page.docs)
            if start >= page.num_found:
                return files
            if not page.docs:
                logger.warning(
                    "Derivative listing ended early",
                    record_id=record_id,
                    num_found=page.num_found,
                    read=start,
                )
                return files


def _derivative_paths(docs: list[JSONObject]) -> list[str]:
    paths: list[str] = []
    for doc in docs:
        value = doc.get(DERIVATIVE_FILE_FIELD)
        if isinstance(value, list):
            value = value[0] if value else None
        if value:
            paths.append(str(value))
    return paths
