"""Wire models for Solr ``select`` responses (``wt=json``)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from aries_avalon.platform.types import JSONObject


class SolrResponseHeader(BaseModel):
    """Standard Solr response header."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: int
    q_time: int = Field(default=0, alias="QTime")


class SolrResultSet(BaseModel):
    """Hits for a Solr query."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    num_found: int = Field(alias="numFound")
    start: int = 0
    docs: list[JSONObject] = Field(default_factory=list)


class SolrSelectResponse(BaseModel):
    """Complete Solr select response: a header plus the result set."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    response_header: SolrResponseHeader = Field(alias="responseHeader")
    response: SolrResultSet


class SolrQueryResult(BaseModel):
    """A parsed select response together with the URL that produced it."""

    url: str
    body: SolrSelectResponse

    @property
    def num_found(self) -> int:
        return self.body.response.num_found

    @property
    def docs(self) -> list[JSONObject]:
        return self.body.response.docs
