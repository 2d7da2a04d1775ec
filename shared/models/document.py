"""Case law documents and search results as returned by the search backend."""

from pydantic import BaseModel, ConfigDict


class DocumentMetadata(BaseModel):
    """
    Metadata of a single legal case or opinion.

    Only title and pageContent are interpreted by the page; every other
    field sent by the backend is kept untouched.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    title: str = ""
    pageContent: str = ""

    def get_extra_fields(self) -> dict:
        """
        Returns all metadata fields besides title and pageContent, e.g. court or decision date.
        """
        return dict(self.model_extra or {})


class Document(BaseModel):
    """
    A legal case/document record. Fields besides metadata stay opaque.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    metadata: DocumentMetadata


class SearchResult(Document):
    """
    A single hit of a search response, combining document metadata and the matched content.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    content: str = ""


class SearchResponse(BaseModel):
    """
    Response body of the search endpoint.
    """

    results: list[SearchResult] = []
