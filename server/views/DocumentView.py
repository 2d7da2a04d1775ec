from pydantic import BaseModel

from shared.models.document import SearchResult


class DocumentView(BaseModel):
    """
    Presentational detail view of one selected search result with a back action.
    """

    title: str
    quote: str
    content: str
    details: dict = {}
    back_action: str = "/documents/back"

    @classmethod
    def from_result(cls, result: SearchResult) -> "DocumentView":
        """Build the view for a result. The quote is the page content of the matched document.

        Args:
            result (SearchResult): The selected result.

        Returns:
            DocumentView: The view model.
        """
        return cls(
            title=result.metadata.title,
            quote=result.metadata.pageContent,
            content=result.content,
            details={key: value for key, value in result.metadata.get_extra_fields().items() if value is not None},
        )
