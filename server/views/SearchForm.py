from pydantic import BaseModel


class SearchForm(BaseModel):
    """
    Presentational search form: one text box plus suggested queries.

    The text box value is the only state the form carries. Submitting the
    form, or picking a suggestion, posts the query to ``action``.
    """

    action: str = "/search"
    field_name: str = "query"
    value: str = ""
    placeholder: str = "Search case law in plain English..."
    suggested_searches: list[str] = []
