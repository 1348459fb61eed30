from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SearchResultItem(BaseModel):
    """One item of a Custom Search response (``items[]``)."""

    url: str = Field(default="", alias="link")
    snippet: str = ""
    html_snippet: str | None = Field(default=None, alias="htmlSnippet")
    file_format: str | None = Field(default=None, alias="fileFormat")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
