from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Literal

SourceTag = Literal["encyclopedia", "instant_answer", "news"]

class SourceItem(BaseModel):
    title: str
    url: str
    snippet: Optional[str] = None
    source: SourceTag

class SearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str
    items: List[SourceItem]
    took_ms: int = Field(0, alias="tookMs")

    def to_payload(self) -> dict:
        # absent snippets are dropped rather than sent as null
        return self.model_dump(by_alias=True, exclude_none=True)
