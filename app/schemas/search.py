from typing import Optional, Literal

from pydantic import BaseModel


class SearchResult(BaseModel):
    id: int
    type: Literal["course", "subject", "student"]
    title: str
    subtitle: Optional[str] = None
    color: Optional[str] = None
