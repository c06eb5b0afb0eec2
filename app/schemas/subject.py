from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.auth import ProfileBrief

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class SubjectCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    color: str = Field(default="#3B82F6", pattern=HEX_COLOR)


class SubjectUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR)


class SubjectBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str


class SubjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    color: str
    professor_id: Optional[int] = None
    professor: Optional[ProfileBrief] = None
    created_at: datetime
