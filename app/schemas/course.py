from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.auth import ProfileBrief
from app.schemas.subject import SubjectBrief


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class CourseCreate(BaseModel):
    title: str = Field(min_length=1)
    subject_id: int
    description: Optional[str] = None
    content: Optional[str] = None
    deadline: Optional[datetime] = None
    file_url: Optional[str] = None

    @field_validator("deadline")
    @classmethod
    def deadline_in_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)


class CourseUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    subject_id: Optional[int] = None
    description: Optional[str] = None
    content: Optional[str] = None
    deadline: Optional[datetime] = None
    file_url: Optional[str] = None

    @field_validator("deadline")
    @classmethod
    def deadline_in_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)


class CourseBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    deadline: Optional[datetime] = None
    subject: Optional[SubjectBrief] = None


class CourseOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    content: Optional[str] = None
    subject_id: int
    professor_id: Optional[int] = None
    deadline: Optional[datetime] = None
    deadline_passed: bool
    file_url: Optional[str] = None
    subject: Optional[SubjectBrief] = None
    professor: Optional[ProfileBrief] = None
    created_at: datetime


class CommentCreate(BaseModel):
    content: str


class CommentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: int
    user_id: int
    content: str
    user: Optional[ProfileBrief] = None
    created_at: datetime
