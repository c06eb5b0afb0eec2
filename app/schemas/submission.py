from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.submission import SubmissionStatus
from app.schemas.auth import ProfileBrief
from app.schemas.course import CourseBrief


class SubmissionUpsert(BaseModel):
    content: Optional[str] = None
    file_url: Optional[str] = None


class GradeRequest(BaseModel):
    grade: float = Field(allow_inf_nan=False)
    feedback: Optional[str] = None


class SubmissionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: int
    student_id: int
    content: Optional[str] = None
    file_url: Optional[str] = None
    grade: Optional[float] = None
    feedback: Optional[str] = None
    status: SubmissionStatus
    submitted_at: Optional[datetime] = None
    graded_at: Optional[datetime] = None
    created_at: datetime
    course: Optional[CourseBrief] = None
    student: Optional[ProfileBrief] = None


class FileUrlOut(BaseModel):
    url: str
