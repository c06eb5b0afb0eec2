from datetime import datetime
from typing import Optional, Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class NotificationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    message: str
    type: str
    data: Optional[dict] = None
    read: bool
    created_at: datetime


class EmailData(BaseModel):
    """Template variables of a notification email, camelCase on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    course_name: Optional[str] = Field(default=None, alias="courseName")
    subject_name: Optional[str] = Field(default=None, alias="subjectName")
    grade: Optional[float] = None
    feedback: Optional[str] = None
    student_name: Optional[str] = Field(default=None, alias="studentName")
    professor_name: Optional[str] = Field(default=None, alias="professorName")
    comment_author: Optional[str] = Field(default=None, alias="commentAuthor")
    comment: Optional[str] = None


class SendNotificationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    to: EmailStr
    to_name: str = Field(alias="toName")
    type: str
    data: EmailData = Field(default_factory=EmailData)


class SendNotificationResponse(BaseModel):
    success: bool
    skipped: Optional[bool] = None
    data: Optional[Any] = None
    error: Optional[str] = None
