import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, Float, DateTime, Enum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base

MIN_GRADE = 0
MAX_GRADE = 20


class SubmissionStatus(str, enum.Enum):
    pending = "pending"
    submitted = "submitted"
    graded = "graded"


class Submission(Base):
    __tablename__ = "submissions"
    __table_args__ = (UniqueConstraint("course_id", "student_id", name="uq_submission_course_student"),)

    id = Column(Integer, primary_key=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    content = Column(Text, nullable=True)
    file_url = Column(String, nullable=True)
    grade = Column(Float, nullable=True)
    feedback = Column(Text, nullable=True)
    status = Column(
        Enum(SubmissionStatus, name="submission_status"),
        nullable=False,
        default=SubmissionStatus.pending,
    )
    submitted_at = Column(DateTime, nullable=True)
    graded_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    course = relationship("Course", back_populates="submissions")
    student = relationship("User", back_populates="submissions")
