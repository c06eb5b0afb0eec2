from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    content = Column(Text, nullable=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False)
    professor_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    deadline = Column(DateTime, nullable=True)
    file_url = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    subject = relationship("Subject", back_populates="courses")
    professor = relationship("User", back_populates="courses")
    submissions = relationship("Submission", back_populates="course", cascade="all, delete-orphan")
    comments = relationship(
        "Comment",
        back_populates="course",
        cascade="all, delete-orphan",
        order_by="Comment.created_at",
    )

    @property
    def deadline_passed(self) -> bool:
        return self.deadline is not None and self.deadline < datetime.utcnow()
