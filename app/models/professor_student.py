from datetime import datetime

from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.base import Base


class ProfessorStudent(Base):
    __tablename__ = "professor_students"
    # a student belongs to at most one professor
    __table_args__ = (UniqueConstraint("student_id", name="uq_professor_students_student"),)

    id = Column(Integer, primary_key=True)
    professor_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    professor = relationship("User", foreign_keys=[professor_id], back_populates="student_links")
    student = relationship("User", foreign_keys=[student_id], back_populates="professor_link")
