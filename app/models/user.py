import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.orm import relationship

from app.db.base import Base


class UserRole(str, enum.Enum):
    student = "student"
    professor = "professor"
    admin = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    full_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(Enum(UserRole, name="user_role"), nullable=False, default=UserRole.student)

    avatar_url = Column(String, nullable=True)
    class_name = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    subjects = relationship("Subject", back_populates="professor", cascade="all, delete-orphan")
    courses = relationship("Course", back_populates="professor", cascade="all, delete-orphan")
    submissions = relationship("Submission", back_populates="student", cascade="all, delete-orphan")
    comments = relationship("Comment", back_populates="user", cascade="all, delete-orphan")
    notifications = relationship("Notification", back_populates="user", cascade="all, delete-orphan")

    student_links = relationship(
        "ProfessorStudent",
        foreign_keys="ProfessorStudent.professor_id",
        back_populates="professor",
        cascade="all, delete-orphan",
    )
    professor_link = relationship(
        "ProfessorStudent",
        foreign_keys="ProfessorStudent.student_id",
        back_populates="student",
        cascade="all, delete-orphan",
        uselist=False,
    )

    @property
    def is_professor(self) -> bool:
        return self.role in (UserRole.professor, UserRole.admin)
