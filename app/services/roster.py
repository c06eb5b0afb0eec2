import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.models import User, UserRole, ProfessorStudent

logger = logging.getLogger(__name__)


def get_professor_id(db: Session, student_id: int) -> Optional[int]:
    link = db.query(ProfessorStudent).filter(ProfessorStudent.student_id == student_id).first()
    return link.professor_id if link else None


def get_student_ids(db: Session, professor_id: int) -> List[int]:
    rows = db.query(ProfessorStudent.student_id).filter(ProfessorStudent.professor_id == professor_id).all()
    return [row.student_id for row in rows]


def get_students_of(db: Session, professor_id: int) -> List[User]:
    student_ids = get_student_ids(db, professor_id)
    if not student_ids:
        return []
    return db.query(User).filter(User.id.in_(student_ids)).order_by(User.full_name).all()


def list_visible_students(db: Session, user: User) -> List[User]:
    """Students a user may see: a professor's own roster or a student's classmates."""
    if user.is_professor:
        return get_students_of(db, user.id)

    professor_id = get_professor_id(db, user.id)
    if professor_id is None:
        return []
    return get_students_of(db, professor_id)


def assign_professor(db: Session, student: User, professor_id: int) -> User:
    professor = (
        db.query(User)
        .filter(User.id == professor_id, User.role == UserRole.professor)
        .first()
    )
    if not professor:
        raise HTTPException(status_code=404, detail="Professor not found")

    db.query(ProfessorStudent).filter(ProfessorStudent.student_id == student.id).delete(synchronize_session=False)
    db.add(ProfessorStudent(professor_id=professor.id, student_id=student.id))
    db.commit()
    logger.info("Student %s assigned to professor %s", student.id, professor.id)
    return professor
