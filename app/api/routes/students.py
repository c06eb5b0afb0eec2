from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_user, get_current_student
from app.models import User, UserRole
from app.schemas.auth import ProfileOut
from app.schemas.roster import ProfessorAssignRequest
from app.services.roster import list_visible_students, get_professor_id, assign_professor

router = APIRouter(tags=["students"])


@router.get("/students", response_model=list[ProfileOut])
def list_students(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return list_visible_students(db, current_user)


@router.get("/professors", response_model=list[ProfileOut])
def list_professors(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return db.query(User).filter(User.role == UserRole.professor).order_by(User.full_name).all()


@router.get("/me/professor", response_model=Optional[ProfileOut])
def my_professor(
    db: Session = Depends(get_db),
    current_student: User = Depends(get_current_student),
):
    professor_id = get_professor_id(db, current_student.id)
    if professor_id is None:
        return None
    return db.query(User).filter(User.id == professor_id).first()


@router.put("/me/professor", response_model=ProfileOut)
def change_professor(
    payload: ProfessorAssignRequest,
    db: Session = Depends(get_db),
    current_student: User = Depends(get_current_student),
):
    return assign_professor(db, current_student, payload.professor_id)
