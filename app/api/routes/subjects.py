import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_user, get_current_professor
from app.models import User, Subject
from app.schemas.subject import SubjectCreate, SubjectUpdate, SubjectOut
from app.services.scope import scope_subjects, can_manage

router = APIRouter(tags=["subjects"])
logger = logging.getLogger(__name__)


def get_managed_subject(db: Session, subject_id: int, user: User) -> Subject:
    subject = db.query(Subject).filter(Subject.id == subject_id).first()
    if not subject:
        raise HTTPException(status_code=404, detail="Subject not found")
    if not can_manage(user, subject.professor_id):
        raise HTTPException(status_code=403, detail="Only the subject owner can change it")
    return subject


@router.get("/subjects", response_model=list[SubjectOut])
def list_subjects(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return (
        scope_subjects(db.query(Subject), db, current_user)
        .order_by(Subject.created_at.desc(), Subject.id.desc())
        .all()
    )


@router.post("/subjects", response_model=SubjectOut, status_code=201)
def create_subject(
    payload: SubjectCreate,
    db: Session = Depends(get_db),
    current_professor: User = Depends(get_current_professor),
):
    subject = Subject(
        name=payload.name.strip(),
        description=payload.description,
        color=payload.color,
        professor_id=current_professor.id,
    )
    db.add(subject)
    db.commit()
    db.refresh(subject)
    logger.info("Subject %s created by %s", subject.id, current_professor.id)
    return subject


@router.patch("/subjects/{subject_id}", response_model=SubjectOut)
def update_subject(
    subject_id: int,
    payload: SubjectUpdate,
    db: Session = Depends(get_db),
    current_professor: User = Depends(get_current_professor),
):
    subject = get_managed_subject(db, subject_id, current_professor)

    if payload.name is not None:
        subject.name = payload.name.strip()
    if payload.description is not None:
        subject.description = payload.description
    if payload.color is not None:
        subject.color = payload.color

    db.commit()
    db.refresh(subject)
    return subject


@router.delete("/subjects/{subject_id}")
def delete_subject(
    subject_id: int,
    db: Session = Depends(get_db),
    current_professor: User = Depends(get_current_professor),
):
    subject = get_managed_subject(db, subject_id, current_professor)
    db.delete(subject)
    db.commit()
    logger.info("Subject %s deleted by %s", subject_id, current_professor.id)
    return {"ok": True}
