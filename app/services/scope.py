"""Role-based visibility of subjects, courses and submissions.

Admins see everything, professors see what they own, students see what
their professor owns plus their own submissions.
"""
from sqlalchemy import false, select
from sqlalchemy.orm import Query, Session

from app.models import User, UserRole, Subject, Course, Submission
from app.services.roster import get_professor_id


def _owner_id(db: Session, user: User):
    if user.role == UserRole.professor:
        return user.id
    return get_professor_id(db, user.id)


def scope_subjects(query: Query, db: Session, user: User) -> Query:
    if user.role == UserRole.admin:
        return query
    owner_id = _owner_id(db, user)
    if owner_id is None:
        return query.filter(false())
    return query.filter(Subject.professor_id == owner_id)


def scope_courses(query: Query, db: Session, user: User) -> Query:
    if user.role == UserRole.admin:
        return query
    owner_id = _owner_id(db, user)
    if owner_id is None:
        return query.filter(false())
    return query.filter(Course.professor_id == owner_id)


def scope_submissions(query: Query, db: Session, user: User) -> Query:
    if user.role == UserRole.admin:
        return query
    if user.role == UserRole.student:
        return query.filter(Submission.student_id == user.id)
    owned = select(Course.id).where(Course.professor_id == user.id)
    return query.filter(Submission.course_id.in_(owned))


def can_manage(user: User, owner_id) -> bool:
    return user.role == UserRole.admin or (user.role == UserRole.professor and owner_id == user.id)
