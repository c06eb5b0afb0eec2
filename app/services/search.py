from typing import List

from sqlalchemy.orm import Session

from app.models import User, Subject, Course
from app.services.roster import get_student_ids
from app.services.scope import scope_subjects, scope_courses
from app.schemas.search import SearchResult

MIN_QUERY_LENGTH = 2
RESULTS_PER_KIND = 3


def global_search(db: Session, user: User, query: str) -> List[SearchResult]:
    query = query.strip()
    if len(query) < MIN_QUERY_LENGTH:
        return []
    pattern = f"%{query}%"
    results: List[SearchResult] = []

    courses = (
        scope_courses(db.query(Course), db, user)
        .filter(Course.title.ilike(pattern))
        .order_by(Course.created_at.desc())
        .limit(RESULTS_PER_KIND)
        .all()
    )
    for course in courses:
        results.append(
            SearchResult(
                id=course.id,
                type="course",
                title=course.title,
                subtitle=course.subject.name if course.subject else None,
                color=course.subject.color if course.subject else None,
            )
        )

    subjects = (
        scope_subjects(db.query(Subject), db, user)
        .filter(Subject.name.ilike(pattern))
        .order_by(Subject.name)
        .limit(RESULTS_PER_KIND)
        .all()
    )
    for subject in subjects:
        results.append(SearchResult(id=subject.id, type="subject", title=subject.name, color=subject.color))

    if user.is_professor:
        student_ids = get_student_ids(db, user.id)
        if student_ids:
            students = (
                db.query(User)
                .filter(User.id.in_(student_ids), User.full_name.ilike(pattern))
                .order_by(User.full_name)
                .limit(RESULTS_PER_KIND)
                .all()
            )
            for student in students:
                results.append(
                    SearchResult(id=student.id, type="student", title=student.full_name, subtitle=student.email)
                )

    return results
