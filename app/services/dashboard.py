from typing import Dict

from sqlalchemy.orm import Session

from app.models import User, Subject, Course, Submission, SubmissionStatus
from app.services.scope import scope_subjects, scope_courses, scope_submissions

RECENT_COURSES_LIMIT = 5


def build_dashboard(db: Session, user: User) -> Dict:
    submissions = scope_submissions(db.query(Submission), db, user)
    stats = {
        "subjects": scope_subjects(db.query(Subject), db, user).count(),
        "courses": scope_courses(db.query(Course), db, user).count(),
        "submissions": submissions.count(),
        "pending_submissions": submissions.filter(Submission.status == SubmissionStatus.pending).count(),
    }
    recent_courses = (
        scope_courses(db.query(Course), db, user)
        .order_by(Course.created_at.desc(), Course.id.desc())
        .limit(RECENT_COURSES_LIMIT)
        .all()
    )
    return {"stats": stats, "recent_courses": recent_courses}
