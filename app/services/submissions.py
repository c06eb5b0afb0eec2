from datetime import datetime
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.models import Course, Submission, SubmissionStatus, User


def get_student_submission(db: Session, course_id: int, student_id: int) -> Optional[Submission]:
    return db.query(Submission).filter(
        Submission.course_id == course_id,
        Submission.student_id == student_id,
    ).first()


def submit_work(
    db: Session,
    course: Course,
    student: User,
    content: Optional[str],
    file_url: Optional[str],
) -> Submission:
    """Create or replace the student's work for a course and mark it submitted."""
    content = (content or "").strip()
    file_url = file_url or None
    if not content and not file_url:
        raise HTTPException(status_code=400, detail="Add some content or a file")

    submission = get_student_submission(db, course.id, student.id)
    if submission and submission.status == SubmissionStatus.graded:
        raise HTTPException(status_code=400, detail="Submission already graded")

    if submission is None:
        submission = Submission(course_id=course.id, student_id=student.id)
        db.add(submission)

    submission.content = content or None
    submission.file_url = file_url
    submission.status = SubmissionStatus.submitted
    submission.submitted_at = datetime.utcnow()
    return submission
