from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_user, get_current_professor
from app.models import User, Submission, NotificationType
from app.schemas.notification import EmailData
from app.schemas.submission import GradeRequest, SubmissionOut, FileUrlOut
from app.services import storage
from app.services.grading import grade_submission
from app.services.notifications import notify
from app.services.scope import scope_submissions, can_manage

router = APIRouter(tags=["submissions"])


def get_visible_submission(db: Session, submission_id: int, user: User) -> Submission:
    submission = (
        scope_submissions(db.query(Submission), db, user)
        .filter(Submission.id == submission_id)
        .first()
    )
    if not submission:
        raise HTTPException(status_code=404, detail="Submission not found")
    return submission


@router.get("/submissions", response_model=list[SubmissionOut])
def list_submissions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return (
        scope_submissions(db.query(Submission), db, current_user)
        .order_by(Submission.created_at.desc(), Submission.id.desc())
        .all()
    )


@router.post("/submissions/{submission_id}/grade", response_model=SubmissionOut)
def grade(
    submission_id: int,
    payload: GradeRequest,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_professor: User = Depends(get_current_professor),
):
    submission = db.query(Submission).filter(Submission.id == submission_id).first()
    if not submission:
        raise HTTPException(status_code=404, detail="Submission not found")
    if not can_manage(current_professor, submission.course.professor_id):
        raise HTTPException(status_code=403, detail="Only the course owner can grade this submission")

    grade_submission(submission, payload.grade, payload.feedback)
    notify(
        db,
        background_tasks,
        submission.student,
        NotificationType.submission_graded,
        EmailData(course_name=submission.course.title, grade=payload.grade, feedback=payload.feedback),
    )
    db.commit()
    db.refresh(submission)
    return submission


@router.get("/submissions/{submission_id}/file", response_model=FileUrlOut)
def submission_file(
    submission_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> FileUrlOut:
    submission = get_visible_submission(db, submission_id, current_user)
    if not submission.file_url:
        raise HTTPException(status_code=404, detail="No file attached")

    bucket = storage.get_bucket(storage.SUBMISSION_FILES)
    path = storage.path_from_url(submission.file_url, bucket)
    if path is None:
        return FileUrlOut(url=submission.file_url)
    return FileUrlOut(url=storage.signed_url(bucket, path))
