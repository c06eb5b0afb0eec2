import logging
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_user, get_current_professor, get_current_student
from app.models import User, Subject, Course, Comment, NotificationType
from app.schemas.course import CourseCreate, CourseUpdate, CourseOut, CommentCreate, CommentOut
from app.schemas.notification import EmailData
from app.schemas.submission import SubmissionUpsert, SubmissionOut
from app.services.notifications import notify, notify_many
from app.services.roster import get_students_of
from app.services.scope import scope_courses, scope_subjects, can_manage
from app.services.submissions import get_student_submission, submit_work

router = APIRouter(tags=["courses"])
logger = logging.getLogger(__name__)


def get_visible_course(db: Session, course_id: int, user: User) -> Course:
    course = scope_courses(db.query(Course), db, user).filter(Course.id == course_id).first()
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    return course


def get_managed_course(db: Session, course_id: int, user: User) -> Course:
    course = db.query(Course).filter(Course.id == course_id).first()
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    if not can_manage(user, course.professor_id):
        raise HTTPException(status_code=403, detail="Only the course owner can change it")
    return course


def get_usable_subject(db: Session, subject_id: int, user: User) -> Subject:
    subject = scope_subjects(db.query(Subject), db, user).filter(Subject.id == subject_id).first()
    if not subject:
        raise HTTPException(status_code=404, detail="Subject not found")
    return subject


@router.get("/courses", response_model=list[CourseOut])
def list_courses(
    subject_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = scope_courses(db.query(Course), db, current_user)
    if subject_id is not None:
        query = query.filter(Course.subject_id == subject_id)
    return query.order_by(Course.created_at.desc(), Course.id.desc()).all()


@router.get("/courses/{course_id}", response_model=CourseOut)
def get_course(
    course_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return get_visible_course(db, course_id, current_user)


@router.post("/courses", response_model=CourseOut, status_code=201)
def create_course(
    payload: CourseCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_professor: User = Depends(get_current_professor),
):
    subject = get_usable_subject(db, payload.subject_id, current_professor)
    course = Course(
        title=payload.title.strip(),
        description=payload.description,
        content=payload.content,
        subject_id=subject.id,
        professor_id=current_professor.id,
        deadline=payload.deadline,
        file_url=payload.file_url or None,
    )
    db.add(course)
    db.flush()

    notify_many(
        db,
        background_tasks,
        get_students_of(db, current_professor.id),
        NotificationType.new_course,
        EmailData(
            course_name=course.title,
            subject_name=subject.name,
            professor_name=current_professor.full_name,
        ),
    )
    db.commit()
    db.refresh(course)
    logger.info("Course %s created by %s", course.id, current_professor.id)
    return course


@router.patch("/courses/{course_id}", response_model=CourseOut)
def update_course(
    course_id: int,
    payload: CourseUpdate,
    db: Session = Depends(get_db),
    current_professor: User = Depends(get_current_professor),
):
    course = get_managed_course(db, course_id, current_professor)

    if payload.title is not None:
        course.title = payload.title.strip()
    if payload.subject_id is not None:
        course.subject_id = get_usable_subject(db, payload.subject_id, current_professor).id
    if payload.description is not None:
        course.description = payload.description
    if payload.content is not None:
        course.content = payload.content
    # explicit null clears the deadline / attachment
    if "deadline" in payload.model_fields_set:
        course.deadline = payload.deadline
    if "file_url" in payload.model_fields_set:
        course.file_url = payload.file_url or None

    db.commit()
    db.refresh(course)
    return course


@router.delete("/courses/{course_id}")
def delete_course(
    course_id: int,
    db: Session = Depends(get_db),
    current_professor: User = Depends(get_current_professor),
):
    course = get_managed_course(db, course_id, current_professor)
    db.delete(course)
    db.commit()
    logger.info("Course %s deleted by %s", course_id, current_professor.id)
    return {"ok": True}


@router.get("/courses/{course_id}/comments", response_model=list[CommentOut])
def list_comments(
    course_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    get_visible_course(db, course_id, current_user)
    return (
        db.query(Comment)
        .filter(Comment.course_id == course_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )


@router.post("/courses/{course_id}/comments", response_model=CommentOut, status_code=201)
def add_comment(
    course_id: int,
    payload: CommentCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    course = get_visible_course(db, course_id, current_user)
    content = payload.content.strip()
    if not content:
        raise HTTPException(status_code=400, detail="Comment cannot be empty")

    comment = Comment(course_id=course.id, user_id=current_user.id, content=content)
    db.add(comment)

    if course.professor and course.professor_id != current_user.id:
        notify(
            db,
            background_tasks,
            course.professor,
            NotificationType.comment_added,
            EmailData(course_name=course.title, comment_author=current_user.full_name, comment=content),
        )

    db.commit()
    db.refresh(comment)
    return comment


@router.get("/courses/{course_id}/submission", response_model=Optional[SubmissionOut])
def my_submission(
    course_id: int,
    db: Session = Depends(get_db),
    current_student: User = Depends(get_current_student),
):
    get_visible_course(db, course_id, current_student)
    return get_student_submission(db, course_id, current_student.id)


@router.put("/courses/{course_id}/submission", response_model=SubmissionOut)
def submit_course_work(
    course_id: int,
    payload: SubmissionUpsert,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_student: User = Depends(get_current_student),
):
    course = get_visible_course(db, course_id, current_student)
    submission = submit_work(db, course, current_student, payload.content, payload.file_url)

    if course.professor:
        notify(
            db,
            background_tasks,
            course.professor,
            NotificationType.submission_received,
            EmailData(
                course_name=course.title,
                subject_name=course.subject.name if course.subject else None,
                student_name=current_student.full_name,
            ),
        )

    db.commit()
    db.refresh(submission)
    logger.info("Student %s submitted work for course %s", current_student.id, course.id)
    return submission
