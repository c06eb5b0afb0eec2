"""In-app notifications and best-effort email delivery.

In-app rows are added to the caller's session and committed with the change
that triggered them. Emails go out after the response through background
tasks; a failed email is logged and dropped.
"""
import logging
from typing import Iterable

from fastapi import BackgroundTasks
from sqlalchemy.orm import Session

from app.models import Notification, NotificationType, User
from app.models.submission import MAX_GRADE
from app.schemas.notification import EmailData
from app.services.mailer import send_notification_email

logger = logging.getLogger(__name__)

TITLES = {
    NotificationType.submission_received: "New submission",
    NotificationType.submission_graded: "Work graded",
    NotificationType.new_course: "New course",
    NotificationType.comment_added: "New comment",
}


def build_message(type: NotificationType, data: EmailData) -> str:
    if type == NotificationType.submission_received:
        return f"{data.student_name} submitted work for {data.course_name}"
    if type == NotificationType.submission_graded:
        grade = f"{data.grade:g}" if data.grade is not None else "-"
        return f"Your work for {data.course_name} was graded: {grade}/{MAX_GRADE}"
    if type == NotificationType.new_course:
        return f"{data.professor_name} published {data.course_name}"
    return f"{data.comment_author} commented on {data.course_name}"


def deliver_email(to: str, to_name: str, type: str, data: EmailData) -> None:
    try:
        result = send_notification_email(to, to_name, type, data)
    except Exception:
        logger.exception("Notification email to %s crashed", to)
        return
    if not result.get("success"):
        logger.warning("Notification email to %s not sent: %s", to, result.get("error"))


def notify(
    db: Session,
    background_tasks: BackgroundTasks,
    recipient: User,
    type: NotificationType,
    data: EmailData,
) -> Notification:
    notification = Notification(
        user_id=recipient.id,
        title=TITLES[type],
        message=build_message(type, data),
        type=type.value,
        data=data.model_dump(by_alias=True, exclude_none=True),
    )
    db.add(notification)
    if recipient.email:
        background_tasks.add_task(deliver_email, recipient.email, recipient.full_name, type.value, data)
    return notification


def notify_many(
    db: Session,
    background_tasks: BackgroundTasks,
    recipients: Iterable[User],
    type: NotificationType,
    data: EmailData,
) -> int:
    count = 0
    for recipient in recipients:
        notify(db, background_tasks, recipient, type, data)
        count += 1
    logger.info("Queued %s %s notifications", count, type.value)
    return count
