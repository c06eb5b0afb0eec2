from app.models.user import User, UserRole
from app.models.subject import Subject
from app.models.course import Course
from app.models.submission import Submission, SubmissionStatus
from app.models.comment import Comment
from app.models.professor_student import ProfessorStudent
from app.models.notification import Notification, NotificationType

__all__ = [
    "User",
    "UserRole",
    "Subject",
    "Course",
    "Submission",
    "SubmissionStatus",
    "Comment",
    "ProfessorStudent",
    "Notification",
    "NotificationType",
]
