from app.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    LoginResponse,
    ProfileBrief,
    ProfileOut,
    ProfileUpdate,
)
from app.schemas.subject import SubjectCreate, SubjectUpdate, SubjectBrief, SubjectOut
from app.schemas.course import (
    CourseCreate,
    CourseUpdate,
    CourseBrief,
    CourseOut,
    CommentCreate,
    CommentOut,
)
from app.schemas.submission import SubmissionUpsert, GradeRequest, SubmissionOut, FileUrlOut
from app.schemas.dashboard import DashboardResponse, AnalyticsResponse
from app.schemas.search import SearchResult
from app.schemas.roster import ProfessorAssignRequest
from app.schemas.storage import UploadResponse, SignRequest, SignedUrlOut
from app.schemas.notification import (
    NotificationOut,
    EmailData,
    SendNotificationRequest,
    SendNotificationResponse,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "LoginResponse",
    "ProfileBrief",
    "ProfileOut",
    "ProfileUpdate",
    "SubjectCreate",
    "SubjectUpdate",
    "SubjectBrief",
    "SubjectOut",
    "CourseCreate",
    "CourseUpdate",
    "CourseBrief",
    "CourseOut",
    "CommentCreate",
    "CommentOut",
    "SubmissionUpsert",
    "GradeRequest",
    "SubmissionOut",
    "FileUrlOut",
    "DashboardResponse",
    "AnalyticsResponse",
    "SearchResult",
    "ProfessorAssignRequest",
    "UploadResponse",
    "SignRequest",
    "SignedUrlOut",
    "NotificationOut",
    "EmailData",
    "SendNotificationRequest",
    "SendNotificationResponse",
]
