"""In-memory aggregation behind the dashboard and analytics views."""
from collections import OrderedDict
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from app.models import User, UserRole, Subject, Course, Submission, SubmissionStatus

STATUS_COLORS = OrderedDict(
    [
        (SubmissionStatus.pending.value, "#F59E0B"),
        (SubmissionStatus.submitted.value, "#3B82F6"),
        (SubmissionStatus.graded.value, "#10B981"),
    ]
)
NO_SUBJECT = "No subject"
NO_SUBJECT_COLOR = "#6B7280"
GRADE_BUCKETS = (("0-5", 5), ("6-10", 10), ("11-15", 15), ("16-20", None))
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def count_by_status(statuses: Iterable[str]) -> List[Dict]:
    counts = OrderedDict((status, 0) for status in STATUS_COLORS)
    for status in statuses:
        if status in counts:
            counts[status] += 1
    return [{"status": status, "value": value, "color": STATUS_COLORS[status]} for status, value in counts.items()]


def count_courses_by_subject(subjects: Iterable[Tuple[Optional[str], Optional[str]]]) -> List[Dict]:
    """Group ``(subject_name, subject_color)`` pairs, one per course, in first-seen order."""
    groups: Dict[str, Dict] = OrderedDict()
    for name, color in subjects:
        name = name or NO_SUBJECT
        if name not in groups:
            groups[name] = {"name": name, "count": 0, "color": color or NO_SUBJECT_COLOR}
        groups[name]["count"] += 1
    return list(groups.values())


def count_per_day(timestamps: Iterable[datetime], today: date, days: int = 7) -> List[Dict]:
    counts: Dict[date, int] = {}
    for ts in timestamps:
        if ts is not None:
            counts[ts.date()] = counts.get(ts.date(), 0) + 1

    series = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        series.append({"date": day.isoformat(), "label": WEEKDAYS[day.weekday()], "count": counts.get(day, 0)})
    return series


def grade_distribution(grades: Iterable[float]) -> List[Dict]:
    counts = OrderedDict((label, 0) for label, _ in GRADE_BUCKETS)
    for grade in grades:
        for label, upper in GRADE_BUCKETS:
            if upper is None or grade <= upper:
                counts[label] += 1
                break
    return [{"range": label, "count": count} for label, count in counts.items()]


def average_grade(grades: List[float]) -> float:
    if not grades:
        return 0.0
    return round(sum(grades) / len(grades), 1)


def build_analytics(db: Session, today: Optional[date] = None) -> Dict:
    today = today or datetime.utcnow().date()

    total_students = db.query(User).filter(User.role == UserRole.student).count()
    total_professors = db.query(User).filter(User.role == UserRole.professor).count()
    course_subjects = (
        db.query(Subject.name, Subject.color)
        .select_from(Course)
        .outerjoin(Subject, Course.subject_id == Subject.id)
        .all()
    )
    submissions = db.query(Submission.status, Submission.grade, Submission.created_at).all()
    grades = [float(row.grade) for row in submissions if row.grade is not None]

    return {
        "total_students": total_students,
        "total_professors": total_professors,
        "total_courses": len(course_subjects),
        "total_submissions": len(submissions),
        "average_grade": average_grade(grades),
        "submissions_by_status": count_by_status(row.status.value for row in submissions),
        "courses_by_subject": count_courses_by_subject((row.name, row.color) for row in course_subjects),
        "submissions_over_time": count_per_day((row.created_at for row in submissions), today),
        "grade_distribution": grade_distribution(grades),
    }
