from typing import List

from pydantic import BaseModel

from app.schemas.course import CourseBrief


class DashboardStats(BaseModel):
    subjects: int
    courses: int
    submissions: int
    pending_submissions: int


class DashboardResponse(BaseModel):
    stats: DashboardStats
    recent_courses: List[CourseBrief]


class StatusSlice(BaseModel):
    status: str
    value: int
    color: str


class SubjectCount(BaseModel):
    name: str
    count: int
    color: str


class DayCount(BaseModel):
    date: str
    label: str
    count: int


class GradeBucket(BaseModel):
    range: str
    count: int


class AnalyticsResponse(BaseModel):
    total_students: int
    total_professors: int
    total_courses: int
    total_submissions: int
    average_grade: float
    submissions_by_status: List[StatusSlice]
    courses_by_subject: List[SubjectCount]
    submissions_over_time: List[DayCount]
    grade_distribution: List[GradeBucket]
