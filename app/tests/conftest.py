import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import get_settings
from app.db.base import Base
from app.api.deps import get_db
from app.core.security import hash_password
from app.models import User, UserRole, Subject, Course, ProfessorStudent
from app.services.auth import build_access_token


@pytest.fixture(scope="session")
def db_engine(tmp_path_factory):
    db_path = tmp_path_factory.mktemp("data") / "test.db"
    os.environ["DATABASE_URL"] = f"sqlite:///{db_path}"
    os.environ.pop("RESEND_API_KEY", None)
    get_settings.cache_clear()
    settings = get_settings()
    engine = create_engine(settings.database_url, connect_args={"check_same_thread": False})
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(db_engine):
    Base.metadata.create_all(db_engine)
    session_local = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = session_local()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(db_engine)


@pytest.fixture(autouse=True)
def files_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("FILES_DIR", str(tmp_path / "uploads"))
    get_settings.cache_clear()
    yield tmp_path / "uploads"
    get_settings.cache_clear()


@pytest.fixture()
def client(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from app.main import app

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def sent_emails(monkeypatch):
    sent = []

    def fake_send(to, to_name, type, data):
        sent.append({"to": to, "to_name": to_name, "type": type, "data": data})
        return {"success": True, "data": {"id": "test"}}

    monkeypatch.setattr("app.services.notifications.send_notification_email", fake_send)
    return sent


def auth_headers(user: User) -> dict:
    token = build_access_token(user_id=user.id, role=user.role.value, expires_minutes=30)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def headers_for():
    return auth_headers


@pytest.fixture()
def seed_data(db_session):
    professor = User(
        full_name="Claire Martin",
        email="claire@example.com",
        password_hash=hash_password("professor123"),
        role=UserRole.professor,
    )
    other_professor = User(
        full_name="Paul Durand",
        email="paul@example.com",
        password_hash=hash_password("professor123"),
        role=UserRole.professor,
    )
    admin = User(
        full_name="Admin",
        email="admin@example.com",
        password_hash=hash_password("admin123"),
        role=UserRole.admin,
    )
    student = User(
        full_name="Lucas Bernard",
        email="lucas@example.com",
        password_hash=hash_password("student123"),
        role=UserRole.student,
    )
    classmate = User(
        full_name="Emma Petit",
        email="emma@example.com",
        password_hash=hash_password("student123"),
        role=UserRole.student,
    )
    loner = User(
        full_name="Zoe Roux",
        email="zoe@example.com",
        password_hash=hash_password("student123"),
        role=UserRole.student,
    )
    db_session.add_all([professor, other_professor, admin, student, classmate, loner])
    db_session.flush()

    db_session.add_all([
        ProfessorStudent(professor_id=professor.id, student_id=student.id),
        ProfessorStudent(professor_id=professor.id, student_id=classmate.id),
    ])

    subject = Subject(name="Algorithms", color="#8B5CF6", professor_id=professor.id)
    other_subject = Subject(name="Chemistry", color="#EF4444", professor_id=other_professor.id)
    db_session.add_all([subject, other_subject])
    db_session.flush()

    course = Course(
        title="Sorting algorithms",
        content="Implement mergesort.",
        subject_id=subject.id,
        professor_id=professor.id,
    )
    other_course = Course(title="Titration", subject_id=other_subject.id, professor_id=other_professor.id)
    db_session.add_all([course, other_course])
    db_session.commit()

    return {
        "professor": professor,
        "other_professor": other_professor,
        "admin": admin,
        "student": student,
        "classmate": classmate,
        "loner": loner,
        "subject": subject,
        "other_subject": other_subject,
        "course": course,
        "other_course": other_course,
    }
