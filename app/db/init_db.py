import logging
from datetime import datetime, timedelta

from app.core.security import hash_password
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models import (
    User,
    UserRole,
    Subject,
    Course,
    Submission,
    SubmissionStatus,
    Comment,
    ProfessorStudent,
)

logger = logging.getLogger(__name__)


def seed_demo_data() -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).first():
            logger.info("Database already seeded")
            return

        professor = User(
            full_name="Claire Martin",
            email="claire.martin@example.com",
            password_hash=hash_password("professor123"),
            role=UserRole.professor,
        )
        admin = User(
            full_name="Admin",
            email="admin@example.com",
            password_hash=hash_password("admin123"),
            role=UserRole.admin,
        )
        student_1 = User(
            full_name="Lucas Bernard",
            email="lucas.bernard@example.com",
            password_hash=hash_password("student123"),
            role=UserRole.student,
            class_name="L2 Informatique",
        )
        student_2 = User(
            full_name="Emma Petit",
            email="emma.petit@example.com",
            password_hash=hash_password("student123"),
            role=UserRole.student,
            class_name="L2 Informatique",
        )
        db.add_all([professor, admin, student_1, student_2])
        db.flush()

        db.add_all([
            ProfessorStudent(professor_id=professor.id, student_id=student_1.id),
            ProfessorStudent(professor_id=professor.id, student_id=student_2.id),
        ])

        algorithms = Subject(
            name="Algorithms",
            description="Data structures and complexity",
            color="#8B5CF6",
            professor_id=professor.id,
        )
        databases = Subject(name="Databases", color="#22C55E", professor_id=professor.id)
        db.add_all([algorithms, databases])
        db.flush()

        sorting = Course(
            title="Sorting algorithms",
            description="Quicksort, mergesort and heapsort",
            content="Implement mergesort and measure it against the built-in sort.",
            subject_id=algorithms.id,
            professor_id=professor.id,
            deadline=datetime.utcnow() + timedelta(days=14),
        )
        sql = Course(
            title="SQL joins",
            content="Write the queries from the worksheet.",
            subject_id=databases.id,
            professor_id=professor.id,
        )
        db.add_all([sorting, sql])
        db.flush()

        db.add_all([
            Submission(
                course_id=sorting.id,
                student_id=student_1.id,
                content="Mergesort implementation attached.",
                status=SubmissionStatus.graded,
                grade=16,
                feedback="Clean and well tested.",
                submitted_at=datetime.utcnow() - timedelta(days=2),
                graded_at=datetime.utcnow() - timedelta(days=1),
            ),
            Submission(
                course_id=sql.id,
                student_id=student_2.id,
                content="Queries 1 to 5.",
                status=SubmissionStatus.submitted,
                submitted_at=datetime.utcnow(),
            ),
            Comment(course_id=sorting.id, user_id=student_2.id, content="Can we use recursion?"),
        ])

        db.commit()
        logger.info("Demo data seeded")
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_demo_data()
