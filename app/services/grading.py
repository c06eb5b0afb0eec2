import logging
import math
from datetime import datetime
from typing import Optional

from fastapi import HTTPException

from app.models import Submission, SubmissionStatus
from app.models.submission import MIN_GRADE, MAX_GRADE

logger = logging.getLogger(__name__)


def grade_submission(submission: Submission, grade: float, feedback: Optional[str]) -> Submission:
    if not math.isfinite(grade) or grade < MIN_GRADE or grade > MAX_GRADE:
        raise HTTPException(status_code=400, detail=f"Grade must be between {MIN_GRADE} and {MAX_GRADE}")

    submission.grade = grade
    submission.feedback = feedback
    submission.status = SubmissionStatus.graded
    submission.graded_at = datetime.utcnow()
    logger.info("Submission %s graded %s/%s", submission.id, grade, MAX_GRADE)
    return submission
