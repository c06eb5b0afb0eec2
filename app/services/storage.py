"""Filesystem-backed file buckets with public and signed URLs."""
import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional

from fastapi import HTTPException, UploadFile
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.security import create_file_token
from app.models import Submission, User
from app.services.scope import scope_submissions

logger = logging.getLogger(__name__)

COURSE_FILES = "course-files"
SUBMISSION_FILES = "submission-files"


@dataclass(frozen=True)
class Bucket:
    name: str
    public: bool


BUCKETS = {
    COURSE_FILES: Bucket(COURSE_FILES, public=True),
    SUBMISSION_FILES: Bucket(SUBMISSION_FILES, public=False),
}


def get_bucket(name: str) -> Bucket:
    bucket = BUCKETS.get(name)
    if not bucket:
        raise HTTPException(status_code=404, detail="Bucket not found")
    return bucket


def clean_path(path: str) -> str:
    parts = PurePosixPath(path.replace("\\", "/")).parts
    if not parts or path.startswith("/") or any(part in ("..", ".") for part in parts):
        raise HTTPException(status_code=400, detail="Invalid object path")
    return "/".join(parts)


def object_file(bucket: Bucket, path: str) -> Path:
    settings = get_settings()
    return Path(settings.files_dir) / bucket.name / clean_path(path)


def object_url(bucket: Bucket, path: str) -> str:
    settings = get_settings()
    return f"{settings.files_base_url}/storage/{bucket.name}/{path}"


def signed_url(bucket: Bucket, path: str, expires_in: Optional[int] = None) -> str:
    settings = get_settings()
    expires_in = expires_in or settings.signed_url_expire_seconds
    token = create_file_token(bucket.name, path, expires_in)
    return f"{object_url(bucket, path)}?token={token}"


def path_from_url(url: str, bucket: Bucket) -> Optional[str]:
    """Object path of a URL produced by this service for ``bucket``, if any."""
    marker = f"/storage/{bucket.name}/"
    if marker not in url:
        return None
    path = url.split(marker, 1)[1].split("?", 1)[0]
    return path or None


def can_read(db: Session, user: User, bucket: Bucket, path: str) -> bool:
    """Private objects are readable by their uploader and by whoever can see a submission linking them."""
    if bucket.public or path.split("/", 1)[0] == str(user.id):
        return True
    linked = (
        scope_submissions(db.query(Submission.file_url), db, user)
        .filter(Submission.file_url.isnot(None))
        .all()
    )
    return any(path_from_url(file_url, bucket) == path for (file_url,) in linked)


async def save_upload(bucket: Bucket, folder: str, upload: UploadFile) -> str:
    settings = get_settings()
    data = await upload.read()
    if len(data) > settings.max_upload_mb * 1024 * 1024:
        raise HTTPException(status_code=413, detail=f"Maximum file size is {settings.max_upload_mb}MB")

    ext = os.path.splitext(upload.filename or "")[1]
    path = clean_path(f"{folder}/{int(time.time() * 1000)}{ext}")
    target = object_file(bucket, path)
    target.parent.mkdir(parents=True, exist_ok=True)
    # same name overwrites, matching upsert semantics
    with open(target, "wb") as output:
        output.write(data)

    logger.info("Stored %s bytes in %s/%s", len(data), bucket.name, path)
    return path
