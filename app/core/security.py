from datetime import datetime, timedelta
from typing import Optional

import bcrypt
from jose import jwt, JWTError

from app.core.config import get_settings

settings = get_settings()

FILE_TOKEN_SCOPE = "storage"


def hash_password(password: str) -> str:
    pw = password.encode("utf-8")
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(pw, salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password.encode("utf-8"),
    )


def create_access_token(subject: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    payload = {"sub": subject, "role": role, "exp": expire}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def create_file_token(bucket: str, path: str, expires_in: int) -> str:
    expire = datetime.utcnow() + timedelta(seconds=expires_in)
    payload = {"scope": FILE_TOKEN_SCOPE, "bucket": bucket, "path": path, "exp": expire}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def verify_file_token(token: str, bucket: str, path: str) -> bool:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return False
    return (
        payload.get("scope") == FILE_TOKEN_SCOPE
        and payload.get("bucket") == bucket
        and payload.get("path") == path
    )
