from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_user
from app.core.config import get_settings
from app.core.security import verify_file_token
from app.models import User
from app.schemas.storage import UploadResponse, SignRequest, SignedUrlOut
from app.services import storage

router = APIRouter(tags=["storage"])


@router.post("/storage/{bucket_name}/upload", response_model=UploadResponse, status_code=201)
async def upload_file(
    bucket_name: str,
    file: UploadFile = File(...),
    folder: Optional[str] = Form(None),
    current_user: User = Depends(get_current_user),
) -> UploadResponse:
    bucket = storage.get_bucket(bucket_name)
    if bucket.name == storage.COURSE_FILES and not current_user.is_professor:
        raise HTTPException(status_code=403, detail="Professor role required")

    path = await storage.save_upload(bucket, folder or str(current_user.id), file)
    return UploadResponse(
        bucket=bucket.name,
        path=path,
        url=storage.object_url(bucket, path),
        file_name=file.filename or path,
    )


@router.post("/storage/{bucket_name}/sign", response_model=SignedUrlOut)
def sign_file(
    bucket_name: str,
    payload: SignRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SignedUrlOut:
    bucket = storage.get_bucket(bucket_name)
    path = storage.clean_path(payload.path)
    if not storage.can_read(db, current_user, bucket, path):
        raise HTTPException(status_code=403, detail="Not allowed to read this file")
    if not storage.object_file(bucket, path).exists():
        raise HTTPException(status_code=404, detail="File not found")
    expires_in = payload.expires_in or get_settings().signed_url_expire_seconds
    return SignedUrlOut(signed_url=storage.signed_url(bucket, path, expires_in), expires_in=expires_in)


@router.get("/storage/{bucket_name}/{path:path}")
def get_file(bucket_name: str, path: str, token: Optional[str] = Query(None)):
    bucket = storage.get_bucket(bucket_name)
    path = storage.clean_path(path)
    if not bucket.public and not (token and verify_file_token(token, bucket.name, path)):
        raise HTTPException(status_code=403, detail="Invalid or expired file token")

    target = storage.object_file(bucket, path)
    if not target.is_file():
        raise HTTPException(status_code=404, detail="File not found")
    return FileResponse(target)
