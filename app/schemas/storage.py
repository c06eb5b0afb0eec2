from typing import Optional

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    bucket: str
    path: str
    url: str
    file_name: str


class SignRequest(BaseModel):
    path: str
    expires_in: Optional[int] = Field(default=None, ge=1, le=7 * 24 * 3600)


class SignedUrlOut(BaseModel):
    signed_url: str
    expires_in: int
