from fastapi import status

from app.core.config import get_settings
from app.models import Submission, SubmissionStatus


def upload(client, headers, bucket, content=b"hello", filename="notes.txt", folder=None):
    data = {"folder": folder} if folder else {}
    return client.post(
        f"/storage/{bucket}/upload",
        files={"file": (filename, content, "text/plain")},
        data=data,
        headers=headers,
    )


def test_upload_public_course_file(client, seed_data, headers_for, files_dir):
    response = upload(client, headers_for(seed_data["professor"]), "course-files", folder="courses")
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["path"].startswith("courses/")
    assert data["path"].endswith(".txt")
    assert data["file_name"] == "notes.txt"
    assert (files_dir / "course-files" / data["path"]).read_bytes() == b"hello"

    download = client.get(data["url"])
    assert download.status_code == status.HTTP_200_OK
    assert download.content == b"hello"


def test_students_cannot_upload_course_files(client, seed_data, headers_for):
    response = upload(client, headers_for(seed_data["student"]), "course-files")
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_private_file_needs_signed_url(client, seed_data, headers_for):
    headers = headers_for(seed_data["student"])
    data = upload(client, headers, "submission-files", content=b"my work", filename="work.pdf").json()
    assert data["path"].startswith(f"{seed_data['student'].id}/")

    assert client.get(data["url"]).status_code == status.HTTP_403_FORBIDDEN
    assert client.get(data["url"] + "?token=forged").status_code == status.HTTP_403_FORBIDDEN

    signed = client.post("/storage/submission-files/sign", json={"path": data["path"]}, headers=headers).json()
    assert signed["expires_in"] == 3600
    download = client.get(signed["signed_url"])
    assert download.status_code == status.HTTP_200_OK
    assert download.content == b"my work"


def test_upload_size_limit(client, seed_data, headers_for, monkeypatch):
    monkeypatch.setenv("MAX_UPLOAD_MB", "0")
    get_settings.cache_clear()
    response = upload(client, headers_for(seed_data["student"]), "submission-files")
    assert response.status_code == status.HTTP_413_REQUEST_ENTITY_TOO_LARGE


def test_unknown_bucket(client, seed_data, headers_for):
    response = upload(client, headers_for(seed_data["student"]), "avatars")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_path_traversal_rejected(client, seed_data, headers_for):
    response = upload(client, headers_for(seed_data["professor"]), "course-files", folder="../escape")
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    response = client.post(
        "/storage/course-files/sign",
        json={"path": "a/../../secret"},
        headers=headers_for(seed_data["professor"]),
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_private_file_signed_only_for_readers(client, seed_data, headers_for, db_session):
    data = upload(
        client, headers_for(seed_data["student"]), "submission-files", content=b"secret work", filename="work.pdf"
    ).json()
    sign = {"path": data["path"]}

    for intruder in ("loner", "classmate", "professor", "other_professor"):
        response = client.post("/storage/submission-files/sign", json=sign, headers=headers_for(seed_data[intruder]))
        assert response.status_code == status.HTTP_403_FORBIDDEN

    db_session.add(
        Submission(
            course_id=seed_data["course"].id,
            student_id=seed_data["student"].id,
            file_url=data["url"],
            status=SubmissionStatus.submitted,
        )
    )
    db_session.commit()

    response = client.post("/storage/submission-files/sign", json=sign, headers=headers_for(seed_data["professor"]))
    assert response.status_code == status.HTTP_200_OK
    assert client.get(response.json()["signed_url"]).content == b"secret work"

    response = client.post("/storage/submission-files/sign", json=sign, headers=headers_for(seed_data["other_professor"]))
    assert response.status_code == status.HTTP_403_FORBIDDEN
    response = client.post("/storage/submission-files/sign", json=sign, headers=headers_for(seed_data["admin"]))
    assert response.status_code == status.HTTP_200_OK
