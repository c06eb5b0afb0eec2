from fastapi import status


def test_register_student(client, db_session):
    response = client.post(
        "/auth/register",
        json={"email": "New.Student@example.com", "password": "secret1", "full_name": "New Student"},
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["role"] == "student"
    assert data["user"]["email"] == "new.student@example.com"
    assert data["access_token"]


def test_register_rejects_short_password(client, db_session):
    response = client.post(
        "/auth/register",
        json={"email": "short@example.com", "password": "12345", "full_name": "Short"},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_register_rejects_duplicate_email(client, seed_data):
    response = client.post(
        "/auth/register",
        json={"email": "claire@example.com", "password": "secret1", "full_name": "Copy"},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Email already registered"


def test_register_cannot_pick_admin_role(client, db_session):
    response = client.post(
        "/auth/register",
        json={"email": "boss@example.com", "password": "secret1", "full_name": "Boss", "role": "admin"},
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_login_professor(client, seed_data):
    response = client.post(
        "/auth/login",
        json={"email": "claire@example.com", "password": "professor123"},
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["role"] == "professor"
    assert data["user"]["full_name"] == "Claire Martin"


def test_login_wrong_password(client, seed_data):
    response = client.post(
        "/auth/login",
        json={"email": "lucas@example.com", "password": "nope"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_me_requires_token(client, seed_data):
    assert client.get("/me").status_code == status.HTTP_401_UNAUTHORIZED


def test_login_then_me(client, seed_data):
    token = client.post(
        "/auth/login",
        json={"email": "lucas@example.com", "password": "student123"},
    ).json()["access_token"]

    response = client.get("/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["email"] == "lucas@example.com"


def test_update_profile(client, seed_data, headers_for):
    response = client.patch(
        "/me",
        json={"full_name": "Lucas B.", "class_name": "L2"},
        headers=headers_for(seed_data["student"]),
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["full_name"] == "Lucas B."
    assert data["class_name"] == "L2"
