from fastapi import status


def test_professor_sees_own_students(client, seed_data, headers_for):
    students = client.get("/students", headers=headers_for(seed_data["professor"])).json()
    assert [s["full_name"] for s in students] == ["Emma Petit", "Lucas Bernard"]

    assert client.get("/students", headers=headers_for(seed_data["other_professor"])).json() == []


def test_student_sees_classmates(client, seed_data, headers_for):
    classmates = client.get("/students", headers=headers_for(seed_data["student"])).json()
    assert [s["full_name"] for s in classmates] == ["Emma Petit", "Lucas Bernard"]

    assert client.get("/students", headers=headers_for(seed_data["loner"])).json() == []


def test_list_professors(client, seed_data, headers_for):
    professors = client.get("/professors", headers=headers_for(seed_data["loner"])).json()
    assert [p["full_name"] for p in professors] == ["Claire Martin", "Paul Durand"]


def test_change_professor(client, seed_data, headers_for):
    headers = headers_for(seed_data["student"])
    assert client.get("/me/professor", headers=headers).json()["full_name"] == "Claire Martin"

    response = client.put(
        "/me/professor",
        json={"professor_id": seed_data["other_professor"].id},
        headers=headers,
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["full_name"] == "Paul Durand"

    assert client.get("/me/professor", headers=headers).json()["full_name"] == "Paul Durand"
    remaining = client.get("/students", headers=headers_for(seed_data["professor"])).json()
    assert [s["full_name"] for s in remaining] == ["Emma Petit"]


def test_unassigned_student_has_no_professor(client, seed_data, headers_for):
    assert client.get("/me/professor", headers=headers_for(seed_data["loner"])).json() is None


def test_cannot_pick_a_student_as_professor(client, seed_data, headers_for):
    response = client.put(
        "/me/professor",
        json={"professor_id": seed_data["classmate"].id},
        headers=headers_for(seed_data["loner"]),
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
