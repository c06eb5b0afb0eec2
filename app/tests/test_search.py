def test_short_query_returns_nothing(client, seed_data, headers_for):
    assert client.get("/search?q= a ", headers=headers_for(seed_data["professor"])).json() == []


def test_professor_search_includes_students(client, seed_data, headers_for):
    results = client.get("/search?q=or", headers=headers_for(seed_data["professor"])).json()
    assert {(r["type"], r["title"]) for r in results} == {
        ("course", "Sorting algorithms"),
        ("subject", "Algorithms"),
    }

    results = client.get("/search?q=lucas", headers=headers_for(seed_data["professor"])).json()
    assert results == [
        {
            "id": seed_data["student"].id,
            "type": "student",
            "title": "Lucas Bernard",
            "subtitle": "lucas@example.com",
            "color": None,
        }
    ]


def test_student_search_skips_people(client, seed_data, headers_for):
    results = client.get("/search?q=emma", headers=headers_for(seed_data["student"])).json()
    assert results == []

    results = client.get("/search?q=SORT", headers=headers_for(seed_data["student"])).json()
    assert results[0]["type"] == "course"
    assert results[0]["subtitle"] == "Algorithms"
    assert results[0]["color"] == "#8B5CF6"
