from core.errors import StorageError


def test_export_csv(client, auth_headers, study_set, add_card):
    add_card(study_set["id"], content='Say "hi"', translation="Hola, amigo")

    response = client.get(f"/api/sets/{study_set['id']}/export?format=csv", headers=auth_headers)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="test-set.csv"' in response.headers["content-disposition"]

    lines = response.text.splitlines()
    assert lines[0] == (
        "Set Name,Set Description,Default Language,Translation Language,"
        "Content,Translation,Language,Translation Language,Known,Created At"
    )
    assert lines[1].startswith(
        '"Test Set","Test Description","EN","ES","Say ""hi""","Hola, amigo","EN","ES","false","'
    )
    assert "Set Name,Set Description" in response.text


def test_export_json_is_default(client, auth_headers, study_set, add_card):
    card = add_card(study_set["id"])

    response = client.get(f"/api/sets/{study_set['id']}/export", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["totalCards"] == 1
    assert data["set"]["id"] == study_set["id"]
    assert [c["id"] for c in data["flashcards"]] == [card["id"]]


def test_export_unknown_format(client, auth_headers, study_set):
    response = client.get(f"/api/sets/{study_set['id']}/export?format=xml", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Unsupported export format"


def test_export_set_of_other_user(client, other_headers, study_set):
    response = client.get(f"/api/sets/{study_set['id']}/export", headers=other_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Set not found"


def test_import_skips_cards_without_content(client, auth_headers, store):
    response = client.post(
        "/api/sets/import",
        headers=auth_headers,
        json={
            "set": {"name": "S"},
            "flashcards": [
                {"content": "a", "translation": "b"},
                {"content": "", "translation": "x"},
            ],
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["flashcardsCount"] == 1
    assert data["set"]["name"] == "S"
    assert data["set"]["owner"] == "testuser"

    document = store.read()
    assert len(document["sets"]) == 1
    assert len(document["flashcards"]) == 1
    card = document["flashcards"][0]
    assert card["setId"] == data["set"]["id"]
    assert card["language"] == "EN"
    assert card["translationLang"] == "PL"
    assert card["known"] is False


def test_import_keeps_card_languages_and_known(client, auth_headers):
    response = client.post(
        "/api/sets/import",
        headers=auth_headers,
        json={
            "set": {"name": "S", "description": "d", "defaultLanguage": "DE", "translationLanguage": "FR"},
            "flashcards": [
                {"content": "a", "translation": "b", "known": True},
                {"content": "c", "translation": "d", "language": "IT", "translationLang": "ES"},
            ],
        },
    )
    cards = response.json()["flashcards"]
    assert [(c["language"], c["translationLang"], c["known"]) for c in cards] == [
        ("DE", "FR", True),
        ("IT", "ES", False),
    ]


def test_import_invalid_format(client, auth_headers, store):
    for body in ({"set": {"name": "S"}}, {"flashcards": []}, {"set": "S", "flashcards": []}, [1, 2]):
        response = client.post("/api/sets/import", headers=auth_headers, json=body)
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid data format"
    assert store.read()["sets"] == []


def test_import_requires_set_name(client, auth_headers):
    response = client.post(
        "/api/sets/import", headers=auth_headers, json={"set": {"name": ""}, "flashcards": []}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Set name is required"


def test_import_is_atomic(client, auth_headers, store, monkeypatch):
    def broken_write(document):
        raise StorageError("disk full")

    monkeypatch.setattr(store, "write", broken_write)
    response = client.post(
        "/api/sets/import",
        headers=auth_headers,
        json={"set": {"name": "S"}, "flashcards": [{"content": "a", "translation": "b"}]},
    )
    assert response.status_code == 500
    assert response.json()["message"] == "Failed to import set"

    monkeypatch.undo()
    document = store.read()
    assert document["sets"] == []
    assert document["flashcards"] == []


def test_export_then_import_csv(client, auth_headers, study_set, add_card):
    add_card(study_set["id"], content="one", known=True)
    add_card(study_set["id"], content="two, with comma")
    exported = client.get(f"/api/sets/{study_set['id']}/export?format=csv", headers=auth_headers).text

    response = client.post(
        "/api/sets/import/csv",
        headers=auth_headers,
        files={"file": ("set.csv", exported.encode("utf-8"), "text/csv")},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["flashcardsCount"] == 2
    assert data["set"]["name"] == "Test Set"
    assert data["set"]["id"] != study_set["id"]
    assert [(c["content"], c["known"]) for c in data["flashcards"]] == [("one", True), ("two, with comma", False)]


def test_import_csv_rejects_other_files(client, auth_headers):
    response = client.post(
        "/api/sets/import/csv",
        headers=auth_headers,
        files={"file": ("set.json", b"{}", "application/json")},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Only CSV files can be imported."


def test_import_csv_rejects_non_utf8(client, auth_headers):
    response = client.post(
        "/api/sets/import/csv",
        headers=auth_headers,
        files={"file": ("set.csv", b"\xff\xfe\x00bad", "text/csv")},
    )
    assert response.status_code == 400
