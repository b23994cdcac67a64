from core.config import settings

LEGACY_BODY = {"front": "Hello", "back": "Cześć", "languageFront": "EN", "languageBack": "PL"}


def test_create_legacy_flashcard(client, auth_headers, store):
    response = client.post("/api/flashcards", headers=auth_headers, json=LEGACY_BODY)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["flashcard"]["front"] == "Hello"
    assert data["flashcard"]["owner"] == "testuser"
    assert "setId" not in store.read()["flashcards"][0]


def test_create_legacy_flashcard_missing_fields(client, auth_headers):
    response = client.post("/api/flashcards", headers=auth_headers, json={"front": "Hello"})
    assert response.status_code == 400
    assert response.json()["message"] == "All fields are required"


def test_list_legacy_flashcards_is_owner_scoped(client, auth_headers, other_headers, study_set, add_card):
    client.post("/api/flashcards", headers=auth_headers, json=LEGACY_BODY)
    client.post("/api/flashcards", headers=other_headers, json={**LEGACY_BODY, "front": "Other"})
    add_card(study_set["id"])

    response = client.get("/api/flashcards", headers=auth_headers)
    assert response.status_code == 200
    cards = response.json()["flashcards"]
    assert [c["front"] for c in cards] == ["Hello"]


def test_legacy_update_and_delete_are_not_found_by_default(client, auth_headers, store):
    card = client.post("/api/flashcards", headers=auth_headers, json=LEGACY_BODY).json()["flashcard"]

    response = client.put(f"/api/flashcards/{card['id']}", headers=auth_headers, json={**LEGACY_BODY, "front": "Hi"})
    assert response.status_code == 404
    assert response.json()["message"] == "Flashcard not found"

    response = client.delete(f"/api/flashcards/{card['id']}", headers=auth_headers)
    assert response.status_code == 404

    assert store.read()["flashcards"][0]["front"] == "Hello"


def test_legacy_update_and_delete_when_enabled(client, auth_headers, other_headers, store, monkeypatch):
    monkeypatch.setattr(settings, "LEGACY_FLASHCARD_MUTATIONS", True)
    card = client.post("/api/flashcards", headers=auth_headers, json=LEGACY_BODY).json()["flashcard"]
    url = f"/api/flashcards/{card['id']}"

    response = client.put(url, headers=auth_headers, json={"front": "Hi"})
    assert response.status_code == 400

    response = client.put(url, headers=other_headers, json={**LEGACY_BODY, "front": "Hi"})
    assert response.status_code == 404

    response = client.put(url, headers=auth_headers, json={**LEGACY_BODY, "front": "Hi"})
    assert response.status_code == 200
    assert response.json()["flashcard"]["front"] == "Hi"
    assert store.read()["flashcards"][0]["front"] == "Hi"

    response = client.delete(url, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["flashcard"]["id"] == card["id"]
    assert store.read()["flashcards"] == []
