"""Tests for the notes endpoints."""


class TestSaveNotes:
    """Tests for POST /api/notes."""

    def test_save_notes(self, client, fake_db):
        response = client.post("/api/notes", json={"notes": "Mitochondria are organelles."})
        assert response.status_code == 200
        data = response.json()
        assert data == {"success": True, "message": "Notes saved", "notesLength": 28}
        row = fake_db.rows("notes")[0]
        assert row["id"] == "1"
        assert row["content"] == "Mitochondria are organelles."
        assert "updated_at" in row

    def test_empty_notes_rejected(self, client, fake_db):
        response = client.post("/api/notes", json={"notes": ""})
        assert response.status_code == 400
        assert response.json() == {"error": "Notes are required"}
        assert fake_db.rows("notes") == []

    def test_missing_notes_rejected(self, client):
        response = client.post("/api/notes", json={"userId": "abc"})
        assert response.status_code == 400
        assert response.json()["error"] == "Notes are required"

    def test_whitespace_notes_accepted(self, client):
        response = client.post("/api/notes", json={"notes": "   "})
        assert response.status_code == 200
        assert response.json()["notesLength"] == 3

    def test_upsert_keeps_single_row(self, client, fake_db):
        client.post("/api/notes", json={"notes": "same text", "userId": "u1"})
        client.post("/api/notes", json={"notes": "same text", "userId": "u1"})
        assert len(fake_db.rows("notes")) == 1

    def test_save_overwrites_previous(self, client, fake_db):
        client.post("/api/notes", json={"notes": "first"})
        client.post("/api/notes", json={"notes": "second"})
        assert [r["content"] for r in fake_db.rows("notes")] == ["second"]

    def test_store_error_surfaces_as_500(self, client, fake_db):
        fake_db.fail_tables["notes"] = None
        response = client.post("/api/notes", json={"notes": "text"})
        assert response.status_code == 500
        assert response.json() == {"error": "notes unavailable"}

    def test_invalid_body_is_validation_error(self, client):
        response = client.post("/api/notes", json={"notes": ["not", "text"]})
        assert response.status_code == 400
        assert "error" in response.json()


class TestGetNotes:
    """Tests for GET /api/notes."""

    def test_round_trip_default_user(self, client):
        client.post("/api/notes", json={"notes": "Cells divide by mitosis."})
        response = client.get("/api/notes")
        assert response.status_code == 200
        assert response.json() == {"notes": "Cells divide by mitosis."}

    def test_round_trip_named_user(self, client):
        client.post("/api/notes", json={"notes": "mine", "userId": "alice"})
        client.post("/api/notes", json={"notes": "theirs", "userId": "bob"})
        assert client.get("/api/notes", params={"userId": "alice"}).json() == {"notes": "mine"}
        assert client.get("/api/notes", params={"userId": "bob"}).json() == {"notes": "theirs"}

    def test_numeric_user_id_matches_query(self, client):
        client.post("/api/notes", json={"notes": "numeric", "userId": 7})
        assert client.get("/api/notes?userId=7").json() == {"notes": "numeric"}

    def test_missing_note_is_empty(self, client):
        assert client.get("/api/notes?userId=nobody").json() == {"notes": ""}

    def test_store_error_is_empty(self, client, fake_db):
        fake_db.fail_tables["notes"] = None
        response = client.get("/api/notes")
        assert response.status_code == 200
        assert response.json() == {"notes": ""}


class TestMissingBody:
    """POST routes treat an absent body like an empty object."""

    def test_save_without_body(self, client):
        response = client.post("/api/notes")
        assert response.status_code == 400
        assert response.json() == {"error": "Notes are required"}

    def test_generate_flashcards_without_body(self, client):
        response = client.post("/api/generate-flashcards")
        assert response.status_code == 400
        assert response.json() == {"error": "Notes are required"}

    def test_generate_quiz_without_body(self, client):
        response = client.post("/api/generate-quiz")
        assert response.status_code == 400
        assert response.json() == {"error": "Notes are required"}

    def test_submit_without_body(self, client, fake_db):
        response = client.post("/api/quiz/submit")
        assert response.status_code == 404
        assert response.json() == {"error": "Quiz not found"}
        assert fake_db.rows("quiz_answers") == []
