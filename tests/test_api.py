from fastapi.testclient import TestClient

from classcode.main import create_app
from classcode.core.registry import QuestionRegistry


def create(client, code, text):
    return client.post("/api/questions", json={"id": code, "text": text})


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "questions": 0}


def test_create_and_list_questions(client):
    r = create(client, "math01", "  What is 2+2? ")
    assert r.status_code == 201
    body = r.json()
    assert body["id"] == "MATH01"
    assert body["text"] == "What is 2+2?"
    assert body["response_count"] == 0
    assert "created_at" in body

    create(client, "SCI02", "Photosynthesis?")
    r = client.get("/api/questions")
    assert r.status_code == 200
    assert [q["id"] for q in r.json()] == ["MATH01", "SCI02"]


def test_create_duplicate_returns_conflict(client):
    create(client, "MATH01", "What is 2+2?")
    r = create(client, "math01", "dup")
    assert r.status_code == 409
    assert r.json()["detail"]["error"] == "DUPLICATE_CODE"


def test_create_blank_or_missing_fields(client):
    r = create(client, "  ", "text")
    assert r.status_code == 400
    assert r.json()["detail"]["error"] == "VALIDATION_ERROR"

    r = client.post("/api/questions", json={"id": "ABC"})
    assert r.status_code == 400


def test_student_lookup(client):
    create(client, "MATH01", "What is 2+2?")
    r = client.get("/api/questions/math01")
    assert r.status_code == 200
    assert r.json() == {"id": "MATH01", "text": "What is 2+2?"}


def test_student_lookup_invalid_code(client):
    r = client.get("/api/questions/NOPE")
    assert r.status_code == 404
    detail = r.json()["detail"]
    assert detail["error"] == "INVALID_CODE"
    assert detail["message"] == "Invalid code. Please check with your teacher."


def test_submit_and_view_responses(client):
    create(client, "MATH01", "What is 2+2?")
    r = client.post("/api/questions/math01/responses", json={"student_name": " Ada ", "answer_text": "4 "})
    assert r.status_code == 201
    body = r.json()
    assert body["question_id"] == "MATH01"
    assert body["student_name"] == "Ada"
    assert body["answer_text"] == "4"

    r = client.get("/api/questions/MATH01/responses")
    assert r.status_code == 200
    detail = r.json()
    assert detail["text"] == "What is 2+2?"
    assert detail["response_count"] == 1
    assert [(x["student_name"], x["answer_text"]) for x in detail["responses"]] == [("Ada", "4")]

    assert client.get("/api/questions").json()[0]["response_count"] == 1


def test_submit_errors(client):
    create(client, "MATH01", "What is 2+2?")
    r = client.post("/api/questions/NOPE/responses", json={"student_name": "Bob", "answer_text": "x"})
    assert r.status_code == 404
    assert r.json()["detail"]["error"] == "INVALID_CODE"

    r = client.post("/api/questions/MATH01/responses", json={"student_name": "", "answer_text": "x"})
    assert r.status_code == 400
    assert r.json()["detail"]["error"] == "VALIDATION_ERROR"

    assert client.get("/api/questions/MATH01/responses").json()["responses"] == []


def test_responses_for_unknown_question(client):
    r = client.get("/api/questions/NOPE/responses")
    assert r.status_code == 404
    assert r.json()["detail"]["error"] == "NOT_FOUND"


def test_delete_question(client):
    create(client, "MATH01", "What is 2+2?")
    r = client.delete("/api/questions/math01")
    assert r.status_code == 200
    assert r.json()["success"] is True

    assert client.get("/api/questions/MATH01").status_code == 404
    r = client.delete("/api/questions/MATH01")
    assert r.status_code == 404
    assert r.json()["detail"]["error"] == "NOT_FOUND"


def test_generate_code(client):
    r = client.post("/api/codes")
    assert r.status_code == 200
    code = r.json()["code"]
    assert len(code) == 6
    assert code.isalnum() and code == code.upper()

    r = client.post("/api/codes", json={"length": 4})
    assert len(r.json()["code"]) == 4

    r = client.post("/api/codes", json={"length": 0})
    assert r.status_code == 400


def test_generate_code_exhausted():
    registry = QuestionRegistry(code_length=1, alphabet="AB")
    registry.create_question("A", "1")
    registry.create_question("B", "2")
    with TestClient(create_app(registry=registry)) as client:
        r = client.post("/api/codes")
    assert r.status_code == 503
    assert r.json()["detail"]["error"] == "CODE_SPACE_EXHAUSTED"


def test_apps_do_not_share_state():
    first = TestClient(create_app(registry=QuestionRegistry()))
    second = TestClient(create_app(registry=QuestionRegistry()))
    create(first, "ONLY1", "text")
    assert first.get("/api/questions/ONLY1").status_code == 200
    assert second.get("/api/questions/ONLY1").status_code == 404


def test_generate_code_length_too_large(client):
    r = client.post("/api/codes", json={"length": 3_000_000})
    assert r.status_code == 400
    assert r.json()["detail"]["error"] == "VALIDATION_ERROR"
