from fastapi.testclient import TestClient

from api.dependencies import get_candidate_catalog
from main import app

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["knowledge_chunks"] == 10


def test_chat_job_query():
    response = client.post("/chat", json={"message": "Find me a remote full-time job"})
    assert response.status_code == 200
    data = response.json()
    assert data["intent"] == "job_search"
    assert data["attachment"]["type"] == "job"
    assert data["attachment"]["data"]["location"] == "Remote"
    assert "full-time" in data["entities"]["job_types"]
    assert data["context"] is None
    assert isinstance(data["knowledge"], list)


def test_chat_with_history_and_context():
    response = client.post(
        "/chat",
        json={
            "message": "Any upcoming workshops this week?",
            "history": [
                {"sender": "user", "text": "hi"},
                {"sender": "assistant", "text": "Hello! How can I help?"},
            ],
            "include_context": True,
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["intent"] == "event_info"
    assert len(data["context"]["recent_conversation"]) == 2
    assert "interested in events" in data["context"]["system_instructions"]


def test_chat_flags_sensitive_info():
    response = client.post("/chat", json={"message": "hello, my email is jane@example.com"})
    data = response.json()
    assert data["sensitive_info"]["has_sensitive_info"] is True
    assert data["sensitive_info"]["emails"] == ["jane@example.com"]


def test_chat_rejects_blank_message():
    response = client.post("/chat", json={"message": "   "})
    assert response.status_code == 400


def test_chat_rejects_long_message():
    response = client.post("/chat", json={"message": "a" * 5000})
    assert response.status_code == 422


def test_chat_malformed_catalog_returns_502():
    class BrokenCatalog:
        async def fetch(self, variant):
            return [{"title": "missing fields"}]

    app.dependency_overrides[get_candidate_catalog] = lambda: BrokenCatalog()
    try:
        response = client.post("/chat", json={"message": "Find me a remote job"})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 502


def test_bias_check():
    response = client.post("/bias/check", json={"text": "The chairman will lead"})
    assert response.status_code == 200
    data = response.json()
    assert data["has_bias"] is True
    assert data["corrected_text"] == "The chairperson will lead"
    assert data["bias_details"][0]["type"] == "biased_term"
    assert data["mitigation_instructions"] != ""


def test_bias_check_clean_text():
    data = client.post("/bias/check", json={"text": "Data analyst roles"}).json()
    assert data["has_bias"] is False
    assert data["bias_details"] is None
    assert data["mitigation_instructions"] == ""


def test_intent_endpoint():
    response = client.post("/intent", json={"text": "Show me recent job listings"})
    assert response.status_code == 200
    data = response.json()
    assert data["intent"] == "job_search"
    assert set(data["scores"]) == {
        "job_search", "event_info", "mentorship", "skill_development",
        "career_advice", "company_info", "help",
    }
    assert "recent" in data["entities"]["times"]
    assert data["is_question"] is False
