import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_provider
from app.llm.base import GenerationError, GenerationTimeoutError
from app.main import app


@pytest.fixture
def client_with(fake_provider):
    def make(*replies, error=None, healthy=True) -> TestClient:
        provider = fake_provider(*replies, error=error, healthy=healthy)
        app.dependency_overrides[get_provider] = lambda: provider
        return TestClient(app)

    yield make
    app.dependency_overrides.clear()


def wireframe_request(**overrides):
    body = {
        "improvedDescription": "A drone booking app",
        "workflow": [{"id": "home", "title": "Home", "nextScreens": []}],
        "targetScreenIndex": 0,
    }
    body.update(overrides)
    return body


def test_generate_wireframe_success(client_with, valid_document):
    client = client_with(valid_document)

    response = client.post("/api/v1/design/generate-wireframe", json=wireframe_request())

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Wireframe generated successfully"
    assert body["validation"]["isValid"] is True
    assert body["wireframe"]["app"]["name"] == "Drone Booking"
    assert "X-Correlation-ID" in response.headers


def test_invalid_wireframe_is_still_200(client_with, valid_document):
    valid_document["screens"][0]["components"][0]["type"] = "Sidebar"
    client = client_with(valid_document)

    response = client.post("/api/v1/design/generate-wireframe", json=wireframe_request())

    assert response.status_code == 200
    body = response.json()
    assert body["validation"]["isValid"] is False
    assert any("Sidebar" in e for e in body["validation"]["errors"])


def test_unparsable_reply_returns_invalid_json_descriptor(client_with):
    client = client_with("I could not produce a wireframe for that.")

    response = client.post("/api/v1/design/generate-wireframe", json=wireframe_request())

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "INVALID_JSON"
    assert body["timestamp"].endswith("Z")


@pytest.mark.parametrize("error, status_code, code", [
    (GenerationError("Error from ollama API: HTTP 500", provider="ollama", status_code=500), 502, "API_ERROR"),
    (GenerationTimeoutError("ollama API request timeout after 120s", provider="ollama"), 504, "TIMEOUT"),
])
def test_backend_failures_map_to_descriptors(client_with, error, status_code, code):
    client = client_with(error=error)

    response = client.post("/api/v1/design/generate-wireframe", json=wireframe_request())

    assert response.status_code == status_code
    assert response.json()["code"] == code
    assert response.json()["error"] == str(error)


def test_blank_description_is_rejected(client_with):
    client = client_with()

    response = client.post("/api/v1/design/generate-wireframe", json=wireframe_request(improvedDescription="   "))

    assert response.status_code == 422
    assert "detail" in response.json()


def test_generate_pages(client_with):
    client = client_with('[{"id": "home", "title": "Home"}, {"id": "search", "title": "Search"}]')

    response = client.post("/api/v1/design/generate-pages", json={"description": "travel planner"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert [s["id"] for s in body["data"]["workflow"]] == ["home", "search"]


def test_process_and_construct_description(client_with):
    client = client_with(
        '[{"question": "Which platform?", "options": ["iOS", "Android"]}]',
        "A travel planner for iOS.",
    )

    questions = client.post("/api/v1/design/process", json={"description": "travel planner"})
    improved = client.post(
        "/api/v1/design/construct-description",
        json={"description": "travel planner", "answers": [{"question": "Which platform?", "answer": "iOS"}]},
    )

    assert questions.status_code == 200
    assert questions.json()["questions"][0]["options"] == ["iOS", "Android"]
    assert improved.status_code == 200
    assert improved.json()["improvedDescription"] == "A travel planner for iOS."


def test_component_catalog(client_with):
    client = client_with()

    catalog = client.get("/api/v1/components").json()
    button = client.get("/api/v1/components/button")
    unknown = client.get("/api/v1/components/sidebar")

    assert len(catalog["componentTypes"]) == 21
    assert len(catalog["icons"]) == 20
    assert catalog["navTypes"] == ["tabs", "drawer", "stack"]
    assert catalog["defaultTheme"]["primary"] == "#1890ff"
    assert button.status_code == 200
    assert button.json()["type"] == "Button"
    assert unknown.status_code == 404


def test_health_probes(client_with):
    assert client_with().get("/health/live").json()["status"] == "alive"

    ready = client_with(healthy=True).get("/health/ready")
    assert ready.status_code == 200
    assert ready.json()["ready"] is True

    not_ready = client_with(healthy=False).get("/health/ready")
    assert not_ready.status_code == 503
    assert not_ready.json()["status"] == "not_ready"
