import pytest

import responses
from app import create_app
from chatbot import ChatBot


@pytest.fixture
def client(rng, clock):
    app = create_app(ChatBot(rng=rng, clock=clock))
    app.config["TESTING"] = True
    return app.test_client()


def post(client, message, session_id=None):
    body = {"message": message}
    if session_id:
        body["session_id"] = session_id
    return client.post("/get", json=body).get_json()


def test_new_session_is_issued(client):
    data = post(client, "hello")
    assert data["reply"] == responses.responses["hello"]
    assert data["session_id"]
    assert data["mode"] == "chat"
    assert data["running"] is True


def test_sessions_keep_separate_history(client):
    first = post(client, "hello")["session_id"]
    second = post(client, "thanks")["session_id"]
    post(client, "joke", first)
    assert first != second
    assert client.get(f"/history?session_id={first}").get_json()["history"] == ["hello", "joke"]
    assert client.get(f"/history?session_id={second}").get_json()["history"] == ["thanks"]


def test_calculator_mode_over_http(client):
    sid = post(client, "calc")["session_id"]
    data = post(client, "7 x 6", sid)
    assert data["reply"] == "7 x 6 = 42"
    assert data["mode"] == "calculator"
    data = post(client, "done", sid)
    assert data["reply"] == responses.calculator_outro
    assert data["mode"] == "chat"


def test_exit_ends_session(client):
    sid = post(client, "hello")["session_id"]
    data = post(client, "bye", sid)
    assert data["running"] is False
    assert data["lines"][0] == responses.farewell
    assert data["lines"][1].endswith("Messages: 2")
    assert client.get(f"/history?session_id={sid}").get_json()["history"] == []


def test_blank_or_bad_message(client):
    assert post(client, "   ")["reply"] == responses.empty_message
    data = client.post("/get", json={"message": 42}).get_json()
    assert data["reply"] == responses.empty_message


def test_help_listing(client):
    data = client.get("/help").get_json()
    assert any(line.startswith("calc / calculate") for line in data["help"])


@pytest.mark.parametrize("body", [["hello"], "hi", 7, None])
def test_non_object_body_is_treated_as_empty(client, body):
    response = client.post("/get", json=body)
    assert response.status_code == 200
    assert response.get_json()["reply"] == responses.empty_message


@pytest.mark.parametrize("bad_id", [["x"], {"id": "x"}, 5])
def test_non_string_session_id_gets_a_new_session(client, bad_id):
    response = client.post("/get", json={"message": "hello", "session_id": bad_id})
    assert response.status_code == 200
    data = response.get_json()
    assert isinstance(data["session_id"], str)
    assert data["reply"] == responses.responses["hello"]


def test_session_count_is_capped(rng, clock):
    app = create_app(ChatBot(rng=rng, clock=clock), max_sessions=3)
    client = app.test_client()
    registry = app.config["SESSIONS"]

    oldest = post(client, "hello")["session_id"]
    for _ in range(5):
        post(client, "hello")
    assert len(registry) == 3
    assert registry.get(oldest) is None

    # a returning client moves to the back of the eviction order
    kept = post(client, "hello")["session_id"]
    post(client, "hello")
    post(client, "thanks", kept)
    post(client, "hello")
    post(client, "hello")
    assert registry.get(kept) is not None
    assert len(registry) == 3
