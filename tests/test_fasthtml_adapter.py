"""Tests for the FastHTML routes bound to the view-model."""

from fasthtml.common import FastHTML
from starlette.testclient import TestClient

from counterapp import CounterViewModel, RelayCommand
from counterapp.adapters.fasthtml import configure_app

DATASTAR_HEADERS = {"Datastar-Request": "true", "Content-Type": "application/json"}


def test_page_binds_count_and_command(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "$Counter.count" in response.text
    assert "/counter/increment" in response.text
    assert "/counter/live" in response.text
    assert "data-signals" in response.text


def test_state_as_json(client, view_model):
    view_model.count = 12
    response = client.get("/counter")
    assert response.json() == {"count": 12}


def test_state_as_datastar_signals(client):
    response = client.get("/counter", headers={"Datastar-Request": "true"})
    assert response.status_code == 200
    assert "event: datastar-merge-signals" in response.text
    assert 'data: signals {"Counter": {"count": 0}}' in response.text


def test_increment_json(client, view_model):
    response = client.post("/counter/increment")
    assert response.status_code == 200
    assert response.json() == {"success": True, "count": 1, "changed": ["count"]}
    assert view_model.count == 1


def test_increment_datastar(client, view_model):
    for expected in (1, 2, 3):
        response = client.post("/counter/increment", headers=DATASTAR_HEADERS, json={})
        assert response.status_code == 200
        assert response.text.count("event: datastar-merge-signals") == 1
        assert f'data: signals {{"Counter": {{"count": {expected}}}}}' in response.text
    assert view_model.count == 3


def test_increment_does_not_leak_subscriptions(client, view_model):
    client.post("/counter/increment")
    client.post("/counter/increment", headers=DATASTAR_HEADERS, json={})
    assert view_model.notifier.subscriber_count == 0


def test_existing_listeners_see_http_increments(client, view_model, recorder):
    view_model.subscribe(recorder)
    client.post("/counter/increment")
    client.post("/counter/increment")
    assert recorder.names == ["count", "count"]


def _disabled_client():
    view_model = CounterViewModel()
    view_model.increment_command = RelayCommand(
        view_model.increment_command.execute, can_execute=lambda parameter: False)
    app = FastHTML(secret_key="testing")
    configure_app(app, app.route, view_model)
    return TestClient(app), view_model


def test_disabled_command_json():
    client, view_model = _disabled_client()
    response = client.post("/counter/increment")
    assert response.status_code == 409
    assert response.json()["success"] is False
    assert view_model.count == 0


def test_disabled_command_datastar():
    client, view_model = _disabled_client()
    response = client.post("/counter/increment", headers=DATASTAR_HEADERS, json={})
    assert response.status_code == 204
    assert view_model.count == 0


def test_disabled_command_renders_disabled_button():
    client, _ = _disabled_client()
    assert "disabled" in client.get("/").text


def test_custom_prefix():
    view_model = CounterViewModel(initial_count=4)
    app = FastHTML(secret_key="testing")
    configure_app(app, app.route, view_model, prefix="/clicks")
    client = TestClient(app)

    assert client.get("/clicks").json() == {"count": 4}
    assert client.post("/clicks/increment").json()["count"] == 5
    assert "/clicks/increment" in client.get("/").text


def test_failing_listener_does_not_leak_route_subscription(app, view_model):
    def failing(name):
        raise RuntimeError("listener failed")

    view_model.subscribe(failing)
    client = TestClient(app, raise_server_exceptions=False)

    response = client.post("/counter/increment")

    assert response.status_code == 500
    assert view_model.notifier.subscriber_count == 1
    assert view_model.count == 1
