import pytest
import requests

from blockrender import h, render_sync
from blockrender.transport import slack_client
from blockrender.transport.slack_client import SlackApiError, SlackClient


class FakeResponse:
    def __init__(self, data, status_code=200):
        self._data = data
        self.status_code = status_code

    def json(self):
        return self._data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


@pytest.fixture
def client():
    return SlackClient(token="xoxb-test", base_url="https://slack.example.com/api/", timeout=5)


def test_post_message_sends_rendered_blocks(monkeypatch, client):
    recorded = []

    def fake_post(url, json=None, headers=None, timeout=None):
        recorded.append((url, json, headers, timeout))
        return FakeResponse({"ok": True, "ts": "1.0"})

    monkeypatch.setattr(slack_client.requests, "post", fake_post)
    document = render_sync(h("message", h("section", text="hi"), text="hi")).document

    data = client.post_message("C1", document)

    url, payload, headers, timeout = recorded[0]
    assert data["ts"] == "1.0"
    assert url == "https://slack.example.com/api/chat.postMessage"
    assert payload == {"channel": "C1", **document}
    assert headers == {"Authorization": "Bearer xoxb-test"}
    assert timeout == 5


def test_open_view_wraps_document(monkeypatch, client):
    recorded = []

    def fake_post(url, json=None, headers=None, timeout=None):
        recorded.append((url, json))
        return FakeResponse({"ok": True})

    monkeypatch.setattr(slack_client.requests, "post", fake_post)
    document = render_sync(h("modal", title="Settings")).document

    client.open_view("T1", document)

    url, payload = recorded[0]
    assert url.endswith("/views.open")
    assert payload == {"trigger_id": "T1", "view": document}


def test_api_error_is_raised(monkeypatch, client):
    monkeypatch.setattr(
        slack_client.requests,
        "post",
        lambda url, json=None, headers=None, timeout=None: FakeResponse({"ok": False, "error": "channel_not_found"}),
    )

    with pytest.raises(SlackApiError) as exc:
        client.post_message("C404", {"blocks": []})

    assert exc.value.method == "chat.postMessage"
    assert exc.value.error == "channel_not_found"


def test_http_error_is_raised(monkeypatch, client):
    monkeypatch.setattr(
        slack_client.requests,
        "post",
        lambda url, json=None, headers=None, timeout=None: FakeResponse({}, status_code=500),
    )

    with pytest.raises(requests.HTTPError):
        client.publish_home("U1", {"type": "home", "blocks": []})


def test_respond_posts_to_response_url(monkeypatch, client):
    recorded = []

    def fake_post(url, json=None, headers=None, timeout=None):
        recorded.append((url, json, headers))
        return FakeResponse({})

    monkeypatch.setattr(slack_client.requests, "post", fake_post)

    client.respond("https://hooks.example.com/r", {"blocks": []}, replace_original=True)

    url, payload, headers = recorded[0]
    assert url == "https://hooks.example.com/r"
    assert payload == {"blocks": [], "replace_original": True}
    assert headers is None
