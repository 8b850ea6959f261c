import logging
from typing import Any, Dict, Optional

import requests

from blockrender.config import SLACK_API_BASE_URL, SLACK_API_TIMEOUT, SLACK_BOT_TOKEN

logger = logging.getLogger(__name__)


class SlackApiError(Exception):
    def __init__(self, method: str, error: str, response: Optional[Dict[str, Any]] = None):
        self.method = method
        self.error = error
        self.response = response or {}
        super().__init__(f"{method} failed: {error}")


class SlackClient:
    """Delivers rendered documents to the Web API. Documents must be final."""

    def __init__(
        self,
        token: str = SLACK_BOT_TOKEN,
        base_url: str = SLACK_API_BASE_URL,
        timeout: float = SLACK_API_TIMEOUT,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def call(self, method: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = requests.post(
            f"{self.base_url}/{method}",
            json=payload,
            headers={"Authorization": f"Bearer {self.token}"},
            timeout=self.timeout,
        )

        response.raise_for_status()

        data = response.json()
        if not data.get("ok"):
            raise SlackApiError(method, data.get("error", "unknown_error"), data)

        logger.debug("%s succeeded", method)
        return data

    def post_message(self, channel: str, document: Dict[str, Any]) -> Dict[str, Any]:
        return self.call("chat.postMessage", {"channel": channel, **document})

    def update_message(self, channel: str, ts: str, document: Dict[str, Any]) -> Dict[str, Any]:
        return self.call("chat.update", {"channel": channel, "ts": ts, **document})

    def open_view(self, trigger_id: str, document: Dict[str, Any]) -> Dict[str, Any]:
        return self.call("views.open", {"trigger_id": trigger_id, "view": document})

    def update_view(self, view_id: str, document: Dict[str, Any]) -> Dict[str, Any]:
        return self.call("views.update", {"view_id": view_id, "view": document})

    def publish_home(self, user_id: str, document: Dict[str, Any]) -> Dict[str, Any]:
        return self.call("views.publish", {"user_id": user_id, "view": document})

    def respond(
        self,
        response_url: str,
        document: Dict[str, Any],
        replace_original: bool = False,
    ) -> None:
        """Answer an interaction through its response_url."""
        response = requests.post(
            response_url,
            json={**document, "replace_original": replace_original},
            timeout=self.timeout,
        )
        response.raise_for_status()
