import inspect
import logging
from typing import Any, Dict, Optional

from blockrender.compiler.render import render_options
from blockrender.interactions.events import decode_action, decode_suggestion
from blockrender.interactions.registry import InteractionRegistry, get_interaction_registry

logger = logging.getLogger(__name__)


async def _call(callback, event) -> Any:
    result = callback(event)
    if inspect.isawaitable(result):
        result = await result
    return result


class InteractionDispatcher:
    """Routes inbound interaction payloads to the callbacks in a registry."""

    def __init__(self, registry: Optional[InteractionRegistry] = None):
        self.registry = registry if registry is not None else get_interaction_registry()

    async def handle(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Route a payload by its type and return the response body for it."""
        payload_type = payload.get("type")

        if payload_type == "block_actions":
            handled = await self.dispatch(payload)
            return {"status": "ok", "handled": handled}

        if payload_type == "block_suggestion":
            return await self.search_options(payload)

        raise ValueError(f"unsupported interaction payload type {payload_type!r}")

    async def dispatch(self, payload: Dict[str, Any]) -> int:
        """Invoke the callback of every action in a block_actions payload."""
        handled = 0

        for action in payload.get("actions", []):
            action_id = action.get("action_id")
            interaction = self.registry.get(action_id)

            if interaction is None or interaction.on_event is None:
                logger.warning("no callback registered for action %r", action_id)
                continue

            event = decode_action(interaction.event_kind, action, payload)
            await _call(interaction.on_event, event)
            handled += 1

        return handled

    async def search_options(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Answer a block_suggestion payload from an external menu's search callback."""
        action_id = payload.get("action_id")
        interaction = self.registry.get(action_id)

        if interaction is None or interaction.on_search_options is None:
            logger.warning("no option search registered for action %r", action_id)
            return {"options": []}

        event = decode_suggestion(payload)
        if interaction.min_query_length and len(event.query) < interaction.min_query_length:
            return {"options": []}

        options = await _call(interaction.on_search_options, event)
        return await render_options(options or [])
