from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from blockrender.interactions.registry import EventKind

_SELECTED_KEYS = ("selected_user", "selected_channel", "selected_conversation")
_MULTI_SELECTED_KEYS = ("selected_users", "selected_channels", "selected_conversations")


@dataclass
class InteractionEvent:
    action_id: str
    user_id: Optional[str] = None
    channel_id: Optional[str] = None
    trigger_id: Optional[str] = None
    response_url: Optional[str] = None
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ClickEvent(InteractionEvent):
    value: Optional[str] = None


@dataclass
class SelectOptionEvent(InteractionEvent):
    selected: Optional[str] = None
    selected_option: Optional[Dict[str, Any]] = None


@dataclass
class MultiSelectOptionEvent(InteractionEvent):
    selected: List[str] = field(default_factory=list)
    selected_options: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class SelectDateEvent(InteractionEvent):
    selected_date: Optional[str] = None


@dataclass
class SearchOptionsEvent(InteractionEvent):
    query: str = ""


def _common(action_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "action_id": action_id,
        "user_id": (payload.get("user") or {}).get("id"),
        "channel_id": (payload.get("channel") or {}).get("id"),
        "trigger_id": payload.get("trigger_id"),
        "response_url": payload.get("response_url"),
        "payload": payload,
    }


def _single_selection(action: Dict[str, Any]) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
    option = action.get("selected_option")
    if option:
        return option.get("value"), option

    for key in _SELECTED_KEYS:
        if action.get(key):
            return action[key], None

    return None, None


def _multi_selection(action: Dict[str, Any]) -> Tuple[List[str], List[Dict[str, Any]]]:
    options = action.get("selected_options")
    if options is not None:
        return [option.get("value") for option in options], options

    for key in _MULTI_SELECTED_KEYS:
        if action.get(key) is not None:
            return list(action[key]), []

    return [], []


def decode_action(kind: EventKind, action: Dict[str, Any], payload: Dict[str, Any]) -> InteractionEvent:
    """Build the event for one entry of a block_actions payload."""
    common = _common(action.get("action_id", ""), payload)

    if kind is EventKind.CLICK:
        return ClickEvent(value=action.get("value"), **common)

    if kind is EventKind.SELECT_OPTION:
        selected, option = _single_selection(action)
        return SelectOptionEvent(selected=selected, selected_option=option, **common)

    if kind is EventKind.MULTI_SELECT_OPTION:
        selected, options = _multi_selection(action)
        return MultiSelectOptionEvent(selected=selected, selected_options=options, **common)

    if kind is EventKind.SELECT_DATE:
        return SelectDateEvent(selected_date=action.get("selected_date"), **common)

    return InteractionEvent(**common)


def decode_suggestion(payload: Dict[str, Any]) -> SearchOptionsEvent:
    """Build the event for a block_suggestion payload."""
    return SearchOptionsEvent(
        query=payload.get("value") or "",
        **_common(payload.get("action_id", ""), payload),
    )
