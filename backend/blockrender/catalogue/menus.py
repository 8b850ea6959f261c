"""
Select menu conversion rules.

The wire ``type`` is synthesized from the variant: ``<variant>_select`` for
single menus and ``multi_<variant>_select`` for multi menus. Where the
initial selection comes from depends on the variant:

- static: the options marked selected among the children
- external: the ``initial_option(s)`` prop, taken as given
- users / channels / conversations: identifiers copied through
"""

from typing import Any, Dict, Optional

from blockrender.catalogue.options import collect_options
from blockrender.compiler.coercion import (
    expect_confirm,
    expect_role,
    first_selected,
    flatten_options,
    force_plain_text,
    is_grouped,
    options_only,
    options_or_groups,
    selected_options,
    strip_url,
)
from blockrender.compiler.engine import RenderScope
from blockrender.compiler.pending import when_ready
from blockrender.interactions.registry import EventKind
from blockrender.ir.props import ConversationFilter, Props
from blockrender.ir.resolved import Role


def _conversation_filter(conversation_filter: Optional[ConversationFilter]) -> Optional[Dict[str, Any]]:
    if conversation_filter is None:
        return None

    return {
        "include": conversation_filter.include,
        "exclude_external_shared_channels": conversation_filter.exclude_external_shared_channels,
        "exclude_bot_users": conversation_filter.exclude_bot_users,
    }


def _static_options(props: Props, scope: RenderScope) -> Any:
    return when_ready(
        collect_options(props.children, scope),
        lambda items: options_or_groups(items, scope.name),
    )


def _base(props: Props, scope: RenderScope, wire_type: str) -> Dict[str, Any]:
    return {
        "type": wire_type,
        "action_id": props.action,
        "placeholder": force_plain_text(scope.resolve_text(props.placeholder)),
        "confirm": expect_confirm(scope.resolve(props.confirm), scope.name),
    }


def _claim(props: Props, scope: RenderScope, event_kind: EventKind) -> None:
    scope.claim(
        props.action,
        event_kind,
        on_event=props.on_select,
        on_search_options=getattr(props, "on_search_options", None),
        min_query_length=getattr(props, "min_query_length", None),
    )


def convert_select_menu(props: Props, scope: RenderScope) -> dict:
    _claim(props, scope, EventKind.SELECT_OPTION)
    menu = _base(props, scope, f"{props.type}_select")

    if props.type == "static":
        collected = _static_options(props, scope)
        menu["options"] = when_ready(collected, lambda items: None if is_grouped(items) else items)
        menu["option_groups"] = when_ready(collected, lambda items: items if is_grouped(items) else None)
        menu["initial_option"] = when_ready(
            collected, lambda items: first_selected(flatten_options(items))
        )

    elif props.type == "external":
        initial = expect_role(scope.resolve(props.initial_option), Role.OPTION, scope.name, "initial_option")
        menu["initial_option"] = when_ready(initial, lambda option: strip_url(option) if option else None)
        menu["min_query_length"] = props.min_query_length

    elif props.type == "users":
        menu["initial_user"] = props.initial_user

    elif props.type == "channels":
        menu["initial_channel"] = props.initial_channel

    elif props.type == "conversations":
        menu["initial_conversation"] = props.initial_conversation
        menu["filter"] = _conversation_filter(props.filter)

    return menu


def convert_multi_select_menu(props: Props, scope: RenderScope) -> dict:
    _claim(props, scope, EventKind.MULTI_SELECT_OPTION)
    menu = _base(props, scope, f"multi_{props.type}_select")
    menu["max_selected_items"] = props.max_selected_items

    if props.type == "static":
        collected = _static_options(props, scope)
        menu["options"] = when_ready(collected, lambda items: None if is_grouped(items) else items)
        menu["option_groups"] = when_ready(collected, lambda items: items if is_grouped(items) else None)
        menu["initial_options"] = when_ready(
            collected, lambda items: selected_options(flatten_options(items))
        )

    elif props.type == "external":
        initial = scope.resolve_children(props.initial_options)
        menu["initial_options"] = when_ready(
            initial,
            lambda items: [strip_url(option) for option in options_only(items, scope.name)] or None,
        )
        menu["min_query_length"] = props.min_query_length

    elif props.type == "users":
        menu["initial_users"] = props.initial_users

    elif props.type == "channels":
        menu["initial_channels"] = props.initial_channels

    elif props.type == "conversations":
        menu["initial_conversations"] = props.initial_conversations
        menu["filter"] = _conversation_filter(props.filter)

    return menu
