import pytest

from blockrender import InteractionRegistry, h, render_sync
from blockrender.interactions import (
    ClickEvent,
    MultiSelectOptionEvent,
    SearchOptionsEvent,
    SelectDateEvent,
    SelectOptionEvent,
)
from blockrender.interactions.dispatcher import InteractionDispatcher


def registry_for(tree):
    registry = InteractionRegistry()
    render_sync(tree, registry=registry)
    return registry


def block_actions(*actions):
    return {
        "type": "block_actions",
        "user": {"id": "U1"},
        "channel": {"id": "C1"},
        "trigger_id": "T1",
        "response_url": "https://hooks.example.com/r",
        "actions": list(actions),
    }


@pytest.mark.asyncio
async def test_click_is_dispatched_to_button_callback():
    events = []
    dispatcher = InteractionDispatcher(registry_for(h("button", "Go", action="go", on_click=events.append)))

    handled = await dispatcher.dispatch(block_actions({"action_id": "go", "value": "v1"}))

    assert handled == 1
    event = events[0]
    assert isinstance(event, ClickEvent)
    assert event.value == "v1"
    assert event.user_id == "U1"
    assert event.channel_id == "C1"
    assert event.trigger_id == "T1"
    assert event.response_url == "https://hooks.example.com/r"


@pytest.mark.asyncio
async def test_async_callbacks_are_awaited():
    events = []

    async def on_click(event):
        events.append(event)

    dispatcher = InteractionDispatcher(registry_for(h("button", "Go", action="go", on_click=on_click)))
    response = await dispatcher.handle(block_actions({"action_id": "go"}))

    assert len(events) == 1
    assert response == {"status": "ok", "handled": 1}


@pytest.mark.asyncio
async def test_unknown_action_is_skipped():
    dispatcher = InteractionDispatcher(InteractionRegistry())

    assert await dispatcher.dispatch(block_actions({"action_id": "nobody"})) == 0


@pytest.mark.asyncio
async def test_option_selection_events():
    events = []
    tree = h(
        "actions",
        h("radio-buttons", h("option", "A", value="a"), action="radio", on_select=events.append),
        h("checkboxes", h("option", "A", value="a"), action="boxes", on_select=events.append),
        h("date-picker", action="when", on_select=events.append),
    )
    dispatcher = InteractionDispatcher(registry_for(tree))

    handled = await dispatcher.dispatch(
        block_actions(
            {"action_id": "radio", "selected_option": {"value": "a"}},
            {"action_id": "boxes", "selected_options": [{"value": "a"}, {"value": "b"}]},
            {"action_id": "when", "selected_date": "2024-05-01"},
        )
    )

    assert handled == 3
    radio, boxes, when = events
    assert isinstance(radio, SelectOptionEvent) and radio.selected == "a"
    assert isinstance(boxes, MultiSelectOptionEvent) and boxes.selected == ["a", "b"]
    assert isinstance(when, SelectDateEvent) and when.selected_date == "2024-05-01"


@pytest.mark.asyncio
async def test_user_select_event_carries_identifier():
    events = []
    tree = h(
        "actions",
        h("select-menu", type="users", action="who", placeholder="Who", on_select=events.append),
        h("multi-select-menu", type="channels", action="where", placeholder="Where", on_select=events.append),
    )
    dispatcher = InteractionDispatcher(registry_for(tree))

    await dispatcher.dispatch(
        block_actions(
            {"action_id": "who", "selected_user": "U7"},
            {"action_id": "where", "selected_channels": ["C1", "C2"]},
        )
    )

    assert events[0].selected == "U7"
    assert events[1].selected == ["C1", "C2"]


def external_menu(on_search_options, min_query_length=None):
    return h(
        "select-menu",
        type="external",
        action="lookup",
        placeholder="Search",
        on_search_options=on_search_options,
        min_query_length=min_query_length,
    )


@pytest.mark.asyncio
async def test_search_options_renders_callback_result():
    queries = []

    async def search(event):
        queries.append(event)
        return [h("option", "Alpha", value="alpha")]

    dispatcher = InteractionDispatcher(registry_for(external_menu(search, min_query_length=2)))
    response = await dispatcher.handle({"type": "block_suggestion", "action_id": "lookup", "value": "al"})

    assert response == {"options": [{"text": {"type": "plain_text", "text": "Alpha"}, "value": "alpha"}]}
    assert isinstance(queries[0], SearchOptionsEvent)
    assert queries[0].query == "al"


@pytest.mark.asyncio
async def test_search_options_skips_short_queries():
    calls = []

    def search(event):
        calls.append(event)
        return []

    dispatcher = InteractionDispatcher(registry_for(external_menu(search, min_query_length=3)))
    response = await dispatcher.search_options({"type": "block_suggestion", "action_id": "lookup", "value": "ab"})

    assert response == {"options": []}
    assert calls == []


@pytest.mark.asyncio
async def test_search_options_for_unknown_action():
    dispatcher = InteractionDispatcher(InteractionRegistry())
    response = await dispatcher.search_options({"type": "block_suggestion", "action_id": "missing", "value": "x"})

    assert response == {"options": []}


@pytest.mark.asyncio
async def test_unsupported_payload_type():
    dispatcher = InteractionDispatcher(InteractionRegistry())

    with pytest.raises(ValueError):
        await dispatcher.handle({"type": "view_submission"})
