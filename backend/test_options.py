import pytest

from blockrender import ShapeError, h, render_sync


def plain(text):
    return {"type": "plain_text", "text": text}


def test_checkboxes_collect_options_and_selection():
    checkboxes = h(
        "checkboxes",
        h("option", "Alpha", value="a", url="https://example.com/a", selected=True),
        h("option", "Beta", value="b", description="second"),
        h("option", "Gamma", value="c", selected=True),
        action="letters",
    )
    document = render_sync(checkboxes).document

    assert document["type"] == "checkboxes"
    assert document["options"] == [
        {"text": plain("Alpha"), "value": "a", "url": "https://example.com/a"},
        {"text": plain("Beta"), "value": "b", "description": plain("second")},
        {"text": plain("Gamma"), "value": "c"},
    ]
    assert document["initial_options"] == [
        {"text": plain("Alpha"), "value": "a"},
        {"text": plain("Gamma"), "value": "c"},
    ]


def test_checkboxes_without_selection_omit_initial_options():
    checkboxes = h("checkboxes", h("option", "A", value="a"), action="cb")
    document = render_sync(checkboxes).document

    assert "initial_options" not in document


def test_option_keeps_markdown_text():
    checkboxes = h("checkboxes", h("option", h("text", "*A*", type="mrkdwn"), value="a"), action="cb")
    document = render_sync(checkboxes).document

    assert document["options"][0]["text"] == {"type": "mrkdwn", "text": "*A*"}


def test_option_list_children_are_flattened():
    options = [h("option", label, value=label.lower()) for label in ("One", "Two")]
    checkboxes = h("checkboxes", options, None, h("option", "Three", value="three"), action="cb")
    document = render_sync(checkboxes).document

    assert [option["value"] for option in document["options"]] == ["one", "two", "three"]


def test_checkboxes_reject_non_option_children():
    with pytest.raises(ShapeError) as exc:
        render_sync(h("checkboxes", "loose text", action="cb"))

    assert exc.value.kind == "checkboxes"


def test_radio_buttons_pick_first_selected():
    radio = h(
        "radio-buttons",
        h("option", "A", value="a"),
        h("option", "B", value="b", selected=True, url="https://example.com/b"),
        h("option", "C", value="c", selected=True),
        action="pick",
    )
    document = render_sync(radio).document

    assert document["type"] == "radio_buttons"
    assert document["initial_option"] == {"text": plain("B"), "value": "b"}


def test_radio_buttons_without_selection():
    radio = h("radio-buttons", h("option", "A", value="a"), action="pick")
    document = render_sync(radio).document

    assert "initial_option" not in document


def test_overflow_menu_keeps_option_urls():
    overflow = h(
        "overflow",
        h("option", "Docs", value="docs", url="https://example.com/docs"),
        h("option", "Help", value="help"),
        action="more",
    )
    document = render_sync(overflow).document

    assert document == {
        "type": "overflow",
        "action_id": "more",
        "options": [
            {"text": plain("Docs"), "value": "docs", "url": "https://example.com/docs"},
            {"text": plain("Help"), "value": "help"},
        ],
    }


def test_option_group_rejects_nested_groups():
    group = h("option-group", h("option-group", label="inner"), label="outer")

    with pytest.raises(ShapeError):
        render_sync(h("select-menu", group, action="menu", placeholder="Pick"))


def test_option_value_is_required():
    with pytest.raises(ShapeError) as exc:
        render_sync(h("checkboxes", h("option", "A"), action="cb"))

    assert exc.value.kind == "option"


def test_checkboxes_flatten_option_groups_in_order():
    checkboxes = h(
        "checkboxes",
        h("option-group", h("option", "A", value="a"), h("option", "B", value="b", selected=True), label="First"),
        h("option-group", h("option", "C", value="c", selected=True), label="Second"),
        action="grouped",
    )
    document = render_sync(checkboxes).document

    assert [option["value"] for option in document["options"]] == ["a", "b", "c"]
    assert [option["value"] for option in document["initial_options"]] == ["b", "c"]


def test_radio_buttons_pick_first_selected_across_groups():
    radio = h(
        "radio-buttons",
        h("option-group", h("option", "A", value="a"), label="First"),
        h("option-group", h("option", "B", value="b", selected=True), h("option", "C", value="c", selected=True), label="Second"),
        action="pick",
    )
    document = render_sync(radio).document

    assert len(document["options"]) == 3
    assert document["initial_option"]["value"] == "b"
