import pytest

from blockrender import DuplicateActionError, InteractionRegistry, get_interaction_registry, h, render_sync
from blockrender.interactions import EventKind, Interaction


def noop(event):
    return None


def test_duplicate_action_ids_are_rejected():
    tree = h("actions", h("button", "A", action="dup"), h("button", "B", action="dup"))

    with pytest.raises(DuplicateActionError) as exc:
        render_sync(tree)

    assert exc.value.action_id == "dup"


def test_duplicate_action_ids_across_kinds_are_rejected():
    tree = h(
        "message",
        h("actions", h("button", "A", action="same", on_click=noop)),
        h("input", h("text-field", action="same"), label="Name"),
    )

    with pytest.raises(DuplicateActionError) as exc:
        render_sync(tree)

    assert (exc.value.first, exc.value.second) == ("button", "text-field")


def test_only_nodes_with_callbacks_get_entries():
    tree = h(
        "actions",
        h("button", "Plain", action="plain"),
        h("button", "Wired", action="wired", on_click=noop),
    )
    result = render_sync(tree)

    assert result.action_ids == ["plain", "wired"]
    assert len(result.registry) == 1
    assert "wired" in result.registry
    assert "plain" not in result.registry


def test_entries_are_indexed_by_event_kind():
    tree = h(
        "actions",
        h("button", "Go", action="go", on_click=noop),
        h("date-picker", action="when", on_select=noop),
        h("checkboxes", h("option", "A", value="a"), action="boxes", on_select=noop),
    )
    registry = render_sync(tree).registry

    assert [entry.action_id for entry in registry.get_by_kind(EventKind.CLICK)] == ["go"]
    assert [entry.action_id for entry in registry.get_by_kind(EventKind.SELECT_DATE)] == ["when"]
    assert [entry.action_id for entry in registry.get_by_kind(EventKind.MULTI_SELECT_OPTION)] == ["boxes"]


def test_successful_pass_is_merged_into_target_registry():
    target = InteractionRegistry()
    render_sync(h("button", "Go", action="go", on_click=noop), registry=target)

    assert target.get("go").on_event is noop
    assert target.get("go").origin == "button"


def test_failed_pass_leaves_target_registry_untouched():
    target = InteractionRegistry()
    tree = h(
        "actions",
        h("button", "A", action="a", on_click=noop),
        h("button", "B", action="a", on_click=noop),
    )

    with pytest.raises(DuplicateActionError):
        render_sync(tree, registry=target)

    assert len(target) == 0


def test_error_policy_rejects_ids_taken_by_earlier_pass():
    target = InteractionRegistry()
    render_sync(h("button", "Go", action="go", on_click=noop), registry=target)

    with pytest.raises(DuplicateActionError):
        render_sync(h("button", "Again", action="go", on_click=noop), registry=target, policy="error")


def test_replace_policy_lets_newer_entry_win():
    def newer(event):
        return "newer"

    target = InteractionRegistry()
    render_sync(h("button", "Go", action="go", on_click=noop), registry=target)
    render_sync(h("date-picker", action="go", on_select=newer), registry=target, policy="replace")

    assert target.get("go").on_event is newer
    assert target.get_by_kind(EventKind.CLICK) == []
    assert [entry.action_id for entry in target.get_by_kind(EventKind.SELECT_DATE)] == ["go"]


def test_unknown_policy_is_rejected():
    with pytest.raises(ValueError):
        InteractionRegistry().absorb(InteractionRegistry(), policy="merge")


def test_claim_without_callbacks_is_not_stored():
    registry = InteractionRegistry()
    registry.claim(Interaction(action_id="field", origin="text-field"))

    assert registry.action_ids == ["field"]
    assert registry.get("field") is None
    assert registry.list_all() == []


def test_clear():
    registry = InteractionRegistry()
    registry.claim(Interaction(action_id="go", origin="button", event_kind=EventKind.CLICK, on_event=noop))
    registry.clear()

    assert len(registry) == 0
    assert registry.action_ids == []
    assert registry.get_by_kind(EventKind.CLICK) == []


def test_global_registry_is_shared():
    assert get_interaction_registry() is get_interaction_registry()


def test_rerendering_a_surface_needs_replace_policy():
    def surface():
        return h("actions", h("button", "Go", action="go", on_click=noop))

    target = InteractionRegistry()
    render_sync(surface(), registry=target)

    with pytest.raises(DuplicateActionError):
        render_sync(surface(), registry=target, policy="error")

    render_sync(surface(), registry=target, policy="replace")
    assert target.action_ids == ["go"]
    assert len(target) == 1
