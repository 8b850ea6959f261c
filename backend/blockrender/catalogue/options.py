"""
Option conversion rules and the elements built from option lists.

Option and OptionGroup never appear on their own in a document: they
resolve to tagged values that checkboxes, radio buttons, overflow menus
and select menus collect, flatten and pick initial selections from.
"""

from typing import Any

from blockrender.compiler.coercion import (
    expect_confirm,
    first_selected,
    flatten_options,
    force_plain_text,
    options_only,
    options_or_groups,
    selected_options,
    settle_text,
)
from blockrender.compiler.engine import RenderScope
from blockrender.compiler.pending import when_ready
from blockrender.interactions.registry import EventKind
from blockrender.ir.node import NodeKind, h
from blockrender.ir.props import (
    CheckboxesProps,
    OptionGroupProps,
    OptionProps,
    OverflowMenuProps,
    RadioButtonsProps,
)
from blockrender.ir.resolved import Role, Tagged


def convert_option(props: OptionProps, scope: RenderScope) -> Tagged:
    return Tagged(
        Role.OPTION,
        {
            "text": settle_text(scope.resolve_text(props.children)),
            "value": props.value,
            "description": force_plain_text(scope.resolve_text(props.description)),
            "url": props.url,
        },
        selected=props.selected,
    )


def convert_option_group(props: OptionGroupProps, scope: RenderScope) -> Tagged:
    options = scope.resolve_children(props.children)

    return Tagged(
        Role.OPTION_GROUP,
        {
            "label": force_plain_text(scope.resolve_text(props.label)),
            "options": when_ready(options, lambda items: options_only(items, scope.name)),
        },
    )


def collect_options(children: Any, scope: RenderScope) -> Any:
    """Resolve children through the section rule and return its fields."""
    section = scope.resolve(h(NodeKind.SECTION, children=children))
    return section["fields"]


def _flat_options(children: Any, scope: RenderScope) -> Any:
    # These elements have no option_groups field; groups are flattened away.
    return when_ready(
        collect_options(children, scope),
        lambda items: flatten_options(options_or_groups(items, scope.name)),
    )


def convert_checkboxes(props: CheckboxesProps, scope: RenderScope) -> dict:
    scope.claim(props.action, EventKind.MULTI_SELECT_OPTION, on_event=props.on_select)

    options = _flat_options(props.children, scope)

    return {
        "type": "checkboxes",
        "action_id": props.action,
        "options": options,
        "initial_options": when_ready(options, lambda items: selected_options(items) or None),
        "confirm": expect_confirm(scope.resolve(props.confirm), scope.name),
    }


def convert_radio_buttons(props: RadioButtonsProps, scope: RenderScope) -> dict:
    scope.claim(props.action, EventKind.SELECT_OPTION, on_event=props.on_select)

    options = _flat_options(props.children, scope)

    return {
        "type": "radio_buttons",
        "action_id": props.action,
        "options": options,
        "initial_option": when_ready(options, first_selected),
        "confirm": expect_confirm(scope.resolve(props.confirm), scope.name),
    }


def convert_overflow_menu(props: OverflowMenuProps, scope: RenderScope) -> dict:
    scope.claim(props.action, EventKind.SELECT_OPTION, on_event=props.on_select)

    return {
        "type": "overflow",
        "action_id": props.action,
        "options": _flat_options(props.children, scope),
        "confirm": expect_confirm(scope.resolve(props.confirm), scope.name),
    }
