"""
Coercion and flattening rules shared by composite conversion rules.

Every helper accepts values that may still contain placeholders and
returns either the result or a Derived value computing it later.
"""

from dataclasses import replace
from typing import Any, Dict, List, Optional

from blockrender.compiler.pending import when_ready
from blockrender.ir.errors import ShapeError
from blockrender.ir.resolved import BLOCK_TYPES, Role, Tagged, TextKind, is_text_object


# ============================================================
# Text
# ============================================================

def generic_text(text: str) -> Dict[str, Any]:
    return {"type": TextKind.GENERIC.value, "text": text}


def join_text(parts: List[Any]) -> str:
    chunks = []
    for part in parts:
        if part is None:
            continue
        if isinstance(part, str):
            chunks.append(part)
        elif is_text_object(part):
            chunks.append(part["text"])
        else:
            raise ShapeError.single("text", "text children must be strings or numbers", "children")
    return "".join(chunks)


def _demote(value: Any) -> Optional[Dict[str, Any]]:
    if value is None:
        return None
    if not is_text_object(value):
        raise ShapeError.single("text", f"expected a text object, got {_describe(value)}")

    demoted = {"type": TextKind.PLAIN.value, "text": value["text"]}
    if value.get("emoji") is not None:
        demoted["emoji"] = value["emoji"]
    return demoted


def force_plain_text(value: Any) -> Any:
    """Captions accept plain_text only; any other text kind is demoted."""
    return when_ready(value, _demote)


def _settle_generic(value: Any) -> Any:
    if isinstance(value, dict) and value.get("type") == TextKind.GENERIC.value:
        return {"type": TextKind.PLAIN.value, "text": value["text"]}
    return value


def settle_text(value: Any) -> Any:
    """Generic text becomes plain_text; declared kinds are kept."""
    return when_ready(value, _settle_generic)


def settle_texts(items: Any) -> Any:
    return when_ready(items, lambda values: [_settle_generic(v) for v in values])


# ============================================================
# Roles
# ============================================================

def _describe(value: Any) -> str:
    if isinstance(value, Tagged):
        return value.role.value
    if isinstance(value, dict) and "type" in value:
        return repr(value["type"])
    return type(value).__name__


def expect_role(value: Any, role: Role, where: str, location: str = "") -> Any:
    def check(resolved):
        if resolved is None:
            return None
        if not (isinstance(resolved, Tagged) and resolved.role is role):
            raise ShapeError.single(
                where, f"expected {role.value}, got {_describe(resolved)}", location
            )
        return resolved

    return when_ready(value, check)


def expect_confirm(value: Any, where: str) -> Any:
    return expect_role(value, Role.CONFIRM, where, "confirm")


def expect_blocks(items: Any, where: str) -> Any:
    def check(values):
        for value in values:
            if isinstance(value, Tagged) or not (
                isinstance(value, dict) and value.get("type") in BLOCK_TYPES
            ):
                raise ShapeError.single(
                    where, f"{_describe(value)} cannot be placed in blocks", "children"
                )
        return values

    return when_ready(items, check)


def single_element(items: Any, where: str) -> Any:
    def check(values):
        if len(values) != 1:
            raise ShapeError.single(
                where, f"expected exactly one element, got {len(values)}", "children"
            )
        return values[0]

    return when_ready(items, check)


# ============================================================
# Options
# ============================================================

def options_only(items: Optional[List[Any]], where: str) -> List[Tagged]:
    items = items or []
    for item in items:
        if not (isinstance(item, Tagged) and item.is_option):
            raise ShapeError.single(where, f"expected option, got {_describe(item)}", "children")
    return items


def options_or_groups(items: Optional[List[Any]], where: str) -> List[Tagged]:
    """A flat option list, or a list of option groups; never a mix."""
    items = items or []
    if not items:
        return items

    expected = Role.OPTION_GROUP if is_grouped(items) else Role.OPTION
    for item in items:
        if not (isinstance(item, Tagged) and item.role is expected):
            raise ShapeError.single(
                where, f"expected {expected.value}, got {_describe(item)}", "children"
            )
    return items


def is_grouped(items: List[Any]) -> bool:
    # The first item decides for the whole list.
    return bool(items) and isinstance(items[0], Tagged) and items[0].is_option_group


def flatten_options(items: List[Tagged]) -> List[Tagged]:
    if not items:
        return []

    if not is_grouped(items):
        return list(items)

    options: List[Tagged] = []
    for group in items:
        options.extend(group.value.get("options") or [])
    return options


def strip_url(option: Tagged) -> Tagged:
    return replace(option, value={**option.value, "url": None})


def selected_options(options: List[Tagged]) -> List[Tagged]:
    return [strip_url(option) for option in options if option.selected]


def first_selected(options: List[Tagged]) -> Optional[Tagged]:
    return next((strip_url(option) for option in options if option.selected), None)
