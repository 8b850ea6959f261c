from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, List, Mapping, Union

from .errors import UnknownVariantError


class NodeKind(str, Enum):
    TEXT = "text"
    BUTTON = "button"
    SECTION = "section"
    ACTIONS = "actions"
    IMAGE = "image"
    IMAGE_BLOCK = "image-block"
    DIVIDER = "divider"
    CONTEXT = "context"
    CONFIRM = "confirm"
    OPTION = "option"
    OPTION_GROUP = "option-group"
    DATE_PICKER = "date-picker"
    MESSAGE = "message"
    MODAL = "modal"
    HOME = "home"
    INPUT = "input"
    TEXT_FIELD = "text-field"
    CHECKBOXES = "checkboxes"
    OVERFLOW_MENU = "overflow"
    RADIO_BUTTONS = "radio-buttons"
    SELECT_MENU = "select-menu"
    MULTI_SELECT_MENU = "multi-select-menu"


@dataclass(frozen=True, eq=False)
class Node:
    """
    One element of a declarative UI tree.

    The kind is fixed at construction and props are frozen into a
    read-only mapping; their shape is checked when the node is converted.
    """

    kind: NodeKind
    props: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        try:
            kind = NodeKind(self.kind)
        except ValueError:
            raise UnknownVariantError(
                "node", self.kind, [k.value for k in NodeKind]
            ) from None

        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "props", MappingProxyType(dict(self.props)))

    def __repr__(self) -> str:
        return f"Node({self.kind.value}, {dict(self.props)!r})"


def h(kind: Union[NodeKind, str], *children: Any, **props: Any) -> Node:
    """
    Build a Node.

        h("button", "Go", action="go")
        h(NodeKind.SECTION, h("text", "*hi*", type="mrkdwn"))

    Positional children land in the ``children`` prop: a single child is
    stored as-is, several are stored as a tuple.
    """
    if children:
        props["children"] = children[0] if len(children) == 1 else tuple(children)
    return Node(kind, props)


def iter_children(children: Any) -> List[Any]:
    """Flatten nested child sequences and drop None / booleans."""
    if children is None or isinstance(children, bool):
        return []

    if isinstance(children, (list, tuple)):
        flat: List[Any] = []
        for child in children:
            flat.extend(iter_children(child))
        return flat

    return [children]
