from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class TextKind(str, Enum):
    PLAIN = "plain_text"
    MARKDOWN = "mrkdwn"
    GENERIC = "text"  # bare string child; settled by the parent, never emitted


class Role(Enum):
    CONFIRM = "confirm"
    OPTION = "option"
    OPTION_GROUP = "option_group"


@dataclass
class Tagged:
    """
    A resolved value that carries an internal role alongside its payload.

    Confirm dialogs, options and option groups have no ``type`` field on
    the wire, so parents identify them by role instead. The wire
    serializer emits only ``value``.
    """

    role: Role
    value: Dict[str, Any]
    selected: bool = False

    @property
    def is_option(self) -> bool:
        return self.role is Role.OPTION

    @property
    def is_option_group(self) -> bool:
        return self.role is Role.OPTION_GROUP

    @property
    def is_confirm(self) -> bool:
        return self.role is Role.CONFIRM


BLOCK_TYPES = frozenset({"section", "actions", "context", "divider", "input", "image"})


def is_text_object(value: Any) -> bool:
    return isinstance(value, dict) and value.get("type") in {k.value for k in TextKind}
