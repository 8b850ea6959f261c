"""
Props shapes for every node kind.

Field names are snake_case; the camelCase spelling used by JSON trees
(``imageUrl``, ``minQueryLength``, ``onSearchOptions``) is accepted as an
alias. Props that may hold a nested node are typed ``Renderable``.
"""

from typing import Any, Callable, Dict, List, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .errors import ShapeError, UnknownVariantError
from .node import Node, NodeKind

# Node, string, number, list of those, awaitable, or None.
Renderable = Any
Callback = Optional[Callable[..., Any]]


class Props(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        frozen=True,
        extra="ignore",
    )


# -------------------------
# Text & layout
# -------------------------

TEXT_TYPES = ("plain_text", "mrkdwn")


class TextProps(Props):
    children: Renderable
    type: Literal["plain_text", "mrkdwn"] = "plain_text"
    emoji: Optional[bool] = None
    verbatim: Optional[bool] = None


class SectionProps(Props):
    text: Renderable = None
    children: Renderable = None
    accessory: Renderable = None
    block_id: Optional[str] = None


class ActionsProps(Props):
    children: Renderable
    block_id: Optional[str] = None


class ContextProps(Props):
    children: Renderable
    block_id: Optional[str] = None


class DividerProps(Props):
    block_id: Optional[str] = None


class ImageProps(Props):
    image_url: str
    alt: str


class ImageBlockProps(Props):
    image_url: str
    alt: str
    title: Optional[str] = None
    emoji: Optional[bool] = None
    block_id: Optional[str] = None


class InputProps(Props):
    label: Renderable
    children: Renderable
    hint: Renderable = None
    optional: Optional[bool] = None
    block_id: Optional[str] = None


# -------------------------
# Elements
# -------------------------

class ButtonProps(Props):
    children: Renderable
    action: str
    on_click: Callback = None
    confirm: Renderable = None
    emoji: Optional[bool] = None
    style: Optional[Literal["danger", "primary"]] = None
    url: Optional[str] = None
    value: Optional[str] = None


class ConfirmProps(Props):
    children: Renderable
    title: Renderable
    confirm: Renderable
    deny: Renderable
    style: Optional[Literal["danger", "primary"]] = None


class DatePickerProps(Props):
    action: str
    confirm: Renderable = None
    initial_date: Optional[str] = None
    on_select: Callback = None
    placeholder: Renderable = None


class TextFieldProps(Props):
    action: str
    initial_value: Optional[str] = None
    max_length: Optional[int] = None
    min_length: Optional[int] = None
    multiline: Optional[bool] = None
    placeholder: Renderable = None


# -------------------------
# Options
# -------------------------

class OptionProps(Props):
    children: Renderable
    value: str
    description: Renderable = None
    url: Optional[str] = None
    selected: bool = False


class OptionGroupProps(Props):
    label: Renderable
    children: Renderable = None


class OptionListProps(Props):
    action: str
    children: Renderable = None
    confirm: Renderable = None
    on_select: Callback = None


class CheckboxesProps(OptionListProps):
    pass


class OverflowMenuProps(OptionListProps):
    pass


class RadioButtonsProps(OptionListProps):
    pass


# -------------------------
# Select menus
# -------------------------

class ConversationFilter(Props):
    include: Optional[List[Literal["im", "mpim", "private", "public"]]] = None
    exclude_external_shared_channels: Optional[bool] = None
    exclude_bot_users: Optional[bool] = None


class SelectMenuBase(Props):
    action: str
    placeholder: Renderable
    confirm: Renderable = None
    on_select: Callback = None


class StaticSelectProps(SelectMenuBase):
    type: Literal["static"] = "static"
    children: Renderable = None


class UsersSelectProps(SelectMenuBase):
    type: Literal["users"]
    initial_user: Optional[str] = None


class ChannelsSelectProps(SelectMenuBase):
    type: Literal["channels"]
    initial_channel: Optional[str] = None


class ExternalSelectProps(SelectMenuBase):
    type: Literal["external"]
    on_search_options: Callable[..., Any]
    initial_option: Renderable = None
    min_query_length: Optional[int] = None


class ConversationsSelectProps(SelectMenuBase):
    type: Literal["conversations"]
    initial_conversation: Optional[str] = None
    filter: Optional[ConversationFilter] = None


class MultiSelectMenuBase(SelectMenuBase):
    max_selected_items: Optional[int] = None


class MultiStaticSelectProps(MultiSelectMenuBase):
    type: Literal["static"] = "static"
    children: Renderable = None


class MultiUsersSelectProps(MultiSelectMenuBase):
    type: Literal["users"]
    initial_users: Optional[List[str]] = None


class MultiChannelsSelectProps(MultiSelectMenuBase):
    type: Literal["channels"]
    initial_channels: Optional[List[str]] = None


class MultiExternalSelectProps(MultiSelectMenuBase):
    type: Literal["external"]
    on_search_options: Callable[..., Any]
    initial_options: Renderable = None
    min_query_length: Optional[int] = None


class MultiConversationsSelectProps(MultiSelectMenuBase):
    type: Literal["conversations"]
    initial_conversations: Optional[List[str]] = None
    filter: Optional[ConversationFilter] = None


SELECT_MENU_VARIANTS: Dict[str, Type[Props]] = {
    "static": StaticSelectProps,
    "users": UsersSelectProps,
    "channels": ChannelsSelectProps,
    "external": ExternalSelectProps,
    "conversations": ConversationsSelectProps,
}

MULTI_SELECT_MENU_VARIANTS: Dict[str, Type[Props]] = {
    "static": MultiStaticSelectProps,
    "users": MultiUsersSelectProps,
    "channels": MultiChannelsSelectProps,
    "external": MultiExternalSelectProps,
    "conversations": MultiConversationsSelectProps,
}


# -------------------------
# Surfaces
# -------------------------

class MessageProps(Props):
    children: Renderable = None
    text: Optional[str] = None


class ModalProps(Props):
    title: Renderable
    children: Renderable = None
    submit: Renderable = None
    close: Renderable = None
    callback_id: Optional[str] = None
    private_metadata: Optional[str] = None


class HomeProps(Props):
    children: Renderable = None
    title: Renderable = None


PROPS_BY_KIND: Dict[NodeKind, Type[Props]] = {
    NodeKind.TEXT: TextProps,
    NodeKind.BUTTON: ButtonProps,
    NodeKind.SECTION: SectionProps,
    NodeKind.ACTIONS: ActionsProps,
    NodeKind.IMAGE: ImageProps,
    NodeKind.IMAGE_BLOCK: ImageBlockProps,
    NodeKind.DIVIDER: DividerProps,
    NodeKind.CONTEXT: ContextProps,
    NodeKind.CONFIRM: ConfirmProps,
    NodeKind.OPTION: OptionProps,
    NodeKind.OPTION_GROUP: OptionGroupProps,
    NodeKind.DATE_PICKER: DatePickerProps,
    NodeKind.MESSAGE: MessageProps,
    NodeKind.MODAL: ModalProps,
    NodeKind.HOME: HomeProps,
    NodeKind.INPUT: InputProps,
    NodeKind.TEXT_FIELD: TextFieldProps,
    NodeKind.CHECKBOXES: CheckboxesProps,
    NodeKind.OVERFLOW_MENU: OverflowMenuProps,
    NodeKind.RADIO_BUTTONS: RadioButtonsProps,
}

VARIANTS_BY_KIND: Dict[NodeKind, Dict[str, Type[Props]]] = {
    NodeKind.SELECT_MENU: SELECT_MENU_VARIANTS,
    NodeKind.MULTI_SELECT_MENU: MULTI_SELECT_MENU_VARIANTS,
}


def props_model(node: Node) -> Type[Props]:
    if node.kind is NodeKind.TEXT:
        text_type = node.props.get("type", "plain_text")
        if not isinstance(text_type, str) or text_type not in TEXT_TYPES:
            raise UnknownVariantError(node.kind.value, text_type, TEXT_TYPES)
        return TextProps

    variants = VARIANTS_BY_KIND.get(node.kind)
    if variants is None:
        return PROPS_BY_KIND[node.kind]

    variant = node.props.get("type", "static")
    model = variants.get(variant) if isinstance(variant, str) else None
    if model is None:
        raise UnknownVariantError(node.kind.value, variant, list(variants))
    return model


def parse_props(node: Node) -> Props:
    """Validate a node's props against the shape of its kind."""
    model = props_model(node)
    try:
        return model.model_validate(dict(node.props))
    except ValidationError as exc:
        raise ShapeError.from_validation(node.kind.value, exc) from exc
