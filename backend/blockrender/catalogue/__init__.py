# backend/blockrender/catalogue/__init__.py
"""
Node Catalogue

One conversion rule per node kind. A rule receives the node's validated
props and a RenderScope, resolves the props and children it needs, and
returns the node's resolved value.
"""

from blockrender.catalogue.blocks import (
    convert_actions,
    convert_context,
    convert_divider,
    convert_image,
    convert_image_block,
    convert_input,
    convert_section,
)
from blockrender.catalogue.elements import (
    convert_button,
    convert_confirm,
    convert_date_picker,
    convert_text_field,
)
from blockrender.catalogue.menus import convert_multi_select_menu, convert_select_menu
from blockrender.catalogue.options import (
    convert_checkboxes,
    convert_option,
    convert_option_group,
    convert_overflow_menu,
    convert_radio_buttons,
)
from blockrender.catalogue.surfaces import convert_home, convert_message, convert_modal
from blockrender.catalogue.text import convert_text
from blockrender.ir.node import NodeKind

CONVERSION_RULES = {
    NodeKind.TEXT: convert_text,
    NodeKind.BUTTON: convert_button,
    NodeKind.SECTION: convert_section,
    NodeKind.ACTIONS: convert_actions,
    NodeKind.IMAGE: convert_image,
    NodeKind.IMAGE_BLOCK: convert_image_block,
    NodeKind.DIVIDER: convert_divider,
    NodeKind.CONTEXT: convert_context,
    NodeKind.CONFIRM: convert_confirm,
    NodeKind.OPTION: convert_option,
    NodeKind.OPTION_GROUP: convert_option_group,
    NodeKind.DATE_PICKER: convert_date_picker,
    NodeKind.MESSAGE: convert_message,
    NodeKind.MODAL: convert_modal,
    NodeKind.HOME: convert_home,
    NodeKind.INPUT: convert_input,
    NodeKind.TEXT_FIELD: convert_text_field,
    NodeKind.CHECKBOXES: convert_checkboxes,
    NodeKind.OVERFLOW_MENU: convert_overflow_menu,
    NodeKind.RADIO_BUTTONS: convert_radio_buttons,
    NodeKind.SELECT_MENU: convert_select_menu,
    NodeKind.MULTI_SELECT_MENU: convert_multi_select_menu,
}


def check_catalogue(rules=CONVERSION_RULES) -> None:
    """Every node kind must have a conversion rule."""
    missing = [kind.value for kind in NodeKind if kind not in rules]
    if missing:
        raise RuntimeError(f"no conversion rule for: {', '.join(missing)}")


check_catalogue()

__all__ = ["CONVERSION_RULES", "check_catalogue"]
