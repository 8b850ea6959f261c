# Element conversion rules: button, confirm dialog, date picker, text field

from blockrender.compiler.coercion import expect_confirm, force_plain_text, settle_text
from blockrender.compiler.engine import RenderScope
from blockrender.interactions.registry import EventKind
from blockrender.ir.props import ButtonProps, ConfirmProps, DatePickerProps, TextFieldProps
from blockrender.ir.resolved import Role, Tagged


def convert_button(props: ButtonProps, scope: RenderScope) -> dict:
    scope.claim(props.action, EventKind.CLICK, on_event=props.on_click)

    return {
        "type": "button",
        "action_id": props.action,
        "text": {
            "type": "plain_text",
            "text": scope.text_content(props.children),
            "emoji": props.emoji,
        },
        "style": props.style,
        "url": props.url,
        "value": props.value,
        "confirm": expect_confirm(scope.resolve(props.confirm), scope.name),
    }


def convert_confirm(props: ConfirmProps, scope: RenderScope) -> Tagged:
    # The API forbids a ``type`` on confirm objects; the role tag stands in.
    return Tagged(
        Role.CONFIRM,
        {
            "title": force_plain_text(scope.resolve_text(props.title)),
            "text": settle_text(scope.resolve_text(props.children)),
            "confirm": force_plain_text(scope.resolve_text(props.confirm)),
            "deny": force_plain_text(scope.resolve_text(props.deny)),
            "style": props.style,
        },
    )


def convert_date_picker(props: DatePickerProps, scope: RenderScope) -> dict:
    scope.claim(props.action, EventKind.SELECT_DATE, on_event=props.on_select)

    return {
        "type": "datepicker",
        "action_id": props.action,
        "initial_date": props.initial_date,
        "placeholder": force_plain_text(scope.resolve_text(props.placeholder)),
        "confirm": expect_confirm(scope.resolve(props.confirm), scope.name),
    }


def convert_text_field(props: TextFieldProps, scope: RenderScope) -> dict:
    scope.claim(props.action)

    return {
        "type": "plain_text_input",
        "action_id": props.action,
        "initial_value": props.initial_value,
        "max_length": props.max_length,
        "min_length": props.min_length,
        "multiline": props.multiline,
        "placeholder": force_plain_text(scope.resolve_text(props.placeholder)),
    }
