# Root surfaces: message, modal, app home

from blockrender.compiler.coercion import expect_blocks, force_plain_text
from blockrender.compiler.engine import RenderScope
from blockrender.ir.props import HomeProps, MessageProps, ModalProps


def convert_message(props: MessageProps, scope: RenderScope) -> dict:
    return {
        "blocks": expect_blocks(scope.resolve_children(props.children), scope.name),
        "text": props.text,
    }


def convert_modal(props: ModalProps, scope: RenderScope) -> dict:
    return {
        "type": "modal",
        "title": force_plain_text(scope.resolve_text(props.title)),
        "submit": force_plain_text(scope.resolve_text(props.submit)),
        "close": force_plain_text(scope.resolve_text(props.close)),
        "blocks": expect_blocks(scope.resolve_children(props.children), scope.name),
        "callback_id": props.callback_id,
        "private_metadata": props.private_metadata,
    }


def convert_home(props: HomeProps, scope: RenderScope) -> dict:
    return {
        "type": "home",
        "title": force_plain_text(scope.resolve_text(props.title)),
        "blocks": expect_blocks(scope.resolve_children(props.children), scope.name),
    }
