# Block-level conversion rules: section, actions, context, divider, image, input

from blockrender.compiler.coercion import (
    force_plain_text,
    settle_text,
    settle_texts,
    single_element,
)
from blockrender.compiler.engine import RenderScope
from blockrender.compiler.pending import when_ready
from blockrender.ir.props import (
    ActionsProps,
    ContextProps,
    DividerProps,
    ImageBlockProps,
    ImageProps,
    InputProps,
    SectionProps,
)


def convert_section(props: SectionProps, scope: RenderScope) -> dict:
    """
    Children become ``fields``. Option-collecting parents reuse this rule
    just to get their children resolved and flattened into that list.
    """
    fields = settle_texts(scope.resolve_children(props.children))

    return {
        "type": "section",
        "block_id": props.block_id,
        "text": settle_text(scope.resolve_text(props.text)),
        "accessory": scope.resolve(props.accessory),
        "fields": when_ready(fields, lambda items: items or None),
    }


def convert_actions(props: ActionsProps, scope: RenderScope) -> dict:
    return {
        "type": "actions",
        "block_id": props.block_id,
        "elements": scope.resolve_children(props.children),
    }


def convert_context(props: ContextProps, scope: RenderScope) -> dict:
    return {
        "type": "context",
        "block_id": props.block_id,
        "elements": settle_texts(scope.resolve_children(props.children)),
    }


def convert_divider(props: DividerProps, scope: RenderScope) -> dict:
    return {"type": "divider", "block_id": props.block_id}


def convert_image(props: ImageProps, scope: RenderScope) -> dict:
    return {
        "type": "image",
        "image_url": props.image_url,
        "alt_text": props.alt,
    }


def convert_image_block(props: ImageBlockProps, scope: RenderScope) -> dict:
    block = {
        "type": "image",
        "block_id": props.block_id,
        "image_url": props.image_url,
        "alt_text": props.alt,
    }

    if props.title:
        block["title"] = {
            "type": "plain_text",
            "text": props.title,
            "emoji": props.emoji,
        }

    return block


def convert_input(props: InputProps, scope: RenderScope) -> dict:
    return {
        "type": "input",
        "block_id": props.block_id,
        "label": force_plain_text(scope.resolve_text(props.label)),
        "hint": force_plain_text(scope.resolve_text(props.hint)),
        "optional": props.optional,
        "element": single_element(scope.resolve_children(props.children), scope.name),
    }
