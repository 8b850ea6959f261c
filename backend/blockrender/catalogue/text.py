from blockrender.compiler.engine import RenderScope
from blockrender.ir.props import TextProps
from blockrender.ir.resolved import TextKind


def convert_text(props: TextProps, scope: RenderScope) -> dict:
    # emoji only applies to plain_text, verbatim only to mrkdwn
    text = {"type": props.type, "text": scope.text_content(props.children)}

    if props.type == TextKind.MARKDOWN.value:
        text["verbatim"] = props.verbatim
    else:
        text["emoji"] = props.emoji

    return text
