from typing import Any

from blockrender.ir.node import Node


def node_from_dict(obj: Any):
    """
    Build a node tree from its JSON form.

    A dict with a ``kind`` key is a node; its ``children`` and every prop
    value are converted recursively, so nested nodes may appear anywhere
    (``confirm``, ``placeholder``, ``initialOption``...). Other values pass
    through unchanged.
    """

    if isinstance(obj, list):
        return [node_from_dict(item) for item in obj]

    if isinstance(obj, dict) and "kind" in obj:
        props = {key: node_from_dict(value) for key, value in (obj.get("props") or {}).items()}

        children = obj.get("children")
        if children is not None:
            props["children"] = node_from_dict(children)

        return Node(obj["kind"], props)

    if isinstance(obj, dict):
        return {key: node_from_dict(value) for key, value in obj.items()}

    return obj
