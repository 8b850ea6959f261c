from pydantic import BaseModel
from typing import Any, Dict, List


class RenderRequest(BaseModel):
    """A node tree in JSON form: {"kind": ..., "props": {...}, "children": [...]}"""
    tree: Dict[str, Any]


class RenderResponse(BaseModel):
    document: Any
    actions: List[str] = []  # action ids claimed by the tree


class InteractionRequest(BaseModel):
    """A decoded interaction payload (block_actions or block_suggestion)"""
    payload: Dict[str, Any]
