"""
Declarative Block Kit rendering.

Describe a message, modal or app home as a tree of nodes, render it into
the JSON document the messaging API expects, and collect the interaction
callbacks the tree declares.
"""

from blockrender.compiler import RenderResult, render, render_options, render_sync
from blockrender.interactions import InteractionRegistry, get_interaction_registry
from blockrender.ir import (
    DuplicateActionError,
    Node,
    NodeKind,
    PendingResolutionError,
    RenderError,
    ShapeError,
    UnknownVariantError,
    h,
)

__all__ = [
    "RenderResult",
    "render",
    "render_options",
    "render_sync",
    "InteractionRegistry",
    "get_interaction_registry",
    "DuplicateActionError",
    "Node",
    "NodeKind",
    "PendingResolutionError",
    "RenderError",
    "ShapeError",
    "UnknownVariantError",
    "h",
]
