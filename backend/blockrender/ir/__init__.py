# Tree model: nodes, props shapes, resolved-value tags and error types

from blockrender.ir.errors import (
    DuplicateActionError,
    PendingResolutionError,
    RenderError,
    ShapeError,
    ShapeIssue,
    UnknownVariantError,
)
from blockrender.ir.node import Node, NodeKind, h, iter_children
from blockrender.ir.props import PROPS_BY_KIND, parse_props
from blockrender.ir.resolved import Role, Tagged, TextKind

__all__ = [
    "DuplicateActionError",
    "PendingResolutionError",
    "RenderError",
    "ShapeError",
    "ShapeIssue",
    "UnknownVariantError",
    "Node",
    "NodeKind",
    "h",
    "iter_children",
    "PROPS_BY_KIND",
    "parse_props",
    "Role",
    "Tagged",
    "TextKind",
]
