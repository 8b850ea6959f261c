"""
Reconciliation engine.

The engine knows nothing about individual node kinds: it validates props,
hands each node to the conversion rule registered for its kind, and gives
the rule a RenderScope to resolve whichever props and children it needs.
"""

import inspect
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from blockrender.compiler.coercion import generic_text, join_text
from blockrender.compiler.pending import PendingResolution, Placeholder, when_ready
from blockrender.interactions.registry import EventKind, Interaction, InteractionRegistry
from blockrender.ir.errors import ShapeError
from blockrender.ir.node import Node, NodeKind, iter_children
from blockrender.ir.props import Props, parse_props

logger = logging.getLogger(__name__)

ConversionRule = Callable[[Props, "RenderScope"], Any]


def _default_rules() -> Dict[NodeKind, ConversionRule]:
    # Imported lazily: catalogue modules import this one.
    from blockrender.catalogue import CONVERSION_RULES
    return CONVERSION_RULES


class Reconciler:
    """Depth-first, pre-order converter from a node tree to resolved values."""

    def __init__(
        self,
        registry: Optional[InteractionRegistry] = None,
        rules: Optional[Dict[NodeKind, ConversionRule]] = None,
    ):
        self.registry = registry if registry is not None else InteractionRegistry()
        self.rules = rules if rules is not None else _default_rules()

    def reconcile(self, value: Any) -> Tuple[Any, List[PendingResolution]]:
        """Resolve value; return it with the pending work discovered on the way."""
        pending: List[PendingResolution] = []
        try:
            resolved = self.resolve_into(value, pending, origin="root")
        except Exception:
            for item in pending:
                item.discard()
            raise
        return resolved, pending

    def resolve_into(self, value: Any, pending: List[PendingResolution], origin: str) -> Any:
        if value is None or isinstance(value, bool):
            return None

        if isinstance(value, (str, int, float)):
            return generic_text(str(value))

        if isinstance(value, Node):
            return self._convert(value, pending)

        if isinstance(value, (list, tuple)):
            return [self.resolve_into(item, pending, origin) for item in value]

        if inspect.isawaitable(value):
            placeholder = Placeholder(origin)
            pending.append(PendingResolution(value, placeholder))
            return placeholder

        raise ShapeError.single(origin, f"cannot render a value of type {type(value).__name__}")

    def _convert(self, node: Node, pending: List[PendingResolution]) -> Any:
        props = parse_props(node)
        rule = self.rules.get(node.kind)
        if rule is None:
            raise ShapeError.single(node.kind.value, "no conversion rule registered")
        return rule(props, RenderScope(self, pending, node.kind))


class RenderScope:
    """What a conversion rule gets to work with for one node."""

    def __init__(self, reconciler: Reconciler, pending: List[PendingResolution], kind: NodeKind):
        self.reconciler = reconciler
        self.pending = pending
        self.kind = kind

    @property
    def name(self) -> str:
        return self.kind.value

    def resolve(self, value: Any) -> Any:
        return self.reconciler.resolve_into(value, self.pending, self.name)

    def resolve_children(self, children: Any) -> Any:
        """Resolve every child in order; children resolving to None are dropped."""
        items = [self.resolve(child) for child in iter_children(children)]
        return when_ready(items, _compact)

    def text_content(self, children: Any) -> Any:
        parts = [self.resolve(child) for child in iter_children(children)]
        return when_ready(parts, join_text)

    def resolve_text(self, value: Any) -> Any:
        """
        Resolve a text-bearing prop.

        A single node (or awaitable) is resolved as-is; strings, numbers and
        lists of them become one generic text object.
        """
        children = iter_children(value)
        if not children:
            return None

        if len(children) == 1 and not isinstance(children[0], (str, int, float)):
            return self.resolve(children[0])

        return when_ready(self.text_content(children), generic_text)

    def claim(
        self,
        action_id: str,
        event_kind: Optional[EventKind] = None,
        on_event: Optional[Callable[..., Any]] = None,
        on_search_options: Optional[Callable[..., Any]] = None,
        min_query_length: Optional[int] = None,
    ) -> None:
        self.reconciler.registry.claim(
            Interaction(
                action_id=action_id,
                origin=self.name,
                event_kind=event_kind,
                on_event=on_event,
                on_search_options=on_search_options,
                min_query_length=min_query_length,
            )
        )


def _compact(items: List[Any]) -> List[Any]:
    flat: List[Any] = []
    for item in items:
        if item is None:
            continue
        if isinstance(item, list):
            flat.extend(_compact(item))
        else:
            flat.append(item)
    return flat
