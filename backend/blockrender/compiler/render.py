import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from blockrender.compiler.coercion import is_grouped, options_or_groups
from blockrender.compiler.engine import Reconciler
from blockrender.compiler.pending import PendingResolution, settle
from blockrender.compiler.wire import to_wire
from blockrender.interactions.registry import InteractionRegistry
from blockrender.ir.errors import PendingResolutionError
from blockrender.ir.node import NodeKind, h

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    document: Any
    registry: InteractionRegistry  # entries registered by this pass only

    @property
    def action_ids(self) -> List[str]:
        return self.registry.action_ids


async def _abort(tasks: List[asyncio.Future], pending: List[PendingResolution]) -> None:
    for task in tasks:
        if not task.done():
            task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)

    # Work discovered by tasks that finished before the failure never starts.
    for task in tasks:
        if not task.cancelled() and task.exception() is None:
            for item in task.result():
                item.discard()

    for item in pending:
        item.discard()


async def _drain(reconciler: Reconciler, pending: List[PendingResolution]) -> None:
    wave = 0
    while pending:
        wave += 1
        logger.debug("render wave %d: awaiting %d pending resolution(s)", wave, len(pending))
        tasks = [asyncio.ensure_future(item.complete(reconciler.reconcile)) for item in pending]
        try:
            nested = await asyncio.gather(*tasks)
        except BaseException:
            await _abort(tasks, pending)
            raise
        pending = [item for found in nested for item in found]


def _finish(
    skeleton: Any,
    reconciler: Reconciler,
    registry: Optional[InteractionRegistry],
    policy: Optional[str],
) -> RenderResult:
    document = to_wire(settle(skeleton))

    if registry is not None:
        registry.absorb(reconciler.registry, policy=policy)

    return RenderResult(document=document, registry=reconciler.registry)


async def render(
    root: Any,
    registry: Optional[InteractionRegistry] = None,
    policy: Optional[str] = None,
) -> RenderResult:
    """
    Render a node tree into its wire document.

    Awaitable children are awaited wave by wave until no pending work is
    left. Callbacks are collected into a fresh registry for the pass; when
    ``registry`` is given they are merged into it once the pass succeeds.

    Re-rendering a surface into a long-lived registry (such as the one from
    ``get_interaction_registry()``) claims the same action ids again; pass
    ``policy="replace"`` for that, since the default ``error`` policy
    rejects ids an earlier pass already registered.
    """
    reconciler = Reconciler()
    skeleton, pending = reconciler.reconcile(root)
    await _drain(reconciler, pending)
    return _finish(skeleton, reconciler, registry, policy)


def render_sync(
    root: Any,
    registry: Optional[InteractionRegistry] = None,
    policy: Optional[str] = None,
) -> RenderResult:
    """Render a tree that has no awaitable children."""
    reconciler = Reconciler()
    skeleton, pending = reconciler.reconcile(root)

    if pending:
        for item in pending:
            item.discard()
        raise PendingResolutionError(
            f"tree has {len(pending)} asynchronous child(ren); use render() instead"
        )

    return _finish(skeleton, reconciler, registry, policy)


async def render_options(options: Iterable[Any]) -> Dict[str, Any]:
    """
    Render options returned by an external search callback into an
    options response: ``{"options": [...]}`` or ``{"option_groups": [...]}``.
    """
    reconciler = Reconciler()
    skeleton, pending = reconciler.reconcile(h(NodeKind.SECTION, children=list(options)))
    await _drain(reconciler, pending)

    items = options_or_groups(settle(skeleton)["fields"], "options")
    key = "option_groups" if is_grouped(items) else "options"
    return {key: to_wire(items)}
