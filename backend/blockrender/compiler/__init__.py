from blockrender.compiler.engine import Reconciler, RenderScope
from blockrender.compiler.pending import PendingResolution, Placeholder, settle
from blockrender.compiler.render import RenderResult, render, render_options, render_sync
from blockrender.compiler.wire import to_wire

__all__ = [
    "Reconciler",
    "RenderScope",
    "PendingResolution",
    "Placeholder",
    "settle",
    "RenderResult",
    "render",
    "render_options",
    "render_sync",
    "to_wire",
]
