"""
Deferred values for the two-phase render.

Phase 1 leaves a Placeholder wherever an awaitable child was found and
records a PendingResolution for it. Coercion applied to a value that still
holds placeholders is recorded as a Derived value instead of being run.
Phase 2 fills the placeholders; ``settle`` then substitutes everything back
in structural position.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Optional

from blockrender.ir.errors import PendingResolutionError
from blockrender.ir.resolved import Tagged

_UNSET = object()


class Deferred:
    def get(self) -> Any:
        raise NotImplementedError


class Placeholder(Deferred):
    def __init__(self, origin: str = ""):
        self.origin = origin
        self._value: Any = _UNSET

    @property
    def filled(self) -> bool:
        return self._value is not _UNSET

    def fill(self, value: Any) -> None:
        if self.filled:
            raise PendingResolutionError(f"placeholder for {self.origin} filled twice")
        self._value = value

    def get(self) -> Any:
        if not self.filled:
            raise PendingResolutionError(f"placeholder for {self.origin} was never resolved")
        return self._value

    def __repr__(self) -> str:
        state = "filled" if self.filled else "empty"
        return f"Placeholder({self.origin!r}, {state})"


class Derived(Deferred):
    """fn applied to source once every placeholder inside source is filled."""

    def __init__(self, fn: Callable[[Any], Any], source: Any):
        self.fn = fn
        self.source = source
        self._value: Any = _UNSET

    def get(self) -> Any:
        if self._value is _UNSET:
            self._value = self.fn(settle(self.source))
        return self._value


def contains_deferred(value: Any) -> bool:
    if isinstance(value, Deferred):
        return True
    if isinstance(value, Tagged):
        return contains_deferred(value.value)
    if isinstance(value, (list, tuple)):
        return any(contains_deferred(item) for item in value)
    if isinstance(value, dict):
        return any(contains_deferred(item) for item in value.values())
    return False


def when_ready(value: Any, fn: Callable[[Any], Any]) -> Any:
    """Apply fn now, or once the pending work inside value has completed."""
    if contains_deferred(value):
        return Derived(fn, value)
    return fn(value)


def settle(value: Any) -> Any:
    if isinstance(value, Deferred):
        return settle(value.get())
    if isinstance(value, Tagged):
        return Tagged(value.role, settle(value.value), value.selected)
    if isinstance(value, list):
        return [settle(item) for item in value]
    if isinstance(value, dict):
        return {key: settle(item) for key, item in value.items()}
    return value


@dataclass
class PendingResolution:
    awaitable: Awaitable[Any]
    placeholder: Placeholder

    async def complete(self, reconcile) -> List["PendingResolution"]:
        """Await the deferred child, reconcile what it produced, fill the slot."""
        result = await self.awaitable
        value, nested = reconcile(result)
        self.placeholder.fill(value)
        return nested

    def discard(self) -> None:
        """Release an awaitable that will never be awaited."""
        cancel = getattr(self.awaitable, "cancel", None)
        if cancel is not None:
            cancel()
            return

        close: Optional[Callable[[], None]] = getattr(self.awaitable, "close", None)
        if close is not None:
            close()
