"""
Interaction Registry - action identifier to callback table

Filled while a tree is rendered, read later when inbound interaction
payloads are dispatched.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from blockrender.config import ACTION_COLLISION_POLICY
from blockrender.ir.errors import DuplicateActionError

logger = logging.getLogger(__name__)

COLLISION_POLICIES = ("error", "replace")


class EventKind(Enum):
    """Shape of the event an interactive element produces"""
    CLICK = "click"
    SELECT_OPTION = "select_option"
    MULTI_SELECT_OPTION = "multi_select_option"
    SELECT_DATE = "select_date"


@dataclass(frozen=True)
class Interaction:
    """One registered interactive element"""
    action_id: str
    origin: str  # node kind that claimed the id
    event_kind: Optional[EventKind] = None
    on_event: Optional[Callable[..., Any]] = None
    on_search_options: Optional[Callable[..., Any]] = None
    min_query_length: Optional[int] = None

    @property
    def has_callbacks(self) -> bool:
        return self.on_event is not None or self.on_search_options is not None


class InteractionRegistry:
    """
    Registry of interactive elements keyed by action identifier.

    Every interactive node claims its action id, whether or not it carries
    a callback; a second claim of the same id is an authoring error.
    Only claims with callbacks are kept as lookup entries.
    """

    def __init__(self):
        self.interactions: Dict[str, Interaction] = {}
        self._claims: Dict[str, str] = {}
        self._kind_index: Dict[EventKind, List[str]] = {kind: [] for kind in EventKind}

    def claim(self, interaction: Interaction) -> None:
        previous = self._claims.get(interaction.action_id)
        if previous is not None:
            raise DuplicateActionError(interaction.action_id, previous, interaction.origin)

        self._claims[interaction.action_id] = interaction.origin
        if interaction.has_callbacks:
            self._store(interaction)

        logger.debug(
            "claimed action %r for %s (callbacks: %s)",
            interaction.action_id,
            interaction.origin,
            interaction.has_callbacks,
        )

    def _store(self, interaction: Interaction) -> None:
        self.interactions[interaction.action_id] = interaction
        if interaction.event_kind is not None:
            self._kind_index[interaction.event_kind].append(interaction.action_id)

    def _drop(self, action_id: str) -> None:
        interaction = self.interactions.pop(action_id)
        if interaction.event_kind is not None:
            self._kind_index[interaction.event_kind].remove(action_id)

    def get(self, action_id: str) -> Optional[Interaction]:
        return self.interactions.get(action_id)

    def get_by_kind(self, kind: EventKind) -> List[Interaction]:
        return [self.interactions[action_id] for action_id in self._kind_index[kind]]

    def list_all(self) -> List[Interaction]:
        return list(self.interactions.values())

    @property
    def action_ids(self) -> List[str]:
        """Every claimed action id, in claim order."""
        return list(self._claims)

    def absorb(self, other: "InteractionRegistry", policy: Optional[str] = None) -> None:
        """
        Merge the entries of a finished render pass into this registry.

        policy "error" rejects the whole merge when an id is already taken;
        "replace" lets the newer entry win.
        """
        policy = policy or ACTION_COLLISION_POLICY
        if policy not in COLLISION_POLICIES:
            raise ValueError(f"unknown collision policy {policy!r}")

        if policy == "error":
            for action_id, interaction in other.interactions.items():
                existing = self.interactions.get(action_id)
                if existing is not None:
                    raise DuplicateActionError(action_id, existing.origin, interaction.origin)

        for action_id, interaction in other.interactions.items():
            if action_id in self.interactions:
                self._drop(action_id)
            self._claims[action_id] = interaction.origin
            self._store(interaction)

    def clear(self) -> None:
        self.interactions.clear()
        self._claims.clear()
        for ids in self._kind_index.values():
            ids.clear()

    def __contains__(self, action_id: str) -> bool:
        return action_id in self.interactions

    def __len__(self) -> int:
        return len(self.interactions)


# Process-wide registry instance
_global_registry: Optional[InteractionRegistry] = None


def get_interaction_registry() -> InteractionRegistry:
    """
    Get or create the process-wide interaction registry.

    Surfaces re-rendered after an interaction keep their action ids; merge
    them into this registry with policy "replace" (or set
    ACTION_COLLISION_POLICY=replace).
    """
    global _global_registry
    if _global_registry is None:
        _global_registry = InteractionRegistry()
    return _global_registry
