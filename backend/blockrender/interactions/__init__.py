# Interaction registry and inbound event shapes.
# The dispatcher lives in blockrender.interactions.dispatcher; it depends on
# the compiler, which itself imports the registry from here.

from blockrender.interactions.registry import (
    EventKind,
    Interaction,
    InteractionRegistry,
    get_interaction_registry,
)
from blockrender.interactions.events import (
    ClickEvent,
    InteractionEvent,
    MultiSelectOptionEvent,
    SearchOptionsEvent,
    SelectDateEvent,
    SelectOptionEvent,
)

__all__ = [
    "EventKind",
    "Interaction",
    "InteractionRegistry",
    "get_interaction_registry",
    "ClickEvent",
    "InteractionEvent",
    "MultiSelectOptionEvent",
    "SearchOptionsEvent",
    "SelectDateEvent",
    "SelectOptionEvent",
]
