from typing import Any

from blockrender.compiler.pending import Deferred
from blockrender.ir.errors import PendingResolutionError, ShapeError
from blockrender.ir.resolved import Tagged, TextKind

PRIMITIVE_TYPES = (str, int, float, bool)


def to_wire(obj: Any) -> Any:
    """
    Serialize a settled value into the JSON document sent to the API.

    Absent fields (None) are dropped, role tags are stripped, and generic
    text left unsettled by its parent goes out as plain_text.
    """

    if isinstance(obj, PRIMITIVE_TYPES):
        return obj

    if isinstance(obj, Tagged):
        return to_wire(obj.value)

    if isinstance(obj, list):
        return [to_wire(item) for item in obj if item is not None]

    if isinstance(obj, dict):
        wire = {key: to_wire(value) for key, value in obj.items() if value is not None}
        if wire.get("type") == TextKind.GENERIC.value:
            wire["type"] = TextKind.PLAIN.value
        return wire

    if isinstance(obj, Deferred):
        raise PendingResolutionError(f"{obj!r} reached the serializer unsettled")

    raise ShapeError.single("document", f"a value of type {type(obj).__name__} is not serializable")
