from dataclasses import dataclass
from typing import List, Sequence

from pydantic import ValidationError


@dataclass
class ShapeIssue:
    kind: str
    message: str
    location: str = ""


class RenderError(Exception):
    """Base class for every failure that aborts a render pass."""


class ShapeError(RenderError):
    """A node's props do not match the shape its kind requires."""

    def __init__(self, kind: str, issues: List[ShapeIssue]):
        self.kind = kind
        self.issues = issues
        super().__init__(self._describe())

    @classmethod
    def single(cls, kind: str, message: str, location: str = "") -> "ShapeError":
        return cls(kind, [ShapeIssue(kind=kind, message=message, location=location)])

    @classmethod
    def from_validation(cls, kind: str, exc: ValidationError) -> "ShapeError":
        issues = [
            ShapeIssue(
                kind=kind,
                message=error["msg"],
                location=".".join(str(part) for part in error["loc"]),
            )
            for error in exc.errors()
        ]
        return cls(kind, issues)

    def _describe(self) -> str:
        details = "; ".join(
            f"{issue.location}: {issue.message}" if issue.location else issue.message
            for issue in self.issues
        )
        return f"invalid {self.kind} node: {details}"


class UnknownVariantError(ShapeError, TypeError):
    """A discriminant tag names no declared variant."""

    def __init__(self, kind: str, variant: object, allowed: Sequence[str]):
        self.variant = variant
        self.allowed = list(allowed)
        super().__init__(
            kind,
            [
                ShapeIssue(
                    kind=kind,
                    message=f"{variant!r} is not one of {', '.join(self.allowed)}",
                    location="type",
                )
            ],
        )


class DuplicateActionError(RenderError):
    """Two interactive nodes claimed the same action identifier."""

    def __init__(self, action_id: str, first: str, second: str):
        self.action_id = action_id
        self.first = first
        self.second = second
        super().__init__(
            f"action id {action_id!r} is claimed by both {first} and {second}"
        )


class PendingResolutionError(RenderError):
    """Deferred work was missing, incomplete, or could not be driven."""
