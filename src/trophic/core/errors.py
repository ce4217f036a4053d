"""Error hierarchy for trophic level computations."""

from __future__ import annotations

from typing import Any, Mapping, Optional


class TrophicError(Exception):
    """Base exception for trophic level failures."""

    def __init__(
        self,
        message: str,
        *,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.context = dict(context) if context else {}

    def log_message(self) -> str:
        if not self.context:
            return str(self)
        return f"{self}: {self.context}"


class DisconnectedGraphError(TrophicError):
    """The graph has a node with no edges in its undirected view."""


class SingularSystemError(TrophicError):
    """The linear system has no usable pivot in some column."""


__all__ = [
    "TrophicError",
    "DisconnectedGraphError",
    "SingularSystemError",
]
