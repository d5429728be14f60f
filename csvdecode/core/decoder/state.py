"""
Decoder working state.

One State is built per record and threaded left to right through the
decoder. It is never shared between records.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

Entry = tuple[str, str]


def identity(value: Any) -> Any:
    return value


@dataclass(frozen=True, slots=True)
class State:
    """Visited and unvisited (name, value) pairs plus the accumulated value."""

    visited: tuple[Entry, ...]
    unvisited: tuple[Entry, ...]
    value: Any

    @classmethod
    def initial(
        cls,
        headers: Sequence[str],
        record: Sequence[str],
        value: Any = identity,
    ) -> State:
        """
        Pair headers with record fields positionally.

        Pairing stops at the shorter sequence, so surplus header names or
        surplus fields are never visible to the decoder.
        """
        return cls(visited=(), unvisited=tuple(zip(headers, record)), value=value)

    def with_value(self, value: Any) -> State:
        return replace(self, value=value)

    def take_next(self) -> tuple[Entry, State] | None:
        """Move the first unvisited entry to visited."""
        if not self.unvisited:
            return None
        entry = self.unvisited[0]
        return entry, replace(
            self,
            visited=(*self.visited, entry),
            unvisited=self.unvisited[1:],
        )

    def take_named(self, name: str) -> tuple[Entry, State] | None:
        """Move the first unvisited entry called ``name`` to visited."""
        for i, entry in enumerate(self.unvisited):
            if entry[0] == name:
                return entry, replace(
                    self,
                    visited=(*self.visited, entry),
                    unvisited=self.unvisited[:i] + self.unvisited[i + 1 :],
                )
        return None
