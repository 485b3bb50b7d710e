"""Differences: the append-only recorder of one comparison run."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["Differences"]


class Differences:
    """Ordered, append-only list of formatted difference messages.

    Messages are stored in recording order and are never removed or
    reordered.  ``render`` terminates every message with a line break.
    """

    def __init__(self) -> None:
        self._messages: list[str] = []

    def add(self, message: str) -> None:
        self._messages.append(message)

    def is_empty(self) -> bool:
        return not self._messages

    def render(self) -> str:
        return "".join(f"{message}\n" for message in self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __repr__(self) -> str:
        return f"Differences({self._messages!r})"
