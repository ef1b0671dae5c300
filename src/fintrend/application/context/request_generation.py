"""Request generations for last-request-wins refreshes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestToken:
    """Identifies one refresh; compared against the counter on completion."""

    generation: int

    def __str__(self) -> str:
        return f"RequestToken(#{self.generation})"


class RequestGenerationCounter:
    """
    Monotonic counter handing out request tokens.

    Each new refresh bumps the generation, which turns every token handed out
    earlier stale. Not thread-safe; meant for a single event loop.
    """

    def __init__(self) -> None:
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def begin(self) -> RequestToken:
        self._generation += 1
        return RequestToken(generation=self._generation)

    def is_current(self, token: RequestToken) -> bool:
        return token.generation == self._generation
