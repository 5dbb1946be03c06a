from __future__ import annotations

from abc import ABC, abstractmethod

from mimi_backend.providers.types import AskResult


class LLMProvider(ABC):
    """
    Interface for LLM providers that answer a single question.

    Implementations must not write to their own state after construction,
    so one instance can be shared by every concurrent request handler.
    """

    @abstractmethod
    async def ask(self, question: str) -> AskResult:
        """
        Send the question to the LLM and return the answer.

        Raises a ``ProviderError`` subclass when the call fails. Callers are
        responsible for rejecting empty questions.
        """
        ...

    async def close(self) -> None:
        """Release transport resources. Called once at application shutdown."""
        return None
