"""
Abstract Oracle Interface

The oracle is the text-completion service behind `python`, `askai` and `man`.
Implementations never raise: failures come back as a descriptive string.
"""

from abc import ABC, abstractmethod


class Oracle(ABC):
    """Abstract interface for oracle providers."""

    @abstractmethod
    async def execute(self, code: str) -> str:
        """Return what running `code` as Python would print."""
        ...

    @abstractmethod
    async def ask(self, question: str) -> str:
        """Answer a free-form question."""
        ...

    @abstractmethod
    async def manual(self, command: str) -> str:
        """Return the manual page for a shell command."""
        ...

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Current model name."""
        ...
