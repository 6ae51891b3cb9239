"""Abstract base class for inference runtimes"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InferenceOutcome:
    """Result of a single inference call: raw text or a diagnostic message."""

    text: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, text: str) -> "InferenceOutcome":
        return cls(text=text)

    @classmethod
    def failure(cls, error: str) -> "InferenceOutcome":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ModelListing:
    """Output of the runtime's listing mode."""

    returncode: int
    stdout: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class InferenceRuntime(ABC):
    """Abstract base class for all inference runtimes"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Runtime name used in diagnostics (e.g. 'Ollama')"""
        pass

    @property
    @abstractmethod
    def command(self) -> str:
        """Executable invoked for listing and running models"""
        pass

    @property
    @abstractmethod
    def model(self) -> str:
        """Model identifier passed to run mode"""
        pass

    @abstractmethod
    async def list_models(self) -> ModelListing:
        """
        List installed models

        Raises:
            OSError: if the listing command cannot be executed at all
        """
        pass

    @abstractmethod
    async def infer(self, prompt: str) -> InferenceOutcome:
        """
        Send a full prompt to the model and wait for the complete response

        Args:
            prompt: Fully formatted instruction prompt

        Returns:
            InferenceOutcome: success with stdout text, or failure with a message
        """
        pass

    async def terminate_all(self) -> int:
        """Terminate in-flight inference processes. Returns how many were stopped."""
        return 0
