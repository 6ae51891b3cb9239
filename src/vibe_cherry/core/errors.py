"""Errors surfaced to callers of the generation backend"""


class NotInitializedError(RuntimeError):
    """Generation was requested before the readiness probe ran."""

    def __init__(self, message: str = "Model not initialized"):
        super().__init__(message)


class HealingExhaustedError(RuntimeError):
    """A caller-side healing loop ran past its attempt ceiling."""
