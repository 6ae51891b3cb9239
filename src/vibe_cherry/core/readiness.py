"""One-time environment probe that gates generation.

Every probe outcome counts as ready: a missing runtime or model only
degrades generation to canned output, it never blocks the caller.
"""
from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass
from typing import Optional

from vibe_cherry.core.errors import NotInitializedError
from vibe_cherry.core.runtimes.base_runtime import InferenceRuntime

logger = logging.getLogger(__name__)


class ReadinessState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class RuntimeAvailability(enum.Enum):
    READY = "ready"
    MOCK_ONLY = "mock_only"
    UNHEALTHY = "unhealthy"
    ABSENT = "absent"


@dataclass(frozen=True)
class ReadinessDetail:
    availability: RuntimeAvailability
    message: str

    @property
    def real_inference(self) -> bool:
        return self.availability is RuntimeAvailability.READY


class ReadinessGate:
    """Records whether the runtime has been probed for this app instance."""

    def __init__(self, runtime: InferenceRuntime):
        self.runtime = runtime
        self._lock = threading.Lock()
        self._state = ReadinessState.UNINITIALIZED
        self._detail: Optional[ReadinessDetail] = None

    @property
    def state(self) -> ReadinessState:
        with self._lock:
            return self._state

    @property
    def detail(self) -> Optional[ReadinessDetail]:
        with self._lock:
            return self._detail

    @property
    def is_ready(self) -> bool:
        return self.state is ReadinessState.READY

    def require_ready(self) -> None:
        """Raise NotInitializedError unless a probe has completed."""
        if not self.is_ready:
            raise NotInitializedError()

    async def probe(self) -> ReadinessDetail:
        """List installed models and mark the gate ready whatever the outcome."""
        detail = await self._check_runtime()
        with self._lock:
            self._state = ReadinessState.READY
            self._detail = detail
        logger.info("Readiness probe: %s", detail.availability.value)
        return detail

    async def _check_runtime(self) -> ReadinessDetail:
        name = self.runtime.name
        command = self.runtime.command
        model = self.runtime.model
        try:
            listing = await self.runtime.list_models()
        except OSError as e:
            logger.debug("Listing command failed to start: %s", e)
            return ReadinessDetail(
                RuntimeAvailability.ABSENT,
                f"{name} not found. Using mock mode. Install {name} and run "
                f"'{command} pull {model}' for real AI generation. 🍒",
            )

        if not listing.ok:
            return ReadinessDetail(
                RuntimeAvailability.UNHEALTHY,
                f"{name} not responding properly. Using mock mode. 🍒",
            )
        if model in listing.stdout:
            return ReadinessDetail(
                RuntimeAvailability.READY,
                f"{model} model ready! 🍒",
            )
        return ReadinessDetail(
            RuntimeAvailability.MOCK_ONLY,
            f"{name} found, but {model} model not installed. Using mock mode. "
            f"Run '{command} pull {model}' to install the model. 🍒",
        )
