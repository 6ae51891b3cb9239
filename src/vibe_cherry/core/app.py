"""Main application coordinator (pure Python, no Qt)"""
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from vibe_cherry.core.config import Config
from vibe_cherry.core.events import EventChannel
from vibe_cherry.core.generation import GenerationSession
from vibe_cherry.core.readiness import ReadinessDetail, ReadinessGate
from vibe_cherry.core.runtimes.base_runtime import InferenceRuntime
from vibe_cherry.core.runtimes.ollama_runtime import OllamaRuntime

logger = logging.getLogger(__name__)


class App:
    """Owns the runtime, readiness gate and event channel for one UI session"""

    def __init__(
        self,
        config: Optional[Config] = None,
        runtime: Optional[InferenceRuntime] = None,
        channel: Optional[EventChannel] = None,
    ):
        """Initialize application"""
        self.config = config or Config()
        self.runtime = runtime or self._create_runtime()
        self.channel = channel or EventChannel(self.config.get("event_queue_size", 100))
        self.gate = ReadinessGate(self.runtime)
        self.session = GenerationSession(self.runtime, self.gate, self.channel)

    def _create_runtime(self) -> InferenceRuntime:
        """Instantiate the runtime described by the config."""
        return OllamaRuntime(
            command=self.config.get("runtime_command", "ollama"),
            model=self.config.get("model", "gemma3:4b"),
            timeout=self.config.get("inference_timeout"),
            max_concurrent=int(self.config.get("max_concurrent_inferences", 0) or 0),
        )

    @property
    def readiness(self) -> Optional[ReadinessDetail]:
        return self.gate.detail

    async def initialize(self) -> str:
        """Probe the runtime and open the readiness gate. Returns a status message."""
        detail = await self.gate.probe()
        return detail.message

    async def generate(self, text: str, history: Optional[Sequence[Any]] = None) -> str:
        """Plain generation: no fix-attempt annotation."""
        return await self.session.generate(text, prior_turns=history)

    async def generate_with_healing(
        self, text: str, is_fix_attempt: bool, attempt_number: int
    ) -> str:
        """
        One attempt of a caller-driven healing loop

        Args:
            text: Request text (for fix attempts, usually a fix request)
            is_fix_attempt: Whether this corrects a previous artifact
            attempt_number: 1-based attempt counter, ignored unless is_fix_attempt
        """
        fix_attempt = attempt_number if is_fix_attempt else None
        return await self.session.generate(text, fix_attempt=fix_attempt)

    async def stop_generation(self) -> str:
        """Terminate in-flight inference processes."""
        stopped = await self.runtime.terminate_all()
        logger.info("Stop requested, %d inference process(es) terminated", stopped)
        return "Generation stopped"
