"""Single generation request: prompt, inference, fallback, publish."""
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from vibe_cherry.common.models import StreamEvent
from vibe_cherry.core.events import EventChannel
from vibe_cherry.core.fallback import fallback_artifact
from vibe_cherry.core.prompts import PromptContext, build_prompt
from vibe_cherry.core.readiness import ReadinessGate
from vibe_cherry.core.runtimes.base_runtime import InferenceRuntime

logger = logging.getLogger(__name__)


class GenerationSession:
    """Runs one generation attempt against the runtime.

    Once the readiness gate is open this never raises: inference failures
    are replaced by a canned artifact.
    """

    def __init__(self, runtime: InferenceRuntime, gate: ReadinessGate, channel: EventChannel):
        self.runtime = runtime
        self.gate = gate
        self.channel = channel

    async def generate(
        self,
        user_text: str,
        fix_attempt: Optional[int] = None,
        prior_turns: Optional[Sequence[Any]] = None,
    ) -> str:
        """
        Generate an artifact for the request

        Args:
            user_text: The user's request
            fix_attempt: 1-based attempt number when correcting a previous artifact
            prior_turns: Earlier conversation turns

        Returns:
            str: Raw model output, or a canned artifact when inference failed

        Raises:
            NotInitializedError: if the readiness probe has not run
        """
        self.gate.require_ready()

        context = PromptContext(
            user_text=user_text,
            prior_turns=list(prior_turns or []),
            fix_attempt=fix_attempt,
        )
        outcome = await self.runtime.infer(build_prompt(context))

        if outcome.ok:
            artifact = outcome.text
            source = "model"
        else:
            logger.warning("%s failed: %s, falling back to mock", self.runtime.name, outcome.error)
            artifact = fallback_artifact(user_text, context.is_fix_attempt)
            source = "fallback"

        self._publish(artifact, source, fix_attempt)
        return artifact

    def _publish(self, artifact: str, source: str, fix_attempt: Optional[int]) -> None:
        meta = {"source": source}
        if fix_attempt is not None:
            meta["attempt"] = fix_attempt
        try:
            self.channel.publish(StreamEvent(text=artifact, meta=meta))
        except Exception:
            logger.exception("Failed to emit token")
