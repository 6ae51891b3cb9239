"""Qt bridge between desktop widgets and the generation backend.

Widgets stay on the GUI thread; the backend runs on one background asyncio
loop. Results and vibe-token events come back as Qt signals, which Qt
queues onto the receiver's thread.
"""
from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Future
from threading import Event, Thread
from typing import Any, Optional, Sequence

from PySide6.QtCore import QObject, Signal

from vibe_cherry.common.models import StreamEvent
from vibe_cherry.core.app import App
from vibe_cherry.core.errors import HealingExhaustedError
from vibe_cherry.core.healing import HealingTracker, extract_code_block

logger = logging.getLogger(__name__)


class GenerationSignals(QObject):
    """Signals for thread-safe generation results"""
    ready = Signal(str)
    vibe_token = Signal(str)
    finished = Signal(str)
    error = Signal(str)


class EngineThread(Thread):
    """Background thread owning the asyncio loop the backend runs on"""

    def __init__(self):
        super().__init__(daemon=True, name="vibe-engine")
        self.loop = asyncio.new_event_loop()
        self._started = Event()

    def run(self):
        """Run the loop until stop() is called"""
        asyncio.set_event_loop(self.loop)
        self._started.set()
        try:
            self.loop.run_forever()
        finally:
            self.loop.close()

    def wait_started(self, timeout: Optional[float] = None) -> bool:
        return self._started.wait(timeout)

    def submit(self, coro) -> Future:
        """Schedule a coroutine on the engine loop from any thread"""
        return asyncio.run_coroutine_threadsafe(coro, self.loop)

    def stop(self, timeout: Optional[float] = 5.0):
        """Stop the loop and wait for the thread to exit"""
        if self.is_alive():
            self.loop.call_soon_threadsafe(self.loop.stop)
            self.join(timeout)


class VibeBridge:
    """Exposes the backend's operations to Qt code as futures plus signals"""

    def __init__(self, core_app: Optional[App] = None, engine: Optional[EngineThread] = None):
        self.core_app = core_app or App()
        self.signals = GenerationSignals()
        self.engine = engine or EngineThread()
        if not self.engine.is_alive():
            self.engine.start()
            self.engine.wait_started()
        self.core_app.channel.add_listener(self._on_stream_event)

    def _on_stream_event(self, event: StreamEvent):
        self.signals.vibe_token.emit(event.text)

    def _relay(self, future: Future, signal) -> Future:
        def done(fut: Future):
            if fut.cancelled():
                self.signals.error.emit("Generation cancelled")
                return
            exc = fut.exception()
            if exc is not None:
                self.signals.error.emit(str(exc))
            else:
                signal.emit(fut.result())

        future.add_done_callback(done)
        return future

    def initialize(self) -> Future:
        """Probe the runtime; emits ready(message)"""
        return self._relay(self.engine.submit(self.core_app.initialize()), self.signals.ready)

    def generate(self, text: str, history: Optional[Sequence[Any]] = None) -> Future:
        """Generate an artifact; emits vibe_token and finished(artifact)"""
        return self._relay(
            self.engine.submit(self.core_app.generate(text, history)),
            self.signals.finished,
        )

    def generate_with_healing(self, text: str, is_fix_attempt: bool, attempt_number: int) -> Future:
        return self._relay(
            self.engine.submit(
                self.core_app.generate_with_healing(text, is_fix_attempt, attempt_number)
            ),
            self.signals.finished,
        )

    def request_fix(
        self,
        tracker: HealingTracker,
        original_request: str,
        previous_artifact: str,
        errors: Sequence[str],
    ) -> Optional[Future]:
        """
        Ask for the next fix attempt of a broken artifact

        Args:
            tracker: Attempt history for this artifact
            original_request: The user's original request
            previous_artifact: Artifact whose code failed to run
            errors: Error descriptions reported by the preview

        Returns:
            Future resolving to the new artifact, or None when attempts are exhausted
        """
        try:
            attempt = tracker.next_attempt(
                original_request, extract_code_block(previous_artifact), errors
            )
        except HealingExhaustedError as e:
            self.signals.error.emit(str(e))
            return None

        future = self.generate_with_healing(attempt.request, True, attempt.attempt_number)

        def record(fut: Future):
            if not fut.cancelled() and fut.exception() is None:
                tracker.record_result(fut.result())

        future.add_done_callback(record)
        return future

    def stop_generation(self) -> Future:
        return self.engine.submit(self.core_app.stop_generation())

    def shutdown(self):
        """Detach from the backend and stop the engine loop"""
        self.core_app.channel.remove_listener(self._on_stream_event)
        self.engine.stop()
