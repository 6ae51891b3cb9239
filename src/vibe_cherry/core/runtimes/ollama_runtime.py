"""Ollama CLI runtime implementation."""
from __future__ import annotations

import asyncio
import logging
import subprocess
import sys
from typing import Optional

from vibe_cherry.core.runtimes.base_runtime import (
    InferenceOutcome,
    InferenceRuntime,
    ModelListing,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemma3:4b"


class OllamaRuntime(InferenceRuntime):
    """Runtime wrapper for the Ollama CLI (`ollama list` / `ollama run`)."""

    def __init__(
        self,
        command: str = "ollama",
        model: str = DEFAULT_MODEL,
        timeout: Optional[float] = None,
        max_concurrent: int = 0,
    ) -> None:
        self._command = command
        self._model = model
        self._timeout = timeout
        self._limiter = asyncio.Semaphore(max_concurrent) if max_concurrent > 0 else None
        self._active: set[asyncio.subprocess.Process] = set()
        self._stopped: set[asyncio.subprocess.Process] = set()

    @property
    def name(self) -> str:
        """Runtime name."""
        return "Ollama"

    @property
    def command(self) -> str:
        return self._command

    @property
    def model(self) -> str:
        return self._model

    @property
    def active_count(self) -> int:
        """Number of inference children currently running."""
        return len(self._active)

    def _popen_kwargs(self) -> dict:
        if sys.platform != "win32":
            return {}
        startupinfo = subprocess.STARTUPINFO()
        startupinfo.dwFlags |= subprocess.STARTF_USESHOWWINDOW
        startupinfo.wShowWindow = 0  # SW_HIDE
        return {
            "startupinfo": startupinfo,
            "creationflags": subprocess.CREATE_NO_WINDOW,
        }

    async def list_models(self) -> ModelListing:
        """Run `<command> list` and capture its output."""
        process = await asyncio.create_subprocess_exec(
            self._command,
            "list",
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            **self._popen_kwargs(),
        )
        stdout, _ = await process.communicate()
        return ModelListing(
            returncode=process.returncode,
            stdout=stdout.decode("utf-8", errors="replace"),
        )

    async def infer(self, prompt: str) -> InferenceOutcome:
        """Send the prompt over stdin and wait for the complete response."""
        if self._limiter is None:
            return await self._run(prompt)
        async with self._limiter:
            return await self._run(prompt)

    async def _run(self, prompt: str) -> InferenceOutcome:
        # Lone surrogates are valid str but not valid UTF-8.
        payload = prompt.encode("utf-8", errors="replace")
        try:
            process = await asyncio.create_subprocess_exec(
                self._command,
                "run",
                self._model,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                **self._popen_kwargs(),
            )
        except OSError as e:
            return InferenceOutcome.failure(f"Failed to start {self.name}: {e}")

        self._active.add(process)
        readers = [
            asyncio.ensure_future(process.stdout.read()),
            asyncio.ensure_future(process.stderr.read()),
        ]
        try:
            outcome = await self._exchange(process, readers, payload)
        finally:
            self._active.discard(process)
            if process.returncode is None:
                try:
                    process.kill()
                except ProcessLookupError:
                    pass
            for reader in readers:
                if not reader.done():
                    reader.cancel()

        if process in self._stopped:
            self._stopped.discard(process)
            return InferenceOutcome.failure(f"{self.name} generation stopped")
        return outcome

    async def _exchange(
        self, process: asyncio.subprocess.Process, readers: list, payload: bytes
    ) -> InferenceOutcome:
        try:
            process.stdin.write(payload)
            await process.stdin.drain()
            process.stdin.close()
            await process.stdin.wait_closed()
        except OSError as e:
            await self._kill(process)
            return InferenceOutcome.failure(f"Failed to write to {self.name}: {e}")

        try:
            stdout, stderr = await asyncio.wait_for(
                self._collect(process, readers), timeout=self._timeout
            )
        except asyncio.TimeoutError:
            await self._kill(process)
            return InferenceOutcome.failure(f"{self.name} timed out after {self._timeout}s")
        except OSError as e:
            return InferenceOutcome.failure(f"{self.name} process failed: {e}")

        if process.returncode != 0:
            error_msg = stderr.decode("utf-8", errors="replace").strip()
            return InferenceOutcome.failure(f"{self.name} error: {error_msg}")
        return InferenceOutcome.success(stdout.decode("utf-8", errors="replace"))

    async def _collect(self, process: asyncio.subprocess.Process, readers: list) -> tuple[bytes, bytes]:
        stdout, stderr = await asyncio.gather(*readers)
        await process.wait()
        return stdout, stderr

    async def _kill(self, process: asyncio.subprocess.Process) -> None:
        try:
            process.kill()
        except ProcessLookupError:
            pass
        await process.wait()

    async def terminate_all(self) -> int:
        """Terminate every running inference child."""
        stopped = 0
        for process in list(self._active):
            if process.returncode is not None:
                continue
            self._stopped.add(process)
            try:
                process.terminate()
            except ProcessLookupError:
                continue
            stopped += 1
        if stopped:
            logger.info("Terminated %d running %s process(es)", stopped, self.name)
        return stopped
