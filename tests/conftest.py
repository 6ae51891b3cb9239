"""Shared fixtures: isolated config, a scripted runtime and a fake runtime."""
from __future__ import annotations

import stat
import sys
from pathlib import Path
from typing import Optional

import pytest

from vibe_cherry.core.app import App
from vibe_cherry.core.config import Config
from vibe_cherry.core.runtimes.base_runtime import (
    InferenceOutcome,
    InferenceRuntime,
    ModelListing,
)


class FakeRuntime(InferenceRuntime):
    """In-memory runtime recording prompts and returning canned outcomes."""

    def __init__(
        self,
        outcome: Optional[InferenceOutcome] = None,
        listing: Optional[ModelListing] = None,
        listing_error: Optional[OSError] = None,
    ):
        self.outcome = outcome or InferenceOutcome.failure("Failed to start Ollama: not installed")
        self.listing = listing or ModelListing(returncode=0, stdout="NAME\ngemma3:4b\n")
        self.listing_error = listing_error
        self.prompts: list[str] = []
        self.terminated = 0

    @property
    def name(self) -> str:
        return "Ollama"

    @property
    def command(self) -> str:
        return "ollama"

    @property
    def model(self) -> str:
        return "gemma3:4b"

    async def list_models(self) -> ModelListing:
        if self.listing_error is not None:
            raise self.listing_error
        return self.listing

    async def infer(self, prompt: str) -> InferenceOutcome:
        self.prompts.append(prompt)
        return self.outcome

    async def terminate_all(self) -> int:
        self.terminated += 1
        return 0


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(config_dir=tmp_path / "config")


@pytest.fixture
def fake_runtime() -> FakeRuntime:
    return FakeRuntime()


@pytest.fixture
def core_app(config: Config, fake_runtime: FakeRuntime) -> App:
    return App(config=config, runtime=fake_runtime)


@pytest.fixture
def make_runtime_script(tmp_path: Path):
    """Write an executable shell script standing in for the ollama binary."""
    if sys.platform == "win32":
        pytest.skip("runtime scripts need a POSIX shell")

    def _make(run_body: str, list_body: str = "printf 'NAME\\tID\\ngemma3:4b\\tabc123\\n'") -> str:
        script = tmp_path / "fake-ollama"
        script.write_text(
            "#!/bin/sh\n"
            'case "$1" in\n'
            f"  list) {list_body} ;;\n"
            f"  run) {run_body} ;;\n"
            "esac\n",
            encoding="utf-8",
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(script)

    return _make
