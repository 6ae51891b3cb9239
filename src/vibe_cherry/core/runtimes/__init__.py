"""Inference runtime implementations"""
from vibe_cherry.core.runtimes.base_runtime import (
    InferenceOutcome,
    InferenceRuntime,
    ModelListing,
)
from vibe_cherry.core.runtimes.ollama_runtime import OllamaRuntime

__all__ = [
    "InferenceOutcome",
    "InferenceRuntime",
    "ModelListing",
    "OllamaRuntime",
]
