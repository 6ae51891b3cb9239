"""Shared wire models between UI and host.

Keep these lightweight and stable; they form the UI↔host contract.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

VIBE_TOKEN_EVENT = "vibe-token"


class GenerateRequest(BaseModel):
    text: str
    history: list[Any] = Field(default_factory=list)


class HealingRequest(BaseModel):
    text: str
    is_fix_attempt: bool = False
    attempt_number: int = Field(default=1, ge=1)


class GenerateResponse(BaseModel):
    artifact: str


class InitializeResponse(BaseModel):
    message: str
    availability: str
    real_inference: bool


class StopResponse(BaseModel):
    message: str


class StreamEvent(BaseModel):
    event: Literal["vibe-token"] = VIBE_TOKEN_EVENT
    text: str
    meta: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    detail: str
    hint: Optional[str] = None
