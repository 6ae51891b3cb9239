"""Helpers for callers that drive the self-healing loop.

The backend treats every call as a single attempt. These helpers build the
escalating fix requests and keep the per-caller attempt count.
"""
from __future__ import annotations

import enum
import re
import time
from dataclasses import dataclass, field
from typing import Optional, Sequence

from vibe_cherry.core.errors import HealingExhaustedError

MAX_ATTEMPTS = 5

_HTML_BLOCK = re.compile(r"```html\n([\s\S]*?)```")


class FixStrategy(enum.Enum):
    EXPLAIN_AND_FIX = "explain_and_fix"
    ADD_ERROR_HANDLING = "add_error_handling"
    SIMPLIFY = "simplify"
    USE_ALTERNATIVES = "use_alternatives"
    REBUILD_FROM_SCRATCH = "rebuild_from_scratch"
    ADD_FALLBACKS = "add_fallbacks"


STRATEGY_INSTRUCTIONS = {
    FixStrategy.EXPLAIN_AND_FIX: (
        "- Analyze each error carefully\n"
        "- Fix the specific issues\n"
        "- Ensure all syntax is correct\n"
        "- Return complete, working code"
    ),
    FixStrategy.ADD_ERROR_HANDLING: (
        "- Wrap JavaScript in try-catch blocks\n"
        "- Add defensive checks (if element exists before using it)\n"
        "- Provide user-friendly error messages\n"
        "- Make the app resilient to failures"
    ),
    FixStrategy.SIMPLIFY: (
        "- Remove complex features that might be causing issues\n"
        "- Use simpler HTML/CSS/JS patterns\n"
        "- Focus on core functionality\n"
        "- Reduce dependencies"
    ),
    FixStrategy.USE_ALTERNATIVES: (
        "- Try a different technical approach\n"
        "- Use vanilla JS instead of complex patterns\n"
        "- Avoid features that caused previous errors\n"
        "- Find simpler ways to achieve the same result"
    ),
    FixStrategy.REBUILD_FROM_SCRATCH: (
        "- Start fresh with a simpler version\n"
        "- Focus on getting SOMETHING working first\n"
        "- Use the most basic, reliable patterns\n"
        "- Prioritize functionality over features\n"
        "- Make it bulletproof"
    ),
    FixStrategy.ADD_FALLBACKS: (
        "- Add polyfills for missing features\n"
        "- Provide fallback content for failed loads\n"
        "- Use defensive programming\n"
        "- Ensure graceful degradation"
    ),
}

_STRATEGY_BY_ATTEMPT = {
    1: FixStrategy.EXPLAIN_AND_FIX,
    2: FixStrategy.ADD_ERROR_HANDLING,
    3: FixStrategy.SIMPLIFY,
    4: FixStrategy.USE_ALTERNATIVES,
}


def select_strategy(attempt_number: int) -> FixStrategy:
    """Escalate from targeted fixes to a full rebuild as attempts pile up."""
    return _STRATEGY_BY_ATTEMPT.get(attempt_number, FixStrategy.REBUILD_FROM_SCRATCH)


def build_fix_request(
    original_request: str,
    previous_code: str,
    errors: Sequence[str],
    attempt_number: int,
    strategy: Optional[FixStrategy] = None,
) -> str:
    """
    Build the request text for a fix attempt

    Args:
        original_request: What the user originally asked for
        previous_code: The HTML that failed to run
        errors: Human-readable error descriptions
        attempt_number: 1-based attempt counter
        strategy: Override for the attempt-based strategy

    Returns:
        str: Text to pass to generate_with_healing
    """
    strategy = strategy or select_strategy(attempt_number)
    error_summary = "\n".join(f"- {error}" for error in errors) or "- unknown error"
    return (
        f"🔧 CODE FIXING ATTEMPT #{attempt_number}\n"
        "\n"
        "ORIGINAL REQUEST:\n"
        f"{original_request}\n"
        "\n"
        "PREVIOUS CODE (WITH ERRORS):\n"
        "```html\n"
        f"{previous_code}\n"
        "```\n"
        "\n"
        "DETECTED ERRORS:\n"
        f"{error_summary}\n"
        "\n"
        f"FIX STRATEGY: {strategy.value}\n"
        f"{STRATEGY_INSTRUCTIONS[strategy]}\n"
        "\n"
        "CRITICAL REQUIREMENTS:\n"
        "1. Output COMPLETE, WORKING HTML (must include <!DOCTYPE html>, <html>, <head>, <body>, closing tags)\n"
        "2. All syntax must be valid (check braces, quotes, tags)\n"
        "3. Test your code mentally before responding\n"
        "4. Make it work - no placeholders or TODOs\n"
        "5. If external resources might fail, use fallbacks or inline everything\n"
        "\n"
        "Now provide the FIXED, COMPLETE code:"
    )


def extract_code_block(artifact: str) -> str:
    """Return the first ```html block of an artifact, or the artifact itself."""
    match = _HTML_BLOCK.search(artifact)
    return match.group(1) if match else artifact


@dataclass
class FixAttempt:
    attempt_number: int
    strategy: FixStrategy
    request: str
    result: Optional[str] = None
    success: bool = False
    errors: list[str] = field(default_factory=list)
    timestamp: float = field(default_factory=time.time)


class HealingTracker:
    """Attempt bookkeeping for one artifact being healed."""

    def __init__(self, max_attempts: int = MAX_ATTEMPTS):
        self.max_attempts = max_attempts
        self.history: list[FixAttempt] = []

    @property
    def attempt_count(self) -> int:
        return len(self.history)

    @property
    def exhausted(self) -> bool:
        return self.attempt_count >= self.max_attempts

    def next_attempt(self, original_request: str, previous_code: str, errors: Sequence[str]) -> FixAttempt:
        """
        Record and return the next fix attempt

        Raises:
            HealingExhaustedError: once max_attempts have been made
        """
        if self.exhausted:
            raise HealingExhaustedError("Max healing attempts reached. Code could not be fixed.")
        number = self.attempt_count + 1
        strategy = select_strategy(number)
        attempt = FixAttempt(
            attempt_number=number,
            strategy=strategy,
            request=build_fix_request(original_request, previous_code, errors, number, strategy),
            errors=list(errors),
        )
        self.history.append(attempt)
        return attempt

    def record_result(self, result: str) -> None:
        if self.history:
            self.history[-1].result = result

    def mark_last_success(self) -> None:
        if self.history:
            self.history[-1].success = True

    def clear(self) -> None:
        self.history = []
