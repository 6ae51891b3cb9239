"""Deterministic canned artifacts used when inference is unavailable"""
from vibe_cherry.core.fallback_templates import (
    CALCULATOR_APP,
    FIXED_APP,
    GENERIC_APP,
    TODO_APP,
)


def fallback_artifact(user_text: str, is_fix_attempt: bool = False) -> str:
    """
    Pick a canned app for the request

    Fix attempts always get the fixed-version page; calculator matching only
    applies to first attempts.

    Args:
        user_text: The original request text
        is_fix_attempt: Whether this request corrects a previous artifact

    Returns:
        str: Artifact text with a fenced html block and a feature summary
    """
    if is_fix_attempt:
        return FIXED_APP

    lowered = user_text.lower()
    if "todo" in lowered:
        return TODO_APP
    if "calculator" in lowered:
        return CALCULATOR_APP
    return GENERIC_APP.format(request=user_text)
