import pytest

from vibe_cherry.core.fallback import fallback_artifact
from vibe_cherry.core.fallback_templates import (
    CALCULATOR_APP,
    FIXED_APP,
    TODO_APP,
)


@pytest.mark.parametrize("text", ["build me a todo app", "TODO list please", "ToDo"])
def test_todo_requests_get_todo_app(text):
    artifact = fallback_artifact(text)

    assert artifact == TODO_APP
    assert "<!DOCTYPE html>" in artifact
    assert "Todo List" in artifact


@pytest.mark.parametrize("text", ["a calculator", "Scientific CALCULATOR"])
def test_calculator_requests_get_calculator_app(text):
    assert fallback_artifact(text) == CALCULATOR_APP


def test_todo_wins_over_calculator():
    assert fallback_artifact("todo calculator") == TODO_APP


def test_other_requests_get_generic_app_with_request_text():
    artifact = fallback_artifact('a weather dashboard with {braces} and "quotes"')

    assert artifact.startswith("Here's a beautiful Custom App:")
    assert 'Created based on your request: "a weather dashboard with {braces} and "quotes""' in artifact
    assert "```html\n<!DOCTYPE html>" in artifact


def test_empty_request_still_produces_an_app():
    artifact = fallback_artifact("")

    assert artifact
    assert 'Created based on your request: ""' in artifact


@pytest.mark.parametrize("text", ["x", "build me a todo app", "a calculator", ""])
def test_fix_attempts_always_get_fixed_version(text):
    assert fallback_artifact(text, is_fix_attempt=True) == FIXED_APP


@pytest.mark.parametrize(
    "text,is_fix",
    [("todo", False), ("calculator", False), ("anything", False), ("anything", True)],
)
def test_output_is_deterministic(text, is_fix):
    assert fallback_artifact(text, is_fix) == fallback_artifact(text, is_fix)


def test_templates_are_fenced_html_with_summary():
    for template in (TODO_APP, CALCULATOR_APP, FIXED_APP):
        assert "```html\n<!DOCTYPE html>" in template
        assert "</html>\n```\n\n" in template
