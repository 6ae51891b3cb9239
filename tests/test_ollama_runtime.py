"""OllamaRuntime against shell scripts standing in for the CLI."""
import asyncio

import pytest

from vibe_cherry.core.runtimes import OllamaRuntime


async def test_missing_binary_reports_start_failure(tmp_path):
    runtime = OllamaRuntime(command=str(tmp_path / "no-such-ollama"))

    outcome = await runtime.infer("hello")

    assert not outcome.ok
    assert outcome.error.startswith("Failed to start Ollama: ")


async def test_missing_binary_listing_raises(tmp_path):
    runtime = OllamaRuntime(command=str(tmp_path / "no-such-ollama"))

    with pytest.raises(OSError):
        await runtime.list_models()


async def test_run_writes_prompt_to_stdin_and_returns_stdout(make_runtime_script):
    runtime = OllamaRuntime(command=make_runtime_script("cat"))

    outcome = await runtime.infer("build me a todo app\nwith ünïcode")

    assert outcome.ok
    assert outcome.text == "build me a todo app\nwith ünïcode"
    assert runtime.active_count == 0


async def test_lone_surrogate_in_prompt_is_replaced_not_raised(make_runtime_script):
    runtime = OllamaRuntime(command=make_runtime_script("cat"))

    outcome = await runtime.infer("todo \ud800 app")

    assert outcome.ok
    assert outcome.text == "todo ? app"
    assert runtime.active_count == 0


async def test_run_passes_model_identifier(make_runtime_script):
    runtime = OllamaRuntime(command=make_runtime_script('echo "$2"; cat >/dev/null'), model="qwen2.5-coder")

    outcome = await runtime.infer("x")

    assert outcome.text == "qwen2.5-coder\n"


async def test_nonzero_exit_reports_stderr(make_runtime_script):
    runtime = OllamaRuntime(
        command=make_runtime_script('cat >/dev/null; echo "model exploded" >&2; exit 3')
    )

    outcome = await runtime.infer("x")

    assert not outcome.ok
    assert outcome.error == "Ollama error: model exploded"


async def test_invalid_utf8_is_decoded_lossily(make_runtime_script):
    runtime = OllamaRuntime(command=make_runtime_script("cat >/dev/null; printf 'ok \\377 done'"))

    outcome = await runtime.infer("x")

    assert outcome.ok
    assert outcome.text == "ok \ufffd done"


async def test_listing_captures_output_and_status(make_runtime_script):
    runtime = OllamaRuntime(command=make_runtime_script("cat", list_body="echo broken; exit 1"))

    listing = await runtime.list_models()

    assert listing.returncode == 1
    assert not listing.ok
    assert listing.stdout == "broken\n"


async def test_timeout_kills_child(make_runtime_script):
    runtime = OllamaRuntime(command=make_runtime_script("cat >/dev/null; exec sleep 30"), timeout=0.3)

    outcome = await asyncio.wait_for(runtime.infer("x"), timeout=10)

    assert not outcome.ok
    assert outcome.error == "Ollama timed out after 0.3s"
    assert runtime.active_count == 0


async def test_terminate_all_stops_running_children(make_runtime_script):
    runtime = OllamaRuntime(command=make_runtime_script("cat >/dev/null; exec sleep 30"))
    task = asyncio.ensure_future(runtime.infer("x"))
    while runtime.active_count == 0:
        await asyncio.sleep(0.01)

    stopped = await runtime.terminate_all()
    outcome = await asyncio.wait_for(task, timeout=10)

    assert stopped == 1
    assert not outcome.ok
    assert outcome.error == "Ollama generation stopped"


async def test_concurrency_limit_serializes_children(make_runtime_script):
    runtime = OllamaRuntime(
        command=make_runtime_script("cat >/dev/null; sleep 0.2; echo done"),
        max_concurrent=1,
    )
    tasks = [asyncio.ensure_future(runtime.infer(str(i))) for i in range(3)]
    peak = 0
    while not all(task.done() for task in tasks):
        peak = max(peak, runtime.active_count)
        await asyncio.sleep(0.01)

    assert peak == 1
    assert all(task.result().text == "done\n" for task in tasks)
