from vibe_cherry.core.prompts import SYSTEM_PROMPT, PromptContext, build_prompt


def test_plain_prompt_uses_chatml_turns():
    prompt = build_prompt(PromptContext(user_text="build me a todo app"))

    assert prompt == (
        SYSTEM_PROMPT
        + "<|im_start|>user\nbuild me a todo app\n<|im_end|>\n<|im_start|>assistant\n"
    )


def test_system_prompt_is_a_closed_system_turn():
    assert SYSTEM_PROMPT.startswith("<|im_start|>system\nYou are Vibe Cherry")
    assert SYSTEM_PROMPT.endswith("<|im_end|>")


def test_fix_attempt_prefixes_directive_before_request():
    prompt = build_prompt(PromptContext(user_text="make it work", fix_attempt=3))

    assert prompt.endswith(
        "<|im_start|>user\nFIX ATTEMPT #3\n"
        "Be extra careful with syntax and completeness.\n\n"
        "make it work\n<|im_end|>\n<|im_start|>assistant\n"
    )


def test_empty_text_is_interpolated_verbatim():
    prompt = build_prompt(PromptContext(user_text=""))

    assert prompt.endswith("<|im_start|>user\n\n<|im_end|>\n<|im_start|>assistant\n")


def test_prior_turns_do_not_change_prompt():
    turns = [{"role": "user", "content": "earlier"}, {"role": "assistant", "content": "reply"}]

    with_history = build_prompt(PromptContext(user_text="again", prior_turns=turns))
    without_history = build_prompt(PromptContext(user_text="again"))

    assert with_history == without_history
    assert "earlier" not in with_history
