from __future__ import annotations

from wikiai_backend.llm.prompts import SYSTEM_PROMPT, build_article_prompt, build_messages


def test_topic_is_quoted_in_prompt() -> None:
    prompt = build_article_prompt("Black holes")
    assert prompt.startswith('Write a comprehensive, well-structured Wikipedia-style article about "Black holes".')
    assert "## for main sections, ### for subsections" in prompt
    assert "Avoid using asterisks (*)" in prompt


def test_topic_with_braces_is_kept_verbatim() -> None:
    assert '"set {x} notation"' in build_article_prompt("set {x} notation")


def test_messages_are_system_then_user() -> None:
    messages = build_messages("Jazz")
    assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert messages[1]["role"] == "user"
    assert '"Jazz"' in messages[1]["content"]
