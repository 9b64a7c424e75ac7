"""
Tests for the prompt templates
"""

from github_assistant.prompts.github import code_review, issue_triage


def test_code_review_seed():
    user, assistant = code_review("acme", "widgets", 7)

    assert user.role == "user"
    assert user.content.text == "Please review PR #7 in acme/widgets."
    assert assistant.role == "assistant"
    for criterion in (
        "1. Code correctness and edge cases",
        "2. Security implications",
        "3. Performance considerations",
        "4. Code style and maintainability",
        "5. Test coverage",
    ):
        assert criterion in assistant.content.text


def test_issue_triage_seed():
    messages = issue_triage("acme", "widgets")

    assert len(messages) == 2
    assert messages[0].content.text == "Please triage the open issues in acme/widgets."
    text = messages[1].content.text
    assert "- Priority: Critical / High / Medium / Low" in text
    assert "- Type: Bug / Feature / Enhancement / Question / Docs" in text
    assert "- Suggested labels and next actions" in text
