"""
Prompt templates that put the assistant into a review or triage mode
"""

from typing import List

from mcp.server.fastmcp.prompts.base import AssistantMessage, Message, UserMessage

CODE_REVIEW_CHECKLIST = (
    "I will review this PR as a senior developer, evaluating:\n"
    "1. Code correctness and edge cases\n"
    "2. Security implications\n"
    "3. Performance considerations\n"
    "4. Code style and maintainability\n"
    "5. Test coverage\n"
    "\n"
    "Let me start by fetching the pull request details..."
)

ISSUE_TRIAGE_CHECKLIST = (
    "I will triage the open issues, classifying each by:\n"
    "- Priority: Critical / High / Medium / Low\n"
    "- Type: Bug / Feature / Enhancement / Question / Docs\n"
    "- Suggested labels and next actions\n"
    "\n"
    "Fetching open issues now..."
)


def code_review(owner: str, repo: str, pr_number: int) -> List[Message]:
    """Activates a structured, senior-developer code review mode for a pull request."""
    return [
        UserMessage(content=f"Please review PR #{pr_number} in {owner}/{repo}."),
        AssistantMessage(content=CODE_REVIEW_CHECKLIST),
    ]


def issue_triage(owner: str, repo: str) -> List[Message]:
    """Activates an issue triage mode to classify and prioritize open issues in a repository."""
    return [
        UserMessage(content=f"Please triage the open issues in {owner}/{repo}."),
        AssistantMessage(content=ISSUE_TRIAGE_CHECKLIST),
    ]
