"""
Tests for the pull request tools
"""

import pytest

from github_assistant.tools.github.client import GitHubApiError, GitHubAuthenticationError
from github_assistant.tools.github.inputs import (
    AddPullRequestCommentInput,
    GetPullRequestInput,
    ListPullRequestsInput,
)
from github_assistant.tools.github.models import IssueComment
from github_assistant.tools.github.pulls import add_pr_comment, get_pull_request, list_pull_requests


# ============================================================================
# list_pull_requests
# ============================================================================

@pytest.mark.asyncio
async def test_list_pull_requests_formats_entries(mock_client, make_pr):
    mock_client.list_pull_requests.return_value = [
        make_pr(),
        make_pr(number=8, title="Fix gears", user={"login": "hubot"}, head={"ref": "fix/gears"}),
    ]

    result = await list_pull_requests(mock_client, ListPullRequestsInput(owner="acme", repo="widgets"))

    mock_client.list_pull_requests.assert_awaited_once_with("acme", "widgets", state="open", per_page=30)
    assert result.is_error is False
    assert result.text == (
        "OPEN Pull Requests in acme/widgets:\n\n"
        "- #7 - Add sprockets\n"
        "  Author: octocat | Base: main <- feature/sprockets | Updated: 2024-06-03T10:00:00Z\n\n"
        "- #8 - Fix gears\n"
        "  Author: hubot | Base: main <- fix/gears | Updated: 2024-06-03T10:00:00Z"
    )


@pytest.mark.asyncio
async def test_list_pull_requests_author_filter(mock_client, make_pr):
    mock_client.list_pull_requests.return_value = [
        make_pr(number=1, user={"login": "octocat"}),
        make_pr(number=2, user={"login": "hubot"}),
    ]
    params = ListPullRequestsInput(owner="acme", repo="widgets", state="all", author="hubot")

    result = await list_pull_requests(mock_client, params)

    assert "#2" in result.text
    assert "#1 " not in result.text
    assert result.text.startswith("ALL Pull Requests in acme/widgets:")


@pytest.mark.asyncio
async def test_list_pull_requests_author_filter_is_case_sensitive(mock_client, make_pr):
    mock_client.list_pull_requests.return_value = [make_pr(user={"login": "OctoCat"})]
    params = ListPullRequestsInput(owner="acme", repo="widgets", state="closed", author="octocat")

    result = await list_pull_requests(mock_client, params)

    assert result.is_error is False
    assert result.text == "No CLOSED pull requests found."


@pytest.mark.asyncio
async def test_list_pull_requests_no_match(mock_client, make_pr):
    mock_client.list_pull_requests.return_value = [make_pr(), make_pr(number=9)]
    params = ListPullRequestsInput(owner="acme", repo="widgets", author="nobody")

    result = await list_pull_requests(mock_client, params)

    assert result.text == "No OPEN pull requests found."


@pytest.mark.asyncio
async def test_list_pull_requests_error(mock_client):
    mock_client.list_pull_requests.side_effect = GitHubAuthenticationError("Bad credentials", 401)

    result = await list_pull_requests(mock_client, ListPullRequestsInput(owner="acme", repo="widgets"))

    assert result.is_error is True
    assert result.text == "Error: Bad credentials"


# ============================================================================
# get_pull_request
# ============================================================================

@pytest.mark.asyncio
async def test_get_pull_request_full_details(mock_client, make_pr, make_file, make_review):
    mock_client.get_pull_request.return_value = make_pr(draft=True)
    mock_client.list_pull_request_files.return_value = [
        make_file("src/app.py", "modified", 5, 2),
        make_file("docs/new.md", "added", 10, 0),
    ]
    mock_client.list_pull_request_reviews.return_value = [make_review("bob", "APPROVED")]

    result = await get_pull_request(
        mock_client, GetPullRequestInput(owner="acme", repo="widgets", pr_number=7)
    )

    assert result.is_error is False
    assert result.text == "\n".join([
        "PR #7: Add sprockets",
        "Author: octocat | State: open | Draft: Yes",
        "Base: main <- Head: feature/sprockets",
        "Changed files: 2 | Commits: 3 | Comments: 2",
        "\nDescription:\nAdds sprocket support.",
        "\nChanged Files:\n"
        "  modified   src/app.py (+5/-2)\n"
        "  added      docs/new.md (+10/-0)",
        "\nReviews:\n  bob: APPROVED",
        "\nURL: https://github.com/acme/widgets/pull/7",
    ])


@pytest.mark.asyncio
async def test_get_pull_request_calls_in_order(mock_client, make_pr):
    mock_client.get_pull_request.return_value = make_pr()
    mock_client.list_pull_request_files.return_value = []
    mock_client.list_pull_request_reviews.return_value = []

    await get_pull_request(mock_client, GetPullRequestInput(owner="acme", repo="widgets", pr_number=7))

    called = [name for name, _, _ in mock_client.mock_calls]
    assert called == ["get_pull_request", "list_pull_request_files", "list_pull_request_reviews"]


@pytest.mark.asyncio
async def test_get_pull_request_file_status_column(mock_client, make_pr, make_file):
    mock_client.get_pull_request.return_value = make_pr()
    mock_client.list_pull_request_files.return_value = [
        make_file("a.py", "renamed"),
        make_file("b.py", "unchanged"),
        make_file("c.py", "a-very-long-status"),
    ]
    mock_client.list_pull_request_reviews.return_value = []

    result = await get_pull_request(
        mock_client, GetPullRequestInput(owner="acme", repo="widgets", pr_number=7)
    )

    assert "  renamed    a.py (+5/-2)" in result.text
    assert "  unchanged  b.py (+5/-2)" in result.text
    assert "  a-very-long-status c.py (+5/-2)" in result.text


@pytest.mark.asyncio
async def test_get_pull_request_without_reviews_or_body(mock_client, make_pr):
    mock_client.get_pull_request.return_value = make_pr(body=None, user=None)
    mock_client.list_pull_request_files.return_value = []
    mock_client.list_pull_request_reviews.return_value = []

    result = await get_pull_request(
        mock_client, GetPullRequestInput(owner="acme", repo="widgets", pr_number=7)
    )

    lines = result.text.split("\n")
    reviews_at = lines.index("Reviews:")
    assert lines[reviews_at + 1] == "  (no reviews yet)"
    assert "Description:\n(no description)" in result.text
    assert "Author: unknown" in result.text


@pytest.mark.asyncio
async def test_get_pull_request_fails_mid_sequence(mock_client, make_pr, make_file):
    """A failure after the first calls discards everything fetched so far"""
    mock_client.get_pull_request.return_value = make_pr()
    mock_client.list_pull_request_files.return_value = [make_file()]
    mock_client.list_pull_request_reviews.side_effect = GitHubApiError("Server Error", 500)

    result = await get_pull_request(
        mock_client, GetPullRequestInput(owner="acme", repo="widgets", pr_number=7)
    )

    assert result.is_error is True
    assert result.text == "Error: Server Error"


# ============================================================================
# add_pr_comment
# ============================================================================

@pytest.mark.asyncio
async def test_add_pr_comment_posts_on_issue(mock_client):
    mock_client.create_issue_comment.return_value = IssueComment(
        id=1, html_url="https://github.com/acme/widgets/pull/7#issuecomment-1"
    )
    params = AddPullRequestCommentInput(owner="acme", repo="widgets", pr_number=7, body="LGTM")

    result = await add_pr_comment(mock_client, params)

    mock_client.create_issue_comment.assert_awaited_once_with(
        "acme", "widgets", issue_number=7, body="LGTM"
    )
    assert result.is_error is False
    assert result.text == (
        "Comment posted successfully.\n"
        "URL: https://github.com/acme/widgets/pull/7#issuecomment-1"
    )


@pytest.mark.asyncio
async def test_add_pr_comment_error(mock_client):
    mock_client.create_issue_comment.side_effect = GitHubApiError("Network error: timeout")
    params = AddPullRequestCommentInput(owner="acme", repo="widgets", pr_number=7, body="LGTM")

    result = await add_pr_comment(mock_client, params)

    assert result.is_error is True
    assert result.text == "Error: Network error: timeout"
