"""Pytest fixtures shared by the GitHub assistant tests."""

from unittest.mock import AsyncMock

import pytest

from github_assistant.tools.github.client import GitHubClient
from github_assistant.tools.github.models import (
    FileChange,
    Issue,
    PullRequest,
    RepositorySummary,
    Review,
)


@pytest.fixture
def mock_client():
    """GitHub client whose endpoint methods are AsyncMocks"""
    return AsyncMock(spec=GitHubClient)


@pytest.fixture
def repo_payload():
    return {
        "name": "widgets",
        "full_name": "acme/widgets",
        "description": "Widget factory",
        "private": False,
        "language": "Python",
        "stargazers_count": 12,
        "forks_count": 3,
        "open_issues_count": 4,
        "default_branch": "main",
        "created_at": "2024-01-02T03:04:05Z",
        "updated_at": "2024-06-01T00:00:00Z",
        "pushed_at": "2024-06-02T00:00:00Z",
        "html_url": "https://github.com/acme/widgets",
        "owner": {"login": "acme"},
    }


@pytest.fixture
def pr_payload():
    return {
        "number": 7,
        "title": "Add sprockets",
        "user": {"login": "octocat"},
        "state": "open",
        "draft": False,
        "base": {"ref": "main"},
        "head": {"ref": "feature/sprockets"},
        "body": "Adds sprocket support.",
        "commits": 3,
        "comments": 2,
        "updated_at": "2024-06-03T10:00:00Z",
        "html_url": "https://github.com/acme/widgets/pull/7",
    }


@pytest.fixture
def issue_payload():
    return {
        "number": 11,
        "title": "Widgets wobble",
        "user": {"login": "alice"},
        "state": "open",
        "labels": [{"name": "bug"}, {"name": "p1"}],
        "body": "They wobble.",
        "created_at": "2024-05-01T00:00:00Z",
        "updated_at": "2024-05-02T00:00:00Z",
        "html_url": "https://github.com/acme/widgets/issues/11",
    }


@pytest.fixture
def make_repo(repo_payload):
    def _make(**overrides):
        return RepositorySummary.model_validate({**repo_payload, **overrides})
    return _make


@pytest.fixture
def make_pr(pr_payload):
    def _make(**overrides):
        return PullRequest.model_validate({**pr_payload, **overrides})
    return _make


@pytest.fixture
def make_issue(issue_payload):
    def _make(**overrides):
        return Issue.model_validate({**issue_payload, **overrides})
    return _make


@pytest.fixture
def make_file():
    def _make(filename="src/app.py", status="modified", additions=5, deletions=2):
        return FileChange(filename=filename, status=status, additions=additions, deletions=deletions)
    return _make


@pytest.fixture
def make_review():
    def _make(login="bob", state="APPROVED"):
        return Review.model_validate({"user": {"login": login}, "state": state})
    return _make
