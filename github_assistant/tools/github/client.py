"""
GitHub API client for the GitHub Assistant MCP server
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import aiohttp

from .models import (
    CommitSummary,
    FileChange,
    Issue,
    IssueComment,
    PullRequest,
    Readme,
    RepositorySummary,
    Review,
)

logger = logging.getLogger(__name__)


class GitHubApiError(Exception):
    """Raised when a GitHub API call fails"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data


class GitHubAuthenticationError(GitHubApiError):
    pass


class GitHubForbiddenError(GitHubApiError):
    pass


class GitHubNotFoundError(GitHubApiError):
    pass


class GitHubValidationError(GitHubApiError):
    pass


class GitHubRateLimitError(GitHubApiError):
    pass


def _segment(value: str) -> str:
    return quote(value, safe="")


class GitHubClient:
    """
    Stateless GitHub REST client authenticated with a static token.

    One instance is created at startup and shared by every handler. Each call
    opens its own HTTP session, so the instance carries configuration only.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = "https://api.github.com",
        timeout: float = 30.0
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "GitHub-Assistant-MCP"
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    async def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Make a request to the GitHub API and return the decoded JSON body

        Raises:
            GitHubApiError: on any non-2xx status or network failure
        """
        url = f"{self.base_url}{endpoint}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        logger.debug("%s %s params=%s", method, endpoint, params)

        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            try:
                async with session.request(
                    method, url, headers=self.headers, params=params, json=json
                ) as response:
                    if response.status >= 400:
                        raise await self._error_from_response(response)
                    return await response.json(content_type=None)
            except aiohttp.ClientError as e:
                raise GitHubApiError(f"Network error: {str(e)}") from e
            except asyncio.TimeoutError as e:
                raise GitHubApiError("Network error: request timed out") from e

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make a GET request to GitHub API"""
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, json: Dict[str, Any]) -> Any:
        """Make a POST request to GitHub API"""
        return await self.request("POST", endpoint, json=json)

    async def _error_from_response(self, response: aiohttp.ClientResponse) -> GitHubApiError:
        """Map an error response onto the exception hierarchy"""
        try:
            data = await response.json(content_type=None)
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = None
        api_message = data.get("message") if data else None
        status = response.status

        if status == 404:
            return GitHubNotFoundError(
                api_message or "Repository or resource not found", status, data
            )
        if status == 401:
            return GitHubAuthenticationError(
                api_message or "Authentication failed. Please check your API key", status, data
            )
        if status == 429 or (status == 403 and response.headers.get("X-RateLimit-Remaining") == "0"):
            return GitHubRateLimitError(
                api_message or "API rate limit exceeded", status, data
            )
        if status == 403:
            return GitHubForbiddenError(
                api_message or "Access forbidden. You may have hit the rate limit", status, data
            )
        if status == 422:
            return GitHubValidationError(
                api_message or "Validation failed", status, data
            )
        return GitHubApiError(api_message or f"GitHub API error: {status}", status, data)

    # ============= REPOSITORIES =============

    async def list_repositories_for_user(
        self,
        username: str,
        type: str = "all",
        sort: str = "updated",
        per_page: int = 30
    ) -> List[RepositorySummary]:
        data = await self.get(
            f"/users/{_segment(username)}/repos",
            {"type": type, "sort": sort, "per_page": per_page}
        )
        return [RepositorySummary.model_validate(item) for item in data]

    async def get_repository(self, owner: str, repo: str) -> RepositorySummary:
        data = await self.get(f"/repos/{_segment(owner)}/{_segment(repo)}")
        return RepositorySummary.model_validate(data)

    async def get_readme(self, owner: str, repo: str) -> Readme:
        data = await self.get(f"/repos/{_segment(owner)}/{_segment(repo)}/readme")
        return Readme.model_validate(data)

    async def list_commits(self, owner: str, repo: str, per_page: int = 20) -> List[CommitSummary]:
        data = await self.get(
            f"/repos/{_segment(owner)}/{_segment(repo)}/commits",
            {"per_page": per_page}
        )
        return [CommitSummary.model_validate(item) for item in data]

    # ============= PULL REQUESTS =============

    async def list_pull_requests(
        self,
        owner: str,
        repo: str,
        state: str = "open",
        per_page: int = 30
    ) -> List[PullRequest]:
        data = await self.get(
            f"/repos/{_segment(owner)}/{_segment(repo)}/pulls",
            {"state": state, "per_page": per_page}
        )
        return [PullRequest.model_validate(item) for item in data]

    async def get_pull_request(self, owner: str, repo: str, pull_number: int) -> PullRequest:
        data = await self.get(f"/repos/{_segment(owner)}/{_segment(repo)}/pulls/{pull_number}")
        return PullRequest.model_validate(data)

    async def list_pull_request_files(
        self,
        owner: str,
        repo: str,
        pull_number: int
    ) -> List[FileChange]:
        data = await self.get(f"/repos/{_segment(owner)}/{_segment(repo)}/pulls/{pull_number}/files")
        return [FileChange.model_validate(item) for item in data]

    async def list_pull_request_reviews(
        self,
        owner: str,
        repo: str,
        pull_number: int
    ) -> List[Review]:
        data = await self.get(f"/repos/{_segment(owner)}/{_segment(repo)}/pulls/{pull_number}/reviews")
        return [Review.model_validate(item) for item in data]

    # ============= ISSUES =============

    async def list_repository_issues(
        self,
        owner: str,
        repo: str,
        state: str = "open",
        labels: Optional[str] = None,
        per_page: int = 30
    ) -> List[Issue]:
        """List issues; GitHub includes pull requests in this listing"""
        data = await self.get(
            f"/repos/{_segment(owner)}/{_segment(repo)}/issues",
            {"state": state, "labels": labels, "per_page": per_page}
        )
        return [Issue.model_validate(item) for item in data]

    async def create_issue(
        self,
        owner: str,
        repo: str,
        title: str,
        body: Optional[str] = None,
        labels: Optional[List[str]] = None
    ) -> Issue:
        payload: Dict[str, Any] = {"title": title}
        if body is not None:
            payload["body"] = body
        if labels is not None:
            payload["labels"] = labels
        data = await self.post(f"/repos/{_segment(owner)}/{_segment(repo)}/issues", payload)
        return Issue.model_validate(data)

    async def create_issue_comment(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        body: str
    ) -> IssueComment:
        data = await self.post(
            f"/repos/{_segment(owner)}/{_segment(repo)}/issues/{issue_number}/comments",
            {"body": body}
        )
        return IssueComment.model_validate(data)
