"""
GitHub Assistant MCP Server
Provides GitHub repository, pull request and issue tools, repository
documents as resources, and review/triage prompts
"""

import logging
import sys
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Literal, Optional, Sequence, Type, Union

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import CallToolResult, ContentBlock
from pydantic import AnyUrl, StrictInt, ValidationError

from github_assistant.config.settings import Settings
from github_assistant.prompts.github import code_review, issue_triage
from github_assistant.resources.github import (
    COMMITS_TEMPLATE,
    README_TEMPLATE,
    read_document,
)
from github_assistant.tools.github import issues, pulls, repos
from github_assistant.tools.github.client import GitHubClient
from github_assistant.tools.github.inputs import (
    AddPullRequestCommentInput,
    CreateIssueInput,
    GetPullRequestInput,
    GetRepositoryInput,
    Invalid,
    ListIssuesInput,
    ListPullRequestsInput,
    ListRepositoriesInput,
    ToolInput,
    validate_input,
)
from github_assistant.tools.github.results import ToolResult

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "sse", "streamable-http")


class GitHubAssistantServer(FastMCP):
    """FastMCP server whose repository documents carry their own mime type"""

    def __init__(self, github_client: GitHubClient, **kwargs: Any):
        super().__init__(**kwargs)
        self.github_client = github_client

    async def call_tool(
        self, name: str, arguments: Dict[str, Any]
    ) -> Union[CallToolResult, Sequence[ContentBlock], Dict[str, Any]]:
        try:
            return await super().call_tool(name, arguments)
        except ToolError as e:
            # FastMCP checks argument types before the tool runs
            if not isinstance(e.__cause__, ValidationError):
                raise
            invalid = Invalid.from_validation_error(e.__cause__)
            logger.info(f"Rejected {name} call: {invalid.describe()}")
            return ToolResult.failure(invalid.describe()).to_call_tool_result()

    async def read_resource(self, uri: AnyUrl | str) -> Iterable[ReadResourceContents]:
        # A failed fetch comes back as text/plain even on the markdown template
        document = await read_document(self.github_client, str(uri))
        if document is None:
            return await super().read_resource(uri)
        return [ReadResourceContents(content=document.text, mime_type=document.mime_type)]


async def dispatch(
    handler: Callable[[GitHubClient, Any], Awaitable[ToolResult]],
    input_model: Type[ToolInput],
    client: GitHubClient,
    arguments: Dict[str, Any]
) -> ToolResult:
    """
    Validate tool arguments and run the handler

    Invalid arguments fail the call before any GitHub request is made.
    """
    outcome = validate_input(input_model, arguments)
    if isinstance(outcome, Invalid):
        logger.info(f"Rejected {handler.__name__} call: {outcome.describe()}")
        return ToolResult.failure(outcome.describe())
    return await handler(client, outcome.value)


def create_server(settings: Settings, client: Optional[GitHubClient] = None) -> GitHubAssistantServer:
    """
    Build the MCP server with every tool, resource and prompt registered

    Args:
        settings: Loaded application settings
        client: GitHub client to use; built from settings when omitted

    Returns:
        Configured server, not yet running
    """
    if client is None:
        if not settings.github_token:
            logger.warning("GITHUB_TOKEN is not set; GitHub requests will be unauthenticated")
        client = GitHubClient(
            token=settings.github_token,
            base_url=settings.github_api_url,
            timeout=settings.github_request_timeout
        )

    mcp = GitHubAssistantServer(
        client,
        name=settings.server_name,
        host=settings.server_host,
        port=settings.server_port
    )

    # ============= REPOSITORY TOOLS =============

    @mcp.tool()
    async def list_repositories(
        owner: str,
        type: Literal["all", "public", "private", "forks", "sources"] = "all",
        sort: Literal["created", "updated", "pushed", "full_name"] = "updated"
    ) -> CallToolResult:
        """
        Lists repositories for a given GitHub organization or user.

        Args:
            owner: GitHub username or organization name
            type: Type of repositories to list
            sort: Sort order
        """
        result = await dispatch(
            repos.list_repositories, ListRepositoriesInput, client,
            {"owner": owner, "type": type, "sort": sort}
        )
        return result.to_call_tool_result()

    @mcp.tool()
    async def get_repository(owner: str, repo: str) -> CallToolResult:
        """
        Returns full metadata and stats for a GitHub repository.

        Args:
            owner: Repository owner
            repo: Repository name
        """
        result = await dispatch(
            repos.get_repository, GetRepositoryInput, client,
            {"owner": owner, "repo": repo}
        )
        return result.to_call_tool_result()

    # ============= PULL REQUEST TOOLS =============

    @mcp.tool()
    async def list_pull_requests(
        owner: str,
        repo: str,
        state: Literal["open", "closed", "all"] = "open",
        author: Optional[str] = None
    ) -> CallToolResult:
        """
        Lists pull requests in a repository, with optional filters by state and author.

        Args:
            owner: Repository owner
            repo: Repository name
            state: PR state filter
            author: Filter PRs by author username
        """
        result = await dispatch(
            pulls.list_pull_requests, ListPullRequestsInput, client,
            {"owner": owner, "repo": repo, "state": state, "author": author}
        )
        return result.to_call_tool_result()

    @mcp.tool()
    async def get_pull_request(owner: str, repo: str, pr_number: StrictInt) -> CallToolResult:
        """
        Retrieves full details of a GitHub pull request including description, changed files, and review comments.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number
        """
        result = await dispatch(
            pulls.get_pull_request, GetPullRequestInput, client,
            {"owner": owner, "repo": repo, "pr_number": pr_number}
        )
        return result.to_call_tool_result()

    @mcp.tool()
    async def add_pr_comment(owner: str, repo: str, pr_number: StrictInt, body: str) -> CallToolResult:
        """
        Posts a comment on a GitHub pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number
            body: Comment text (Markdown supported)
        """
        result = await dispatch(
            pulls.add_pr_comment, AddPullRequestCommentInput, client,
            {"owner": owner, "repo": repo, "pr_number": pr_number, "body": body}
        )
        return result.to_call_tool_result()

    # ============= ISSUE TOOLS =============

    @mcp.tool()
    async def list_issues(
        owner: str,
        repo: str,
        state: Literal["open", "closed", "all"] = "open",
        labels: Optional[str] = None
    ) -> CallToolResult:
        """
        Lists issues in a repository, with optional filters by state and labels.

        Args:
            owner: Repository owner
            repo: Repository name
            state: Issue state filter
            labels: Comma-separated list of label names to filter by
        """
        result = await dispatch(
            issues.list_issues, ListIssuesInput, client,
            {"owner": owner, "repo": repo, "state": state, "labels": labels}
        )
        return result.to_call_tool_result()

    @mcp.tool()
    async def create_issue(
        owner: str,
        repo: str,
        title: str,
        body: Optional[str] = None,
        labels: Optional[List[str]] = None
    ) -> CallToolResult:
        """
        Creates a new issue in a GitHub repository.

        Args:
            owner: Repository owner
            repo: Repository name
            title: Issue title
            body: Issue description (Markdown supported)
            labels: List of label names to attach
        """
        result = await dispatch(
            issues.create_issue, CreateIssueInput, client,
            {"owner": owner, "repo": repo, "title": title, "body": body, "labels": labels}
        )
        return result.to_call_tool_result()

    # ============= RESOURCES =============
    # Templates are registered for listing only; GitHubAssistantServer.read_resource serves the reads

    @mcp.resource(
        README_TEMPLATE,
        name="repo-readme",
        description="README of a GitHub repository",
        mime_type="text/markdown"
    )
    async def repo_readme(owner: str, repo: str) -> None:
        pass

    @mcp.resource(
        COMMITS_TEMPLATE,
        name="repo-commits",
        description="Most recent commits of a GitHub repository",
        mime_type="text/plain"
    )
    async def repo_commits(owner: str, repo: str) -> None:
        pass

    # ============= PROMPTS =============

    mcp.prompt(name="code_review")(code_review)
    mcp.prompt(name="issue_triage")(issue_triage)

    return mcp


def main() -> None:
    """Load settings and run the server on the configured transport"""
    settings = Settings()
    # stdout carries the stdio transport, so logs go to stderr
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr
    )

    if settings.transport not in TRANSPORTS:
        logger.error(f"Invalid transport: {settings.transport}")
        sys.exit(1)

    mcp = create_server(settings)
    logger.info(f"Starting {settings.server_name} on {settings.transport}")
    if settings.transport != "stdio":
        logger.info(f"Listening on {settings.server_host}:{settings.server_port}")
    mcp.run(transport=settings.transport)


# Run the server
if __name__ == "__main__":
    main()
