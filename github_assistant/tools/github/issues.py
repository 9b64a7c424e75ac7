"""
GitHub issues operations for the GitHub Assistant MCP server
"""

from .client import GitHubClient
from .formatting import format_issue_created, format_issue_list
from .inputs import CreateIssueInput, ListIssuesInput
from .results import tool_handler

PAGE_SIZE = 30


@tool_handler
async def list_issues(client: GitHubClient, params: ListIssuesInput) -> str:
    """
    List repository issues with state and label filters
    
    Args:
        client: GitHub API client
        params: owner, repo, state and optional comma-separated labels
    
    Returns:
        Formatted issue list, or a "No ... found." line
    """
    items = await client.list_repository_issues(
        params.owner,
        params.repo,
        state=params.state,
        labels=params.labels,
        per_page=PAGE_SIZE
    )
    
    # Filter out pull requests (GitHub includes PRs in issues endpoint)
    issues = [issue for issue in items if not issue.is_pull_request]
    
    return format_issue_list(params.owner, params.repo, params.state, issues)


@tool_handler
async def create_issue(client: GitHubClient, params: CreateIssueInput) -> str:
    """Create a new issue"""
    issue = await client.create_issue(
        params.owner,
        params.repo,
        title=params.title,
        body=params.body,
        labels=params.labels
    )
    return format_issue_created(issue)
