"""
GitHub pull requests operations for the GitHub Assistant MCP server
"""

from .client import GitHubClient
from .formatting import format_comment_posted, format_pull_request, format_pull_request_list
from .inputs import AddPullRequestCommentInput, GetPullRequestInput, ListPullRequestsInput
from .results import tool_handler

PAGE_SIZE = 30


@tool_handler
async def list_pull_requests(client: GitHubClient, params: ListPullRequestsInput) -> str:
    """
    List repository pull requests, optionally filtered by author
    
    Args:
        client: GitHub API client
        params: owner, repo, state ('open', 'closed' or 'all') and optional author login
    
    Returns:
        Formatted pull request list, or a "No ... found." line
    """
    prs = await client.list_pull_requests(
        params.owner,
        params.repo,
        state=params.state,
        per_page=PAGE_SIZE
    )
    
    # The author filter runs on the fetched page, exact login match
    if params.author:
        prs = [pr for pr in prs if pr.user is not None and pr.user.login == params.author]
    
    return format_pull_request_list(params.owner, params.repo, params.state, prs)


@tool_handler
async def get_pull_request(client: GitHubClient, params: GetPullRequestInput) -> str:
    """
    Get a pull request with its changed files and reviews
    
    The three API calls run one after another; if any of them fails the
    whole operation fails.
    """
    pr = await client.get_pull_request(params.owner, params.repo, params.pr_number)
    files = await client.list_pull_request_files(params.owner, params.repo, params.pr_number)
    reviews = await client.list_pull_request_reviews(params.owner, params.repo, params.pr_number)
    return format_pull_request(pr, files, reviews)


@tool_handler
async def add_pr_comment(client: GitHubClient, params: AddPullRequestCommentInput) -> str:
    # PR conversation comments live on the PR's issue
    comment = await client.create_issue_comment(
        params.owner,
        params.repo,
        issue_number=params.pr_number,
        body=params.body
    )
    return format_comment_posted(comment)
