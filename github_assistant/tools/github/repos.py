"""
GitHub repository operations for the GitHub Assistant MCP server
"""

from .client import GitHubClient
from .formatting import format_repository, format_repository_list
from .inputs import GetRepositoryInput, ListRepositoriesInput
from .results import tool_handler

PAGE_SIZE = 30


@tool_handler
async def list_repositories(client: GitHubClient, params: ListRepositoriesInput) -> str:
    """
    List repositories for a GitHub user or organization
    
    Args:
        client: GitHub API client
        params: owner, repository type filter and sort order
    
    Returns:
        One line per repository under a header naming the owner
    """
    repos = await client.list_repositories_for_user(
        username=params.owner,
        type=params.type,
        sort=params.sort,
        per_page=PAGE_SIZE
    )
    return format_repository_list(params.owner, repos)


@tool_handler
async def get_repository(client: GitHubClient, params: GetRepositoryInput) -> str:
    """Get repository metadata and statistics"""
    repo = await client.get_repository(params.owner, params.repo)
    return format_repository(repo)
