"""
GitHub tools module for the GitHub Assistant MCP server
"""

from .client import GitHubApiError, GitHubClient
from .issues import create_issue, list_issues
from .pulls import add_pr_comment, get_pull_request, list_pull_requests
from .repos import get_repository, list_repositories
from .results import ResourceDocument, ToolResult

__all__ = [
    'GitHubApiError',
    'GitHubClient',
    'ResourceDocument',
    'ToolResult',
    'list_repositories',
    'get_repository',
    'list_pull_requests',
    'get_pull_request',
    'add_pr_comment',
    'list_issues',
    'create_issue'
]
