"""
GitHub repository documents: README and recent commit log

Both readers report failures inside the document itself, as plain text,
instead of raising.
"""

import logging
import re
from typing import Optional, Tuple

from github_assistant.tools.github.client import GitHubClient
from github_assistant.tools.github.formatting import format_commit_log
from github_assistant.tools.github.results import MARKDOWN, PLAIN_TEXT, ResourceDocument

logger = logging.getLogger(__name__)

README_TEMPLATE = "github://{owner}/{repo}/readme"
COMMITS_TEMPLATE = "github://{owner}/{repo}/commits"
COMMIT_LOG_SIZE = 20

_DOCUMENT_URI = re.compile(r"^github://(?P<owner>[^/]+)/(?P<repo>[^/]+)/(?P<kind>readme|commits)$")


def match_document_uri(uri: str) -> Optional[Tuple[str, str, str]]:
    """
    Split a document address into (kind, owner, repo)
    
    Returns None when the address is not one of the repository documents.
    """
    match = _DOCUMENT_URI.match(uri)
    if not match:
        return None
    return match.group("kind"), match.group("owner"), match.group("repo")


async def read_repo_readme(client: GitHubClient, owner: str, repo: str) -> ResourceDocument:
    try:
        readme = await client.get_readme(owner, repo)
        text = readme.decoded_text()
    except Exception as e:
        logger.warning(f"README fetch for {owner}/{repo} failed: {e}")
        return ResourceDocument(text=f"Error fetching README: {e}", mime_type=PLAIN_TEXT)
    return ResourceDocument(text=text, mime_type=MARKDOWN)


async def read_repo_commits(client: GitHubClient, owner: str, repo: str) -> ResourceDocument:
    try:
        commits = await client.list_commits(owner, repo, per_page=COMMIT_LOG_SIZE)
    except Exception as e:
        logger.warning(f"Commit log fetch for {owner}/{repo} failed: {e}")
        return ResourceDocument(text=f"Error: {e}", mime_type=PLAIN_TEXT)
    return ResourceDocument(text=format_commit_log(owner, repo, commits), mime_type=PLAIN_TEXT)


DOCUMENT_READERS = {
    "readme": read_repo_readme,
    "commits": read_repo_commits,
}


async def read_document(client: GitHubClient, uri: str) -> Optional[ResourceDocument]:
    """Fetch the document behind a github:// address, or None if it is not one"""
    route = match_document_uri(uri)
    if route is None:
        return None
    kind, owner, repo = route
    return await DOCUMENT_READERS[kind](client, owner, repo)
