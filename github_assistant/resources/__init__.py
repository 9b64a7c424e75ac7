"""
Readable GitHub documents exposed as MCP resources
"""

from .github import (
    COMMITS_TEMPLATE,
    README_TEMPLATE,
    match_document_uri,
    read_document,
    read_repo_commits,
    read_repo_readme,
)

__all__ = [
    'COMMITS_TEMPLATE',
    'README_TEMPLATE',
    'match_document_uri',
    'read_document',
    'read_repo_commits',
    'read_repo_readme'
]
