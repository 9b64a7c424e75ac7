"""
Typed records for the GitHub REST API payloads used by the assistant.

Each model is a read-only view over one API response: it is built from the
JSON body, handed to a formatter and dropped. Optional fields stay ``None``
here; display fallbacks belong to the formatters.
"""

import base64
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class GitHubModel(BaseModel):
    """Base for API payload models"""

    model_config = ConfigDict(extra="ignore", frozen=True)


class User(GitHubModel):
    login: str


class Label(GitHubModel):
    name: str


class BranchRef(GitHubModel):
    ref: str


class RepositorySummary(GitHubModel):
    """Repository metadata as returned by the repos endpoints"""

    name: str
    full_name: str
    description: Optional[str] = None
    private: bool = False
    language: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    default_branch: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    pushed_at: Optional[str] = None
    html_url: str


class PullRequest(GitHubModel):
    """
    Pull request from either the list or the single-PR endpoint.

    The list endpoint omits ``commits`` and ``comments``, hence the defaults.
    """

    number: int
    title: str
    user: Optional[User] = None
    state: str
    draft: bool = False
    base: BranchRef
    head: BranchRef
    body: Optional[str] = None
    commits: int = 0
    comments: int = 0
    updated_at: Optional[str] = None
    html_url: str


class FileChange(GitHubModel):
    filename: str
    status: str
    additions: int = 0
    deletions: int = 0


class Review(GitHubModel):
    user: Optional[User] = None
    state: str


class Issue(GitHubModel):
    """Issue as listed or created through the issues endpoints"""

    number: int
    title: str
    user: Optional[User] = None
    state: str = "open"
    labels: List[Label] = []
    body: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    html_url: str
    # Present only when the "issue" is really a pull request
    pull_request: Optional[Dict[str, Any]] = None

    @field_validator("labels", mode="before")
    @classmethod
    def _coerce_label_names(cls, value: Any) -> Any:
        # Labels may come back as bare names instead of objects
        if isinstance(value, list):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None

    @property
    def label_names(self) -> List[str]:
        return [label.name for label in self.labels]


class IssueComment(GitHubModel):
    id: Optional[int] = None
    html_url: str


class GitAuthor(GitHubModel):
    name: Optional[str] = None
    date: Optional[str] = None


class CommitDetail(GitHubModel):
    message: str
    author: Optional[GitAuthor] = None


class CommitSummary(GitHubModel):
    """Commit from the commit listing, reduced to what the log shows"""

    sha: str
    commit: CommitDetail

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    @property
    def headline(self) -> str:
        return self.commit.message.split("\n")[0]

    @property
    def author_name(self) -> Optional[str]:
        return self.commit.author.name if self.commit.author else None

    @property
    def author_date(self) -> Optional[str]:
        return self.commit.author.date if self.commit.author else None


class Readme(GitHubModel):
    name: Optional[str] = None
    content: str
    encoding: str = "base64"

    def decoded_text(self) -> str:
        """Decode the README body from its transport encoding"""
        if self.encoding != "base64":
            return self.content
        # GitHub wraps the base64 payload with newlines; b64decode skips them
        return base64.b64decode(self.content).decode("utf-8", errors="replace")
