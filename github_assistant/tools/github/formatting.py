"""
Text formatting for GitHub API responses
"""

from typing import List, Optional

from .models import (
    CommitSummary,
    FileChange,
    Issue,
    IssueComment,
    PullRequest,
    RepositorySummary,
    Review,
    User,
)

NO_DESCRIPTION = "(no description)"
NO_REVIEWS = "  (no reviews yet)"
UNKNOWN_USER = "unknown"
NOT_AVAILABLE = "N/A"


def _login(user: Optional[User]) -> str:
    return user.login if user else UNKNOWN_USER


def _or_na(value: Optional[str]) -> str:
    return value if value is not None else NOT_AVAILABLE


def format_repository_list(owner: str, repos: List[RepositorySummary]) -> str:
    lines = [
        f"- {r.name} - {r.description if r.description is not None else NO_DESCRIPTION} "
        f"[{'private' if r.private else 'public'}]"
        for r in repos
    ]
    return f"Repositories for {owner}:\n\n" + "\n".join(lines)


def format_repository(r: RepositorySummary) -> str:
    return "\n".join([
        f"Repository: {r.full_name}",
        f"Description: {r.description if r.description is not None else '(none)'}",
        f"Language: {_or_na(r.language)}",
        f"Stars: {r.stargazers_count} | Forks: {r.forks_count} | Open Issues: {r.open_issues_count}",
        f"Default Branch: {_or_na(r.default_branch)}",
        f"Visibility: {'Private' if r.private else 'Public'}",
        f"Created: {_or_na(r.created_at)} | Last Push: {_or_na(r.pushed_at)}",
        f"URL: {r.html_url}",
    ])


def format_pull_request_list(owner: str, repo: str, state: str, prs: List[PullRequest]) -> str:
    if not prs:
        return f"No {state.upper()} pull requests found."
    entries = [
        f"- #{pr.number} - {pr.title}\n"
        f"  Author: {_login(pr.user)} | Base: {pr.base.ref} <- {pr.head.ref} | Updated: {_or_na(pr.updated_at)}"
        for pr in prs
    ]
    return f"{state.upper()} Pull Requests in {owner}/{repo}:\n\n" + "\n\n".join(entries)


def format_file_change(f: FileChange) -> str:
    """Status is left-aligned in a 10-character column"""
    return f"  {f.status:<10} {f.filename} (+{f.additions}/-{f.deletions})"


def format_pull_request(pr: PullRequest, files: List[FileChange], reviews: List[Review]) -> str:
    file_list = "\n".join(format_file_change(f) for f in files)
    if reviews:
        review_list = "\n".join(f"  {_login(r.user)}: {r.state}" for r in reviews)
    else:
        review_list = NO_REVIEWS
    return "\n".join([
        f"PR #{pr.number}: {pr.title}",
        f"Author: {_login(pr.user)} | State: {pr.state} | Draft: {'Yes' if pr.draft else 'No'}",
        f"Base: {pr.base.ref} <- Head: {pr.head.ref}",
        f"Changed files: {len(files)} | Commits: {pr.commits} | Comments: {pr.comments}",
        f"\nDescription:\n{pr.body if pr.body is not None else NO_DESCRIPTION}",
        f"\nChanged Files:\n{file_list}",
        f"\nReviews:\n{review_list}",
        f"\nURL: {pr.html_url}",
    ])


def format_comment_posted(comment: IssueComment) -> str:
    return f"Comment posted successfully.\nURL: {comment.html_url}"


def format_issue_list(owner: str, repo: str, state: str, issues: List[Issue]) -> str:
    if not issues:
        return f"No {state} issues found."
    entries = [
        f"- #{i.number} - {i.title}\n"
        f"  Author: {_login(i.user)} | Labels: {', '.join(i.label_names) or 'none'} | Updated: {_or_na(i.updated_at)}"
        for i in issues
    ]
    return f"{state.upper()} Issues in {owner}/{repo}:\n\n" + "\n\n".join(entries)


def format_issue_created(issue: Issue) -> str:
    return f"Issue #{issue.number} created successfully.\nTitle: {issue.title}\nURL: {issue.html_url}"


def format_commit_log(owner: str, repo: str, commits: List[CommitSummary]) -> str:
    log = "\n".join(
        f"{c.short_sha} - {c.headline} ({c.author_name or UNKNOWN_USER}, {_or_na(c.author_date)})"
        for c in commits
    )
    return f"Recent commits in {owner}/{repo}:\n\n{log}"
