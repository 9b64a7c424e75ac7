"""
Conversation seeds exposed as MCP prompts
"""

from .github import code_review, issue_triage

__all__ = ['code_review', 'issue_triage']
