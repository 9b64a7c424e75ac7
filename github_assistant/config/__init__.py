"""
Configuration for the GitHub Assistant MCP server
"""

from .settings import Settings

__all__ = ['Settings']
