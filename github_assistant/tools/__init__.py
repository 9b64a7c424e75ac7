"""
Tool handlers for the GitHub Assistant MCP server
"""
