"""
Configuration settings for the GitHub Assistant MCP server
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support"""
    
    # Server Configuration
    server_name: str = "github-assistant"
    server_host: str = "0.0.0.0"
    server_port: int = 8000
    transport: str = "stdio"  # "stdio", "sse" or "streamable-http"
    
    # GitHub API
    github_token: Optional[str] = None
    github_api_url: str = "https://api.github.com"
    github_request_timeout: float = 30.0  # seconds
    
    # Logging
    log_level: str = "INFO"
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
