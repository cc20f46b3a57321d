"""
Shared configuration management for the group matching engine.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GroupsConfig(BaseSettings):
    """Engine configuration, read from GROUPS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GROUPS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")
    service_name: str = Field(default="groups")


def get_config(**overrides) -> GroupsConfig:
    """Get engine configuration."""
    return GroupsConfig(**overrides)
