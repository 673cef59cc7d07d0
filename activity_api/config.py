"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_COMPONENT_IDS: tuple[str, ...] = (
    "activity",
    "blogs",
    "friends",
    "groups",
    "members",
    "messages",
    "notifications",
    "settings",
    "xprofile",
)

DEFAULT_VISIBILITY_OPTIONS: dict[str, str] = {
    "public": "Everyone",
    "loggedin": "Logged In Users",
    "onlyme": "Only Me",
    "friends": "My Friends",
    "grouponly": "Group Members",
}


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING
    )

    database_url: str = Field(
        default="sqlite:///./activity.db",
        description="Database connection URL used by SQLAlchemy to reach the activity store",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    site_url: str = Field(
        default="http://localhost:8000",
        description="Absolute origin used when building hypermedia links",
    )
    api_namespace: str = Field(
        default="buddypress/v1",
        description="Versioned namespace under which the activity routes are mounted",
    )
    activity_rest_base: str = Field(default="activity", min_length=1)
    types_rest_base: str = Field(default="types", min_length=1)
    author_resource_path: str = Field(
        default="/wp/v2/users",
        description="Path of the external user resource referenced by author links",
    )
    avatar_base_url: str = Field(default="https://www.gravatar.com/avatar/")
    avatar_size: int = Field(default=150, gt=0)
    avatar_default: str = Field(default="mm")
    activity_type_labels: dict[str, str] = Field(
        default_factory=dict,
        description="Display labels for raw activity type codes; unmapped codes pass through",
    )
    component_ids: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COMPONENT_IDS),
        description="Registered component identifiers accepted by the API",
    )
    visibility_options: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_VISIBILITY_OPTIONS),
        description="Visibility catalog offered when creating activities",
    )
    moderator_roles: list[str] = Field(
        default_factory=lambda: ["admin", "moderator"],
        description="Role aliases holding the moderation capability",
    )
    default_per_page: int = Field(default=20, gt=0)
    locale: str = Field(default="en_US")
    locale_dir: str | None = Field(default=None)
    log_level: str = Field(default="INFO")
    cors_allow_origins: list[str] = Field(
        default_factory=list,
        description="Origins allowed to call the API from a browser",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
