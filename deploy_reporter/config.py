"""Step configuration using pydantic-settings."""

from functools import lru_cache
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from deploy_reporter.core.exceptions import ConfigurationError

# Load .env file without overriding variables exported by the CI runner
load_dotenv()

DEFAULT_API_BASE_URL = "https://api.github.com"

StatePreset = Literal["auto", "pending", "success", "error", "failure"]


class Settings(BaseSettings):
    """Step settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Required
    auth_token: str = Field(min_length=1)
    repository_url: str = Field(min_length=1)
    commit_hash: str = Field(min_length=1)

    # GitHub API
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = Field(default=30.0, gt=0)

    # Deployment status
    set_specific_status: StatePreset = "auto"
    build_url: str = ""
    status_identifier: str | None = None  # accepted, not sent
    description: str = ""
    verbose: bool = False

    # Exit code of the build so far, exported by the CI runner
    bitrise_build_status: str | None = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["console", "json"] = "console"

    def summary(self) -> dict[str, Any]:
        """Effective configuration with the token masked."""
        data = self.model_dump(exclude={"log_level", "log_format"})
        data["auth_token"] = "***"
        return data


def load_settings(**overrides: Any) -> Settings:
    """Build settings, converting validation failures into ConfigurationError."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        messages = "; ".join(
            f"{field}: {err['msg']}" for field, err in zip(fields, e.errors())
        )
        raise ConfigurationError(messages, fields) from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings()
