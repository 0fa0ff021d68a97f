"""Configuration for all external providers.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

`OPENROUTER_API_KEY` is the only mandatory value. Loading without it fails
immediately so that no client is ever built without credentials.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagi_external_api.errors import ConfigurationError

DEFAULT_MODEL = "openai/gpt-4o-mini"
DEFAULT_JIRA_BASE_URL = "https://jira.example.com"
DEFAULT_CROWDSTRIKE_BASE_URL = "https://api.crowdstrike.com"


class PAGIConfig(BaseSettings):
    """Immutable settings shared by the provider clients.

    Environment variables:
    - OPENROUTER_API_KEY        (required)
    - OPENROUTER_DEFAULT_MODEL  (optional)
    - JIRA_API_TOKEN            (optional)
    - JIRA_BASE_URL             (optional)
    - CROWDSTRIKE_API_TOKEN     (optional)
    - CROWDSTRIKE_BASE_URL      (optional)
    - LOG_LEVEL                 (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `PAGIConfig(_env_file=path_to_env)`.
    """

    openrouter_api_key: str = Field(
        validation_alias="OPENROUTER_API_KEY",
        repr=False,
        description="OpenRouter API key used as the bearer token for chat completions",
    )
    openrouter_default_model: str = Field(
        default=DEFAULT_MODEL,
        validation_alias="OPENROUTER_DEFAULT_MODEL",
        description="Model identifier used when a call does not override it",
    )

    # Placeholder integrations. Tokens may be empty; clients check them on use.
    jira_api_token: str = Field(
        default="",
        validation_alias="JIRA_API_TOKEN",
        repr=False,
        description="Jira API token",
    )
    jira_base_url: str = Field(
        default=DEFAULT_JIRA_BASE_URL,
        validation_alias="JIRA_BASE_URL",
        description="Jira base URL",
    )

    crowdstrike_api_token: str = Field(
        default="",
        validation_alias="CROWDSTRIKE_API_TOKEN",
        repr=False,
        description="CrowdStrike API token",
    )
    crowdstrike_base_url: str = Field(
        default=DEFAULT_CROWDSTRIKE_BASE_URL,
        validation_alias="CROWDSTRIKE_BASE_URL",
        description="CrowdStrike API base URL",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Level passed to configure_logging by applications",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    @property
    def default_model(self) -> str:
        """Model used when a call does not override it."""

        return self.openrouter_default_model


def _missing_variables(error: ValidationError) -> list[str]:
    # `loc` carries the validation alias, i.e. the environment variable name.
    return [
        str(item["loc"][0])
        for item in error.errors()
        if item.get("type") == "missing" and item.get("loc")
    ]


def load_config(env_file: str | Path | None = ".env") -> PAGIConfig:
    """Load configuration from the environment and an optional `.env` file.

    Args:
        env_file: Path of the dotenv file to merge in. A missing file is
            ignored. Pass None to read the process environment only.

    Returns:
        The loaded configuration.

    Raises:
        ConfigurationError: If OPENROUTER_API_KEY is missing or a value is invalid.
    """
    try:
        return PAGIConfig(_env_file=env_file)  # type: ignore[call-arg]
    except ValidationError as e:
        missing = _missing_variables(e)
        if missing:
            names = ", ".join(missing)
            raise ConfigurationError(f"Missing required env var: {names}") from e
        raise ConfigurationError(f"Invalid configuration: {e}") from e
