"""Configuration management for the Profile Image Generator.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the PROFILEGEN_ prefix,
allowing the endpoint and credential to be supplied without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (PROFILEGEN_* prefix)
2. .env file in the project root
3. Default values defined in ProfilegenConfig

Example .env file:
    PROFILEGEN_API_KEY=your-api-key
    PROFILEGEN_MODEL=imagen-3.0-generate-002
    PROFILEGEN_MAX_ATTEMPTS=5

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

Usage Example
-------------
    from profilegen.core.config import config

    print(config.endpoint_url)
    print(config.max_attempts)
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FAILURE_MESSAGE = "Something went wrong while generating the image. Please try again."


class ProfilegenConfig(BaseSettings):
    """Main configuration for the Profile Image Generator.

    Attributes
    ----------
    Image API:
        api_base_url : str
            Base URL of the generative image API
        model : str
            Model name appended to the predict endpoint
        api_key : str
            API key sent as the ``key`` query parameter
        request_timeout : float
            Per-attempt HTTP timeout in seconds
        sample_count : int
            Number of images requested per call (always 1)

    Retry Policy:
        max_attempts : int
            Total attempts before giving up
        backoff_base_seconds : float
            Base delay, doubled after every failed attempt
        backoff_max_jitter_seconds : float
            Upper bound of the random delay added to every backoff

    Presentation:
        download_filename : str
            Suggested filename for the downloaded image
        failure_message : str
            Single user-facing message shown for every failure kind

    UI Settings:
        server_name : str
            Server bind address
        server_port : int
            Server port (1024-65535)
        share : bool
            Create public gradio.live link
        log_level : str
            Root logging level
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PROFILEGEN_",
        case_sensitive=False,
    )

    # Image API settings
    api_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Base URL of the generative image API",
    )
    model: str = Field(
        default="imagen-3.0-generate-002",
        description="Image generation model name",
    )
    api_key: str = Field(
        default="",
        description="API key for the image generation endpoint",
    )
    request_timeout: float = Field(
        default=120.0,
        description="Per-attempt HTTP timeout in seconds",
        gt=0,
    )
    sample_count: int = Field(
        default=1,
        description="Images requested per call (the UI shows exactly one)",
        ge=1,
        le=1,
    )

    # Retry policy
    max_attempts: int = Field(default=5, ge=1, le=10)
    backoff_base_seconds: float = Field(default=1.0, ge=0.0)
    backoff_max_jitter_seconds: float = Field(default=1.0, ge=0.0)

    # Presentation
    download_filename: str = Field(
        default="github-profile-image.png",
        description="Suggested filename for the downloaded image",
    )
    failure_message: str = Field(
        default=DEFAULT_FAILURE_MESSAGE,
        description="Generic message shown for any generation failure",
    )

    # UI settings
    server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )
    log_level: str = Field(default="INFO")

    @property
    def endpoint_url(self) -> str:
        """Full predict endpoint for the configured model."""
        return f"{self.api_base_url.rstrip('/')}/models/{self.model}:predict"


# Global configuration instance
config = ProfilegenConfig()
