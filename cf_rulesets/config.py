"""
Configuration management for the rulesets client.
"""

from typing import Optional, Tuple, Union

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APIConfig(BaseModel):
    """API connection configuration used by the default HTTP transport."""
    api_token: str = Field(..., description="API token sent as a bearer token")
    api_url: str = Field(
        "https://api.cloudflare.com/client/v4",
        description="API base URL"
    )
    max_retries: int = Field(
        3,
        description="Retries performed by the HTTP adapter on 429 and 5xx responses"
    )
    backoff_factor: float = Field(
        1.0,
        description="Backoff factor between adapter retries"
    )
    timeout: Optional[Union[float, Tuple[float, float]]] = Field(
        None,
        description="Default request timeout in seconds, or a (connect, read) pair"
    )


class Settings(BaseSettings):
    """Main configuration settings, loaded from CF_RULESETS_* variables."""
    api: APIConfig

    model_config = SettingsConfigDict(
        env_prefix="CF_RULESETS_",
        env_nested_delimiter="__",
    )
