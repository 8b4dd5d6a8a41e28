from os import environ

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_RESULTS = 8


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    restaurants_table: str = ""
    default_results: int = Field(default=DEFAULT_RESULTS, ge=0)
    environment: str
    log_level: str = "INFO"


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config: for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    # An empty defaultResults falls back to the default, same as an unset one
    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        restaurants_table=environ.get("restaurants_table", ""),
        default_results=environ.get("defaultResults") or DEFAULT_RESULTS,
        environment=environ.get("ENVIRONMENT", "local"),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
    )
    return _cached_config
