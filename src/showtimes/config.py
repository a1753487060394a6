"""Library configuration using pydantic-settings."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SHOWTIMES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Showtime service
    base_url: str = "http://google.com/movies"
    user_agent: str = "showtimes (http://github.com/erunion/showtimes)"

    # Request settings
    request_timeout: int = 30
    results_per_page: int = 10

    # Defaults for new clients
    default_lang: str = "en"


class ClientConfig(BaseModel):
    """
    Static configuration of a ShowtimesClient.

    Holds nothing that changes during a call, so one client can serve
    concurrent lookups.
    """

    model_config = ConfigDict(frozen=True)

    location: str
    date: int = Field(default=0, ge=0)  # day offset from today
    lang: str = Field(default_factory=lambda: settings.default_lang)
    page_limit: int | None = Field(default=None, gt=0)  # None means unbounded

    @field_validator("location")
    @classmethod
    def location_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("location must not be empty")
        return value


# Global settings instance
settings = Settings()
