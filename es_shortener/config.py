from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = True

    # Application
    app_name: str = "URL Shortener"
    app_version: str = "1.0.0"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # URL Shortener specific
    base_url: str = "http://127.0.0.1:8000"

    # Slug generation strategy
    slug_strategy: str = "random"  # Options: "random", "hash"
    slug_length: int = 10  # Length of random slugs
    hash_slug_length: int = 8  # Length of hash-derived slugs
    slug_salt: str = ""  # Salt mixed into the URL before hashing

    # Uniqueness policy
    uniqueness_policy: str = "slug"  # Options: "slug", "url"

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # Options: "text", "json"

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
