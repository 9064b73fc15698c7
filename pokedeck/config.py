from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "Pokedeck"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "postgresql+asyncpg://localhost:5432/pokedeck"

    # HS256 signing key for bearer tokens on mutating routes
    auth_secret: str = ""

    cors_origins: list[str] = ["*"]


settings = Settings()
