from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sent verbatim in the Authorization header.
    pexels_api_key: str = ""
    pexels_base_url: str = "https://api.pexels.com"
    pexels_timeout: float = 30.0
    pexels_max_idle_connections: int = 10
    log_level: str = "WARNING"


settings = Settings()
