from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "postgresql+asyncpg://localhost:5432/nutrition_targets"
    default_tz: str = "UTC"  # "today" for age and goal-date projection
    targets_api_key: str | None = None
    log_level: str = "INFO"

    # Pause before the profile preview is computed so the client can show its loading state.
    targets_preview_delay_seconds: float = 0.0

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
