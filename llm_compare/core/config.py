from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Provider calls
    api_timeout_seconds: float = 60.0  # generate() bound per adapter call
    validation_timeout_seconds: float = 10.0  # validate_credential() bound
    default_max_tokens: int = 4096  # Anthropic requires an explicit budget

    # Comparison input
    max_prompt_length: int = 4000

    # Credential validation
    token_validation_debounce_seconds: float = 0.8

    # App
    app_name: str = "LLM Compare"
    app_description: str = "Compare responses from different LLMs side-by-side"
    app_env: str = "development"
    app_debug: bool = True
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    # CORS
    allowed_origins: str = "*"  # comma-separated, e.g. "https://compare.example.com"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # set True in production for structured JSON logs


settings = Settings()


def validate_settings_for_production() -> None:
    """Validate critical settings. Called on startup in non-test environments."""
    errors: list[str] = []

    if settings.api_timeout_seconds <= 0:
        errors.append("API_TIMEOUT_SECONDS must be positive")

    if settings.validation_timeout_seconds <= 0:
        errors.append("VALIDATION_TIMEOUT_SECONDS must be positive")

    if settings.token_validation_debounce_seconds < 0:
        errors.append("TOKEN_VALIDATION_DEBOUNCE_SECONDS must not be negative")

    if settings.app_env == "production":
        if settings.allowed_origins == "*":
            errors.append("ALLOWED_ORIGINS must not be '*' in production")
        if settings.app_debug:
            errors.append("APP_DEBUG must be false in production")

    if errors:
        raise SystemExit("Configuration errors:\n  - " + "\n  - ".join(errors))
