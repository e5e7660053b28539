"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "parley"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS (comma-separated origins, "*" allows all)
    allowed_origins: str = "*"

    # LibreTranslate Configuration
    libretranslate_url: str = "https://libretranslate.com"
    libretranslate_api_key: str = ""
    libretranslate_timeout: float = 30.0

    # Google Cloud Speech Configuration
    # Empty means the ambient GOOGLE_APPLICATION_CREDENTIALS lookup is used
    google_application_credentials: str = ""

    # Summarization Configuration
    summarizer_backend: str = "extractive"  # Options: "extractive", "llm"

    # LLM Configuration (only used when summarizer_backend=llm)
    llm_provider: str = "gemini"  # Options: "gemini", "openai"

    # Gemini Configuration
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"

    # OpenAI Configuration
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"

    # Request limits
    max_summarization_messages: int = 1000
    max_batch_texts: int = 100

    @property
    def allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into list."""
        if not self.allowed_origins:
            return []
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


settings = Settings()
