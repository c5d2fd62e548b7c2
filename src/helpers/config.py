from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class settings(BaseSettings):

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Application settings
    APP_NAME: str = "MeetingSummarizer"
    APP_VERSION: str = "0.1.0"
    PORT: int = 5000
    NODE_ENV: str = "production"
    LOG_LEVEL: str = "INFO"
    CORS_ALLOWED_ORIGINS: str = "*"

    # File upload settings
    ALLOWED_FILE_TYPES: List[str] = ["text/plain", "text/markdown"]
    ALLOWED_FILE_EXTENSIONS: List[str] = [".md"]
    MAX_FILE_SIZE: int = 5 * 1024 * 1024
    UPLOAD_OVERHEAD_BYTES: int = 64 * 1024

    # LLM settings
    SUMMARIZATION_BACKEND: str = "groq"
    SUMMARIZATION_MODEL_ID: str = "llama-3.3-70b-versatile"

    GROQ_API_KEY: str = ""
    GROQ_API_URL: str = "https://api.groq.com/openai/v1"
    OPENAI_API_KEY: str = ""
    OPENAI_API_URL: str = ""
    COHERE_API_KEY: str = ""
    GEMINI_API_KEY: str = ""

    DEFAULT_MAX_OUTPUT_TOKENS: int = 500
    DEFAULT_TEMPERATURE: float = 0.3
    LLM_TIMEOUT: float = 60.0
    LLM_MAX_RETRIES: int = 0

    # Template settings
    DEFAULT_LANGUAGE: str = "en"
    PRIMARY_LANGUAGE: str = "en"

    # Email settings
    EMAIL_BACKEND: str = "smtp"
    EMAIL_FROM: str = ""
    EMAIL_FROM_NAME: str = "Meeting Summarizer"
    EMAIL_TIMEOUT: float = 30.0

    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 587
    SMTP_SECURE: bool = False
    SMTP_USER: str = ""
    SMTP_PASS: str = ""

    RESEND_API_KEY: str = ""
    RESEND_API_URL: str = "https://api.resend.com/emails"

    @property
    def is_development(self) -> bool:
        return self.NODE_ENV == "development"

    @property
    def max_file_size_mb(self) -> int:
        return self.MAX_FILE_SIZE // (1024 * 1024)

    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ALLOWED_ORIGINS.split(",") if origin.strip()]

def get_settings():
    return settings()
