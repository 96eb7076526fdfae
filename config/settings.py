from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from dotenv import load_dotenv

# Load .env file into os.environ BEFORE pydantic reads it
# so the Langfuse SDK and the LangChain provider clients see the same values.
load_dotenv()


class Settings(BaseSettings):
    APP_NAME: str = "Screenform API"

    # LLM Configuration
    LLM_PROVIDER: str = "openai"
    LLM_MODEL: str = "gpt-4o-mini"

    # Provider credentials
    OPENAI_API_KEY: Optional[str] = None
    OPENROUTER_API_KEY: Optional[str] = None
    GEMINI_API_KEY: Optional[str] = None

    # Sampling temperatures per task
    QUESTION_TEMPERATURE: float = 0.55
    SUMMARY_TEMPERATURE: float = 0.4
    RESUME_TEMPERATURE: float = 0.2

    # Prompt bounds (lossy on purpose: keeps prompt size and cost flat)
    ROLE_SUMMARY_LIMIT: int = 1200
    PROMPT_BASE_QUESTION_LIMIT: int = 12
    PROMPT_HISTORY_LIMIT: int = 12
    SUMMARY_ANSWER_LIMIT: int = 25
    RESUME_TEXT_LIMIT: int = 12000

    # Database
    DATABASE_URL: str = "sqlite:///./screenform.db"
    AUTO_CREATE_TABLES: bool = True

    # Server
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000
    ALLOWED_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    # Identity: "token" (hashed bearer tokens in access_tokens) or "supabase"
    AUTH_PROVIDER: str = "token"
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None

    # Uploaded resumes
    RESUME_STORAGE_DIR: str = "storage/resumes"

    # Langfuse Observability
    LANGFUSE_PUBLIC_KEY: Optional[str] = None
    LANGFUSE_SECRET_KEY: Optional[str] = None
    LANGFUSE_HOST: str = "https://cloud.langfuse.com"
    LANGFUSE_ENABLED: bool = False

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",  # ignore unknown env vars instead of raising errors
    )


settings = Settings()
