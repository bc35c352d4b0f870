from pydantic import SecretStr
from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    # App Config
    APP_NAME: str = "PaperGen Question Paper Generator"
    API_V1_STR: str = "/api/v1"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"  # "development" or "production"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # LLM Config
    LLM_PROVIDER: str = "groq"  # "groq" or "openai"

    # Groq API
    GROQ_API_KEY: Optional[SecretStr] = None

    # OpenAI compatible API (OpenAI, DeepSeek, Ollama, etc)
    OPENAI_API_KEY: Optional[SecretStr] = None
    OPENAI_BASE_URL: Optional[str] = None

    # Generation defaults
    DEFAULT_MODEL: str = "llama3-70b-8192"
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 4000
    LLM_TOP_P: float = 0.9
    LLM_TIMEOUT: float = 60.0  # seconds

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
