from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # Application metadata
    PROJECT_NAME: str = "Dispatch"
    PROJECT_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # API settings
    API_PREFIX: str = "/api"

    # Database settings
    DATABASE_URL: str

    # CORS settings
    BACKEND_CORS_ORIGINS: str = "*"

    # Credential settings
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # Trip acceptance
    ACCEPT_MAX_RETRIES: int = 3  # compare-and-swap attempts

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse the CORS origins string into a list."""
        return [origin.strip() for origin in self.BACKEND_CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env files

settings = Settings()
