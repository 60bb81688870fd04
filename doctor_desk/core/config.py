from pydantic_settings import BaseSettings
from typing import List
import os

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Doctor Desk API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = os.getenv("TESTING", "0").lower() in ("1", "true", "t", "yes", "y")
    HOST: str = "0.0.0.0"
    PORT: int = 5001

    # Database
    DATABASE_URL: str = "postgresql://localhost:5432/doctor_desk"
    TEST_DATABASE_URL: str = "sqlite:///./test.db"

    # Security - the signing secret has no fallback and must be provided
    JWT_SECRET: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    REQUIRE_AUTH: bool = False

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:8090",
        "https://neuro-desk-portal.vercel.app",
    ]

    @property
    def get_database_url(self):
        """Return the appropriate database URL based on if we're testing"""
        if self.TESTING:
            return self.TEST_DATABASE_URL
        return self.DATABASE_URL

    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
