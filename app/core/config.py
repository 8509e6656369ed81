from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List
import os


class Config(BaseSettings):
    # Database Configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/wholesale.db", alias="DB_URL"
    )

    # JWT Configuration
    jwt_secret: str = Field(default="change-me", alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60, alias="ACCESS_TOKEN_EXPIRE_MINUTES"
    )

    # HTTP server
    cors_origins: List[str] = Field(
        default=["http://localhost", "http://localhost:5173"],
        alias="CORS_ORIGINS",
    )
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=4000, alias="PORT")
    # 0 means one worker per CPU
    workers: int = Field(default=0, alias="WEB_CONCURRENCY")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    is_production: bool = (
        os.getenv("ENVIRONMENT", "development").lower() == "production"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate the settings
config = Config()
