"""
Configuration settings for the floor plan geometry service.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    environment: str = "development"
    log_level: str = "INFO"
    log_json: bool = True   # False renders human-readable console lines

    # HTTP
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["*"]

    class Config:
        env_prefix = "FLOORPLAN_"
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
