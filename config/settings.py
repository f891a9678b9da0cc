"""
Application settings module
"""
from pydantic_settings import BaseSettings
from typing import List
from dotenv import load_dotenv

# Load .env into the process environment
load_dotenv(encoding='utf-8')


class Settings(BaseSettings):
    """Application settings, read once at startup."""

    # Feature flags
    chat_enabled: bool = True
    admin_mode: bool = False

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Environment
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_config_path: str = "config/logging.yaml"

    # Event log sink: "stdout" or "logger"
    event_log_sink: str = "stdout"

    # Templates / static files
    template_dir: str = "templates"
    static_dir: str = "static"

    # CORS
    cors_origins: str = "http://localhost:3000"

    @property
    def cors_origins_list(self) -> List[str]:
        """CORS origins as a list"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
