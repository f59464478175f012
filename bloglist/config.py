"""
Configuration loader for the blog list service.

Loads all settings from environment variables (.env file).
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .repositories.config import RepositoryConfig

# Load environment variables from .env file
load_dotenv()


@dataclass
class AppConfig:
    """
    Application settings.

    All values loaded from environment variables - NO SECRETS IN CODE.
    """
    env: str = "development"
    port: int = 3003
    log_level: str = "INFO"
    log_format: str = "simple"
    repository: RepositoryConfig = field(default_factory=RepositoryConfig)

    @property
    def testing(self) -> bool:
        return self.env == "testing"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Environment variables:
        - FLASK_ENV: development / testing / production
        - PORT: HTTP port (default: 3003)
        - LOG_LEVEL, LOG_FORMAT: see logger.setup_logging
        - MONGODB_*: see RepositoryConfig.from_env
        """
        return cls(
            env=os.getenv("FLASK_ENV", "development"),
            port=int(os.getenv("PORT", "3003")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "simple"),
            repository=RepositoryConfig.from_env(),
        )

    def summary(self) -> str:
        """Return a summary of the current configuration (safe for logging)."""
        uri = self.repository.mongodb_uri
        uri_display = uri[:30] + "..." if len(uri) > 30 else uri
        return (
            f"env={self.env} port={self.port} "
            f"mongodb={uri_display} "
            f"collection={self.repository.database}.{self.repository.collection}"
        )
