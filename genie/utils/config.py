"""
Configuration management with schema validation.
Settings come from config/settings.yaml (or GENIE_SETTINGS_FILE) with
${VAR:default} environment substitution; a missing file means defaults.
"""

import os
from pathlib import Path
from typing import Any, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError
from .logger import get_logger

logger = get_logger(__name__)

# Load environment variables
load_dotenv()

DEFAULT_SETTINGS_FILE = Path("config") / "settings.yaml"
DEV_JWT_SECRET = "assessment-genie-development-secret-key"


class AppSettings(BaseModel):
    name: str = "Assessment Genie"
    version: str = "1.0.0"
    environment: str = "development"


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 5002


class AuthSettings(BaseModel):
    org_domain: str = "techcurators.in"  # addresses at this domain become admins
    jwt_secret: str = DEV_JWT_SECRET
    jwt_algorithm: str = "HS256"
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)


class GoogleSettings(BaseModel):
    userinfo_url: str = "https://www.googleapis.com/oauth2/v3/userinfo"
    timeout_seconds: float = 10.0


class CorsSettings(BaseModel):
    origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:8080", "http://localhost:3000"]
    )


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "json"
    file_path: Optional[str] = None
    max_bytes: int = 10485760
    backup_count: int = 5


class StorageSettings(BaseModel):
    data_dir: str = "data"


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    google: GoogleSettings = Field(default_factory=GoogleSettings)
    cors: CorsSettings = Field(default_factory=CorsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)

    @property
    def data_dir(self) -> Path:
        return Path(self.storage.data_dir)

    @property
    def is_production(self) -> bool:
        return self.app.environment.strip().lower() == "production"


def _substitute_env_vars(value: Any) -> Any:
    """Recursively substitute ${VAR} and ${VAR:default} expressions"""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            var_expr = value[2:-1]
            if ":" in var_expr:
                var_name, default = var_expr.split(":", 1)
                return os.getenv(var_name.strip(), default.strip())
            return os.getenv(var_expr, value)
    elif isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]
    return value


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load and validate settings; falls back to defaults when the file is absent"""
    settings_path = Path(path or os.getenv("GENIE_SETTINGS_FILE") or DEFAULT_SETTINGS_FILE)

    if not settings_path.exists():
        logger.info("Settings file not found, using defaults", path=str(settings_path))
        settings = Settings()
    else:
        try:
            with open(settings_path, "r", encoding="utf-8") as f:
                raw_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read settings from {settings_path}: {e}")
        if not isinstance(raw_data, dict):
            raise ConfigError(f"Settings file {settings_path} must contain a mapping")
        try:
            settings = Settings(**_substitute_env_vars(raw_data))
        except ValidationError as e:
            raise ConfigError(f"Invalid settings in {settings_path}: {e}")

    if settings.is_production and settings.auth.jwt_secret == DEV_JWT_SECRET:
        raise ConfigError("JWT_SECRET must be set in production")
    return settings
