import os
import yaml

from trendradar_auth.domain.exceptions import ConfigurationError

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("TRENDRADAR_CONFIG", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _setting(key: str, default=None):
    """Environment variable wins over env.yaml, env.yaml over the default"""
    if key in os.environ:
        return os.environ[key]
    return data.get(key, default)


def _as_list(value) -> list:
    # Environment values are comma-separated strings, env.yaml gives lists
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value or [])


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class ApplicationConfig:
    DB_URI = _setting("DB_URI", "sqlite+aiosqlite:///./trendradar.db")
    API_PREFIX = _setting("API_PREFIX", "/api")
    API_PORT = int(_setting("API_PORT", 8000))
    API_HOST = _setting("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _as_list(_setting("CORS_ORIGINS", []))
    CORS_ALLOW_CREDENTIALS = _as_bool(_setting("CORS_ALLOW_CREDENTIALS", True))
    # Only honour X-Forwarded-For when running behind a trusted proxy
    TRUST_PROXY_HEADERS = _as_bool(_setting("TRUST_PROXY_HEADERS", False))
    LOG_LEVEL = _setting("LOG_LEVEL", "INFO")

    # Auth: no fallback secret, see validate_config
    JWT_SECRET = _setting("JWT_SECRET")
    JWT_ALGORITHM = _setting("JWT_ALGORITHM", "HS256")
    TOKEN_TTL_DAYS = int(_setting("TOKEN_TTL_DAYS", 7))
    PASSWORD_HASH_ROUNDS = int(_setting("PASSWORD_HASH_ROUNDS", 10))

    # Storage and maintenance
    STORAGE_TIMEOUT_SECONDS = float(_setting("STORAGE_TIMEOUT_SECONDS", 5))
    SESSION_SWEEP_INTERVAL_SECONDS = int(_setting("SESSION_SWEEP_INTERVAL_SECONDS", 3600))


def validate_config(config) -> None:
    """Fail fast on configuration the service cannot run without."""
    if not config.JWT_SECRET:
        raise ConfigurationError(
            "JWT_SECRET is not set; provide it via the environment or env.yaml"
        )
    if not 4 <= config.PASSWORD_HASH_ROUNDS <= 31:
        raise ConfigurationError("PASSWORD_HASH_ROUNDS must be between 4 and 31")
    if config.TOKEN_TTL_DAYS <= 0:
        raise ConfigurationError("TOKEN_TTL_DAYS must be positive")
