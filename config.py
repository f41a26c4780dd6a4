import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./codevault.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Session tokens
    ACCESS_TOKEN_SECRET = data.get(
        "ACCESS_TOKEN_SECRET", "dev-access-secret-change-in-production"
    )
    REFRESH_TOKEN_SECRET = data.get(
        "REFRESH_TOKEN_SECRET", "dev-refresh-secret-change-in-production"
    )
    ACCESS_TOKEN_TTL_MINUTES = int(data.get("ACCESS_TOKEN_TTL_MINUTES", 60))
    REFRESH_TOKEN_TTL_DAYS = int(data.get("REFRESH_TOKEN_TTL_DAYS", 7))
    TOKEN_LEEWAY_SECONDS = int(data.get("TOKEN_LEEWAY_SECONDS", 0))
    ACCESS_TOKEN_COOKIE_NAME = data.get("ACCESS_TOKEN_COOKIE_NAME", "accessToken")
    COOKIE_SECURE = bool(data.get("COOKIE_SECURE", False))

    # Credentials
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))

    # Password recovery
    RESET_TOKEN_TTL_MINUTES = int(data.get("RESET_TOKEN_TTL_MINUTES", 15))
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:5173")

    # Outbound email
    SMTP_ENABLED = bool(data.get("SMTP_ENABLED", False))
    SMTP_HOST = data.get("SMTP_HOST", "")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", False))
    SMTP_STARTTLS = bool(data.get("SMTP_STARTTLS", True))
    SMTP_FROM_EMAIL = data.get("SMTP_FROM_EMAIL", "no-reply@codevault.com")
    SMTP_FROM_NAME = data.get("SMTP_FROM_NAME", "CodeVault")
    SMTP_TIMEOUT_SECONDS = int(data.get("SMTP_TIMEOUT_SECONDS", 10))
