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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./account_management.db")
    DB_ECHO = bool(data.get("DB_ECHO", False))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRY_MINUTES = data.get("JWT_EXPIRY_MINUTES", 15)
    DEFAULT_LOCALE = data.get("DEFAULT_LOCALE", "en-US")
    SUPPORTED_LOCALES = data.get("SUPPORTED_LOCALES", ["en-US", "da-DK", "nl-NL"])
    SIGNUP_VALID_MINUTES = data.get("SIGNUP_VALID_MINUTES", 5)
    SIGNUP_MAX_ATTEMPTS = data.get("SIGNUP_MAX_ATTEMPTS", 3)
    LOGIN_VALID_MINUTES = data.get("LOGIN_VALID_MINUTES", 5)
    LOGIN_MAX_ATTEMPTS = data.get("LOGIN_MAX_ATTEMPTS", 3)
