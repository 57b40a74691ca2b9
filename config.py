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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./auth.db")
    API_PORT = data.get("API_PORT", 8080)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", False)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Shared secret required in X-API-Key for the auth operations
    API_KEY = data.get("API_KEY", "dev-api-key-change-in-production")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "dev-admin-key-change-in-production")

    # External identity provider tokens accepted by /auth/check
    IDENTITY_TOKEN_SECRET = data.get("IDENTITY_TOKEN_SECRET", "dev-identity-secret")
    IDENTITY_TOKEN_ALGORITHM = data.get("IDENTITY_TOKEN_ALGORITHM", "HS256")
    IDENTITY_TOKEN_AUDIENCE = data.get("IDENTITY_TOKEN_AUDIENCE")
    IDENTITY_TOKEN_ISSUER = data.get("IDENTITY_TOKEN_ISSUER")

    SESSION_LIFETIME_HOURS = float(data.get("SESSION_LIFETIME_HOURS", 6))
    SESSION_RENEWAL_WINDOW_HOURS = float(data.get("SESSION_RENEWAL_WINDOW_HOURS", 3))
    RESET_TOKEN_LIFETIME_HOURS = float(data.get("RESET_TOKEN_LIFETIME_HOURS", 1))

    RATE_LIMIT_INTERVAL_SECONDS = float(data.get("RATE_LIMIT_INTERVAL_SECONDS", 1))
    RATE_LIMIT_STALE_AFTER_SECONDS = float(data.get("RATE_LIMIT_STALE_AFTER_SECONDS", 60))
    TRUST_FORWARDED_FOR = bool(data.get("TRUST_FORWARDED_FOR", False))
