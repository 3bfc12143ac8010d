import os

from dotenv import load_dotenv

load_dotenv()


def normalize_database_url(url: str) -> str:
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def engine_options_for(uri: str) -> dict:
    """Pool settings for networked databases. SQLite keeps SQLAlchemy defaults."""
    if uri.startswith("sqlite"):
        return {}
    return {
        # Test connection before use so idle drops surface as reconnects
        "pool_pre_ping": True,
        "pool_recycle": 300,
        "pool_size": 5,
        "max_overflow": 10,
        "pool_timeout": 30,
    }


class Config:
    APP_ENV = os.getenv("APP_ENV", "development").strip().lower()
    PORT = int(os.getenv("PORT", "3001"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
    # Signing key for bearer tokens. Set JWT_SECRET in production.
    JWT_SECRET = os.getenv("JWT_SECRET") or SECRET_KEY
    JWT_EXPIRES_DAYS = int(os.getenv("JWT_EXPIRES_DAYS", "7"))

    SQLALCHEMY_DATABASE_URI = normalize_database_url(
        os.getenv("DATABASE_URL", "sqlite:///healthstack.db")
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGIN", "http://localhost:5173").split(",")
        if origin.strip()
    ]

    # Only enforced when APP_ENV=production (see create_app)
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "100 per 15 minutes")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
