from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "local"
    APP_NAME: str = "Hotel Booking API"
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api"

    # Comma-separated origins for CORS (e.g. https://hotel.example.com,https://admin.hotel.example.com). "*" allows any origin.
    CORS_ORIGINS: str = "http://localhost:5173"
    CORS_MAX_AGE: int = 86400

    DATABASE_URL: str = "sqlite:///./hotel.db"

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """Render and others give postgres://; SQLAlchemy expects postgresql+psycopg2://."""
        if v and v.startswith("postgres://"):
            return "postgresql+psycopg2://" + v[11:]
        return v

    # Pagination
    DEFAULT_LIMIT: int = 10
    MAX_LIMIT: int = 100

    # Booking reference (PNR)
    PNR_LENGTH: int = 6
    PNR_MAX_ATTEMPTS: int = 20

    HOTEL_ID: int = 1

    REDIS_URL: str = "redis://localhost:6379/0"

    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 25
    SMTP_USERNAME: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_FROM: str = "reservations@hotel.local"

    SENDGRID_API_KEY: str = ""
    SENDGRID_FROM_EMAIL: str = ""

    CONTACT_NOTIFY_EMAIL: str = ""  # e.g. frontdesk@hotel.example.com; empty disables contact notifications


settings = Settings()
