import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()

APP_ENV = os.getenv("APP_ENV", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./course_booking.db")

# DEV default only, must be overridden in production (see validate_runtime_config)
SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE = timedelta(minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

# Registration rules
MOBILE_NO_LENGTH = 11
MIN_PASSWORD_LENGTH = 8


def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and SECRET_KEY == "change-me-in-production":
        raise RuntimeError("SECRET_KEY must be set in production.")
