# blog_api/config.py
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuración de la app, leída del entorno (o de un .env local)."""

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///blog.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # En producción JWT_SECRET_KEY tiene que venir del entorno
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "dev_change_me")
    JWT_EXPIRES_HOURS = int(os.environ.get("JWT_EXPIRES_HOURS", "12"))

    API_PREFIX = os.environ.get("API_PREFIX", "/api/v1")
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-secret"
    JWT_EXPIRES_HOURS = 12
    LOG_LEVEL = "DEBUG"
