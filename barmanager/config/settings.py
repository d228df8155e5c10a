# barmanager/config/settings.py
from pydantic_settings import BaseSettings
from typing import List
import os

class Settings(BaseSettings):
    # App Info
    app_name: str = "BarManager API"
    version: str = "1.0.0"
    debug: bool = False
    api_prefix: str = "/api"
    log_level: str = "INFO"

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./barmanager.db")

    # Security
    secret_key: str = os.getenv("SECRET_KEY", "change-in-production")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # CORS
    cors_origins: List[str] = ["*"]

    # Server
    host: str = "0.0.0.0"
    port: int = int(os.getenv("PORT", 8000))

    # Seed del administrador del sistema (scripts/seed_admin.py)
    seed_admin_email: str = "admin@barmanager.com"
    seed_admin_password: str = "admin123"

    # Contraseña inicial de empresas creadas desde /system sin contraseña
    default_company_password: str = "123456"

    @property
    def database_url_normalized(self) -> str:
        """Algunos proveedores entregan postgres://, SQLAlchemy exige postgresql://"""
        if self.database_url.startswith("postgres://"):
            return self.database_url.replace("postgres://", "postgresql://", 1)
        return self.database_url

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'

settings = Settings()
