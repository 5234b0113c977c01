from typing import Any
from urllib.parse import quote_plus

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from clinic_booking.core.shared.logger import LOG_FORMATS


class Settings(BaseSettings):
    """
    Configuración de la aplicación utilizando Pydantic BaseSettings.
    Carga automáticamente las variables de entorno.
    """

    # API Configuration
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Clinic Booking API"
    PROJECT_DESCRIPTION: str = "API de turnos médicos: disponibilidad, reservas y estados"
    VERSION: str = "0.1.0"

    # Database Settings
    DATABASE_URL: str | None = Field(
        None, description="URL completa de la base de datos (reemplaza los DB_* individuales)"
    )
    DB_HOST: str = Field("localhost", description="Host de PostgreSQL")
    DB_PORT: int = Field(5432, description="Puerto de PostgreSQL")
    DB_NAME: str = Field("clinic_booking", description="Nombre de la base de datos")
    DB_USER: str = Field("postgres", description="Usuario de PostgreSQL")
    DB_PASSWORD: str | None = Field(None, description="Contraseña de PostgreSQL")
    DB_ECHO: bool = Field(False, description="Log SQL queries (solo para debug)")
    DB_CREATE_TABLES: bool = Field(
        False, description="Crear tablas al iniciar (solo desarrollo; en producción usar alembic)"
    )

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(20, description="Tamaño del pool de conexiones")
    DB_MAX_OVERFLOW: int = Field(30, description="Máximo overflow del pool")
    DB_POOL_RECYCLE: int = Field(3600, description="Reciclar conexiones cada X segundos")
    DB_POOL_TIMEOUT: int = Field(30, description="Timeout para obtener conexión del pool")

    # Scheduling Settings
    APPOINTMENT_DURATION_MINUTES: int = Field(30, description="Duración fija de cada turno en minutos")
    MAX_AVAILABILITY_RANGE_DAYS: int = Field(
        31, description="Máximo de días consultables en una sola búsqueda de disponibilidad"
    )

    # Application Settings
    DEBUG: bool = Field(False, description="Modo debug")
    ENVIRONMENT: str = Field("development", description="Entorno de ejecución")
    CORS_ORIGINS: str = Field("*", description="Orígenes permitidos para CORS, separados por coma")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Nivel de logging")
    LOG_FORMAT: str = Field("colored", description="Formato de logs: colored, json o plain")
    LOG_FILE: str | None = Field(None, description="Archivo de logs opcional (formato JSON)")

    # Error tracking
    SENTRY_DSN: str | None = Field(None, description="DSN de Sentry (deshabilitado si está vacío)")
    SENTRY_TRACES_SAMPLE_RATE: float = Field(0.0, description="Fracción de transacciones enviadas a Sentry")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignorar campos extras en lugar de generar un error
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("APPOINTMENT_DURATION_MINUTES")
    @classmethod
    def validate_appointment_duration(cls, v):
        if v < 5:
            raise ValueError("APPOINTMENT_DURATION_MINUTES must be at least 5")
        if v > 240:
            raise ValueError("APPOINTMENT_DURATION_MINUTES should not exceed 240")
        return v

    @field_validator("MAX_AVAILABILITY_RANGE_DAYS")
    @classmethod
    def validate_max_range(cls, v):
        if not 1 <= v <= 366:
            raise ValueError("MAX_AVAILABILITY_RANGE_DAYS must be between 1 and 366")
        return v

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v):
        if v < 1:
            raise ValueError("DB_POOL_SIZE must be at least 1")
        if v > 100:
            raise ValueError("DB_POOL_SIZE should not exceed 100")
        return v

    @field_validator("DB_MAX_OVERFLOW")
    @classmethod
    def validate_max_overflow(cls, v):
        if v < 0:
            raise ValueError("DB_MAX_OVERFLOW must be 0 or greater")
        if v > 200:
            raise ValueError("DB_MAX_OVERFLOW should not exceed 200")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        if v not in LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT must be one of {LOG_FORMATS}")
        return v

    @computed_field
    @property
    def async_database_url(self) -> str:
        """Construye la URL asíncrona (asyncpg) de la base de datos"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        user = quote_plus(self.DB_USER)
        if self.DB_PASSWORD:
            password = quote_plus(self.DB_PASSWORD)
            return f"postgresql+asyncpg://{user}:{password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        return f"postgresql+asyncpg://{user}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @computed_field
    @property
    def is_development(self) -> bool:
        """Determina si está en modo desarrollo"""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]


# Singleton para configuración
_settings_instance = None


def get_settings() -> Settings:
    """
    Retorna una instancia cacheada de la configuración.
    Esto evita cargar las variables de entorno múltiples veces.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
