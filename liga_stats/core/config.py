"""Configurações da aplicação"""
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from functools import cached_property


class Settings(BaseSettings):
    """Configurações da aplicação"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow"
    )

    # App
    APP_NAME: str = "Liga Stats API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development ou production

    # API
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: str = (
        "http://localhost:3000,http://localhost:5173,"
        "http://127.0.0.1:3000,http://127.0.0.1:5173"
    )

    @cached_property
    def is_production(self) -> bool:
        """Verifica se está em modo produção"""
        return self.ENVIRONMENT.lower() == "production"

    @cached_property
    def cors_origins_list(self) -> list[str]:
        """Retorna lista de origens CORS"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    # Database
    DATABASE_URL: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "liga_stats"

    @cached_property
    def database_url(self) -> str:
        """Retorna URL completa do banco de dados"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    # Redis (result backend do Celery)
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_PASSWORD: Optional[str] = None

    # RabbitMQ
    RABBITMQ_HOST: str = "localhost"
    RABBITMQ_PORT: int = 5672
    RABBITMQ_USER: str = "admin"
    RABBITMQ_PASSWORD: str = "admin"
    RABBITMQ_VHOST: str = "/"

    # Celery
    CELERY_BROKER_URL: Optional[str] = None
    CELERY_RESULT_BACKEND: Optional[str] = None

    @cached_property
    def celery_broker_url(self) -> str:
        """URL do broker Celery (RabbitMQ)"""
        if self.CELERY_BROKER_URL:
            return self.CELERY_BROKER_URL
        vhost = self.RABBITMQ_VHOST.strip()
        if not vhost or vhost == '/':
            vhost = '/'
        elif not vhost.startswith('/'):
            vhost = '/' + vhost
        return f"amqp://{self.RABBITMQ_USER}:{self.RABBITMQ_PASSWORD}@{self.RABBITMQ_HOST}:{self.RABBITMQ_PORT}{vhost}"

    @cached_property
    def celery_result_backend(self) -> str:
        """URL do backend de resultados Celery (Redis)"""
        if self.CELERY_RESULT_BACKEND:
            return self.CELERY_RESULT_BACKEND
        password = f":{self.REDIS_PASSWORD}@" if self.REDIS_PASSWORD else ""
        return f"redis://{password}{self.REDIS_HOST}:{self.REDIS_PORT}/0"

    # Manutenção
    SCORE_REPAIR_MINUTES: int = Field(30, ge=1, le=59)  # Intervalo da reconciliação de placares

    # Estatísticas
    RANKING_DEFAULT_LIMIT: int = Field(10, ge=1)
    RANKING_MAX_LIMIT: int = Field(100, ge=1)
    FORM_GAMES: int = Field(5, ge=1)  # Jogos considerados na forma recente
    MIN_GOAL_MINUTE: int = 1
    MAX_GOAL_MINUTE: int = 120

    # Rate limiting
    STATISTICS_RATE_LIMIT: str = "200/minute"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/app.log"
    LOG_TO_FILE: bool = True

    @model_validator(mode="after")
    def check_ranges(self) -> "Settings":
        if self.RANKING_DEFAULT_LIMIT > self.RANKING_MAX_LIMIT:
            raise ValueError("RANKING_DEFAULT_LIMIT maior que RANKING_MAX_LIMIT")
        if self.MIN_GOAL_MINUTE > self.MAX_GOAL_MINUTE:
            raise ValueError("MIN_GOAL_MINUTE maior que MAX_GOAL_MINUTE")
        return self


settings = Settings()
