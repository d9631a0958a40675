"""Configuration management for the Card SOAP Gateway.

Configuration is loaded from environment variables, grouped by prefix.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BACKEND_URL = "https://10.6.101.233:2001/Manager/ServicesGps.svc"


class AppEnvironment(str, Enum):
    LOCAL = "local"
    TEST = "test"
    PROD = "prod"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AppConfig(BaseSettings):
    name: str = Field(default="card-soap-gateway")
    env: AppEnvironment = Field(default=AppEnvironment.LOCAL)
    version: str = Field(default="0.1.0")
    log_level: LogLevel = Field(default=LogLevel.INFO)

    model_config = SettingsConfigDict(env_prefix="APP_")

    @field_validator("env", mode="before")
    @classmethod
    def validate_env(cls, v: str | AppEnvironment) -> AppEnvironment:
        if isinstance(v, AppEnvironment):
            return v
        return AppEnvironment(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        if isinstance(v, LogLevel):
            return v
        return LogLevel(v.upper())


class ServerConfig(BaseSettings):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    workers: int = Field(default=4)

    model_config = SettingsConfigDict(env_prefix="SERVER_")


class SoapBackendConfig(BaseSettings):
    endpoint_url: str = Field(default=DEFAULT_BACKEND_URL)
    namespace: str = Field(default="http://tempuri.org/")
    contract: str = Field(default="IServicesGps")
    timeout_seconds: float = Field(default=10.0, gt=0)

    # The backend presents a self-signed certificate, so validation is off
    # unless explicitly enabled. Set ca_bundle to trust a private CA.
    verify_tls: bool = Field(default=False)
    ca_bundle: str | None = Field(default=None)

    statement_flag_default: str = Field(default="C", min_length=1)

    model_config = SettingsConfigDict(env_prefix="SOAP_")

    @field_validator("ca_bundle", mode="before")
    @classmethod
    def empty_ca_bundle_is_none(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ObservabilityConfig(BaseSettings):
    service_name: str = Field(default="card-soap-gateway")
    otlp_endpoint: str | None = Field(default=None)
    otlp_insecure: bool = Field(default=True)  # Use HTTPS in production, HTTP only for local dev
    log_record_format: str = Field(default="json")

    model_config = SettingsConfigDict(env_prefix="OTEL_")


class SecurityConfig(BaseSettings):
    cors_allowed_origins: str = Field(default="http://localhost:3000,http://localhost:8000")
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: list[str] = Field(default=["GET"])
    cors_allow_headers: list[str] = Field(default=["Authorization", "Content-Type", "X-Request-ID"])
    sanitize_errors: bool = Field(default=True)  # Hide backend details in error responses

    model_config = SettingsConfigDict(env_prefix="SECURITY_")

    @field_validator("cors_allowed_origins", mode="after")
    @classmethod
    def validate_cors_allowed_origins(cls, v: str | list[str]) -> list[str]:
        """Parse comma-separated string into list of origins."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class Settings(BaseSettings):
    app: AppConfig = Field(default_factory=AppConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    soap: SoapBackendConfig = Field(default_factory=SoapBackendConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)

    @model_validator(mode="after")
    def validate_tls_settings(self) -> Settings:
        """Reject a CA bundle that would never be used."""
        if self.soap.ca_bundle and not self.soap.verify_tls:
            raise ValueError(
                "SOAP_CA_BUNDLE is set but SOAP_VERIFY_TLS is false. "
                "Enable certificate validation or remove the CA bundle."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reload_settings() -> Settings:
    """Reload settings (useful for testing)."""
    get_settings.cache_clear()
    return get_settings()
