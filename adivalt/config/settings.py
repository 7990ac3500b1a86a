# adivalt/config/settings.py

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from adivalt.observability.log_models import LoggerConfig, LogLevel

Environment = Literal["development", "staging", "production", "test"]

_DEFAULT_LEVELS: dict[str, LogLevel] = {
    "development": LogLevel.DEBUG,
    "staging": LogLevel.INFO,
    "production": LogLevel.WARN,
    "test": LogLevel.ERROR,
}


class AppSettings(BaseSettings):
    """
    Explicit configuration value. Build once at startup (or via ``get_settings``)
    and pass it to ``create_app`` / ``Logger``; nothing reads it implicitly.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # --- Application ---
    environment: Environment = Field(
        "development", validation_alias=AliasChoices("environment", "app_env", "node_env")
    )
    service_name: str = Field("adivalt-app", min_length=1)
    version: str = Field("1.0.0", validation_alias=AliasChoices("version", "app_version"))

    # --- Logger ---
    log_level: Optional[LogLevel] = None
    redact_fields: list[str] = Field(
        default_factory=lambda: ["password", "token", "secret", "authorization", "apiKey", "creditCard"]
    )
    pretty_print: Optional[bool] = None
    timestamp_format: str = "ISO"

    # --- Errors ---
    log_errors: bool = True
    include_stack: Optional[bool] = None
    expose_details: Optional[bool] = None

    # --- Responses ---
    include_timestamp: bool = True
    include_request_id: bool = True
    default_page: int = 1
    default_limit: int = 20
    max_limit: int = 100

    # --- Middleware ---
    enable_error_handler: bool = True
    enable_logging: bool = True
    skip_paths: list[str] = Field(default_factory=lambda: ["/health", "/metrics", "/favicon.ico"])

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
            return {"dev": "development", "prod": "production", "stagging": "staging"}.get(v, v)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v: Any) -> Any:
        if v is None or v == "":
            return None
        try:
            return LogLevel.parse(v)
        except (KeyError, ValueError) as e:
            raise ValueError(f"log_level must be one of {[level.name for level in LogLevel]}") from e

    @model_validator(mode="after")
    def check_pagination(self) -> "AppSettings":
        if self.default_page < 1:
            raise ValueError("default_page must be at least 1")
        if not 1 <= self.default_limit <= self.max_limit:
            raise ValueError(f"default_limit must be between 1 and {self.max_limit}")
        return self

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_staging(self) -> bool:
        return self.environment == "staging"

    @property
    def is_test(self) -> bool:
        return self.environment == "test"

    @property
    def effective_log_level(self) -> LogLevel:
        if self.log_level is not None:
            return self.log_level
        return _DEFAULT_LEVELS.get(self.environment, LogLevel.INFO)

    @property
    def effective_include_stack(self) -> bool:
        return self.is_development if self.include_stack is None else self.include_stack

    @property
    def effective_expose_details(self) -> bool:
        return self.is_development if self.expose_details is None else self.expose_details

    def logger_config(self) -> LoggerConfig:
        return LoggerConfig(
            level=self.effective_log_level,
            service=self.service_name,
            environment=self.environment,
            version=self.version,
            redact_fields=tuple(self.redact_fields),
            pretty_print=self.is_development if self.pretty_print is None else self.pretty_print,
            timestamp_format=self.timestamp_format,
        )


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
